"""Endpoints known to support cursor pagination.

See https://support.zendesk.com/hc/en-us/articles/5591904358938
"""

import re
from typing import FrozenSet, Pattern, Tuple

CURSOR_PAGINATED_ENDPOINTS: FrozenSet[str] = frozenset(
    {
        "views",
        "users",
        "triggers/active",
        "triggers",
        "tickets_audits",
        "tickets",
        "tickets/incremental/.*",
        "incremental/tickets/.*",
        "ticket_metrics",
        "ticket/.+/audits",
        "tags",
        "suspended_tickets",
        "skips",
        "satisfaction_ratings",
        "requests/.+/comments",
        "recipient_addresses",
        "organizations/.+/subscriptions",
        "organizations/.+/tickets",
        "organizations/.+/users",
        "organizations",
        "oauth/tokens",
        "oauth/global_clients",
        "oauth/clients",
        "macros",
        "groups/assignable",
        "groups/.+/memberships",
        "groups",
        "group_memberships",
        "deleted_tickets",
        "automations",
        "activities",
        "help_center/.+/articles",
        "help_center/.+/articles/.+/comments",
        "help_center/.+/articles/.+/labels",
        "help_center/.+/articles/.+/subscriptions",
        "help_center/.+/articles/.+/votes",
        "help_center/.+/categories/.+/articles",
        "help_center/.+/categories/.+/sections",
        "help_center/.+/sections",
        "help_center/.+/sections/.+/subscriptions",
        "help_center/.+/sections/.+/articles",
        "help_center/articles/.+/translations",
        "help_center/articles/labels",
        "help_center/categories/.+/translations",
        "help_center/incremental/articles",
        "help_center/sections/.+/translations",
        "help_center/user_segments",
        "help_center/user_segments/.+/topics",
        "help_center/user_segments/applicable",
        "help_center/users/.+/comments",
        "help_center/users/.+/subscriptions",
        "help_center/users/.+/user_segments",
        "help_center/users/.+/votes",
        "help_center/users/.+/articles",
        "community/topics",
        "community/posts/.+/comments",
        "community/posts/.+/comments/.+/votes",
        "community/posts/.+/subscriptions",
        "community/posts/.+/votes",
        "community/topics/.+/subscriptions",
        "community/users/.+/posts",
        "community/users/.+/comments",
    }
)


def _compile(pattern: str) -> Pattern[str]:
    # "{id}" style placeholders match any segment content
    return re.compile("^" + re.sub(r"{.+?}", ".+", pattern) + "$")


class EndpointChecker:
    """Decides whether an endpoint path supports cursor pagination."""

    def __init__(self, endpoints: FrozenSet[str] = CURSOR_PAGINATED_ENDPOINTS) -> None:
        self._patterns: Tuple[Pattern[str], ...] = tuple(
            _compile(pattern) for pattern in sorted(endpoints)
        )

    def supports_cursor_pagination(self, endpoint: str) -> bool:
        """True when ``endpoint`` (a path without base or suffix) is listed."""
        return any(pattern.match(endpoint) for pattern in self._patterns)


DEFAULT_ENDPOINT_CHECKER = EndpointChecker()
