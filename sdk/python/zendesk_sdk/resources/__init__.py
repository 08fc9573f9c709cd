"""Resource clients, one class per API area."""

from .articles import Articles
from .attachments import Attachments
from .base import Resource
from .groups import GroupMemberships, Groups
from .job_statuses import JobStatuses
from .organizations import Organizations
from .search import Search
from .ticket_export import TicketExport
from .tickets import Tickets
from .users import Users

__all__ = [
    "Resource",
    "Articles",
    "Attachments",
    "GroupMemberships",
    "Groups",
    "JobStatuses",
    "Organizations",
    "Search",
    "TicketExport",
    "Tickets",
    "Users",
]
