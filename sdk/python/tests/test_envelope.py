"""Tests for response classification, envelope unwrapping and side-loading."""

import copy

import pytest

from zendesk_sdk.envelope import (
    check_request_response,
    find_body,
    flatten,
    next_page_link,
    populate_fields,
    process_response_body,
)
from zendesk_sdk.exceptions import (
    ApiError,
    EmptyResultError,
    NoContentError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)
from zendesk_sdk.models import ResourceMeta, SideLoadRule
from zendesk_sdk.transport import TransportResponse


def response(status=200, status_text="OK", headers=None):
    return TransportResponse(status=status, status_text=status_text, headers=headers or {})


class TestCheckRequestResponse:
    def test_success_returns_result(self):
        result = {"ticket": {"id": 1}}
        assert check_request_response(response(), result) is result

    def test_empty_result(self):
        with pytest.raises(EmptyResultError) as exc_info:
            check_request_response(response(), None)
        assert exc_info.value.status_code == 204

    def test_no_content_is_returned_not_raised(self):
        marker = check_request_response(response(204, "No Content"), {})
        assert isinstance(marker, NoContentError)
        assert marker.message == "No Content"
        assert marker.status_code == 204

    def test_no_content_without_reason_phrase(self):
        assert isinstance(check_request_response(response(204, ""), {}), NoContentError)

    def test_retry_after_on_success_status_is_rate_limited(self):
        with pytest.raises(RateLimitError) as exc_info:
            check_request_response(response(200, headers={"Retry-After": "30"}), {"ok": True})
        assert exc_info.value.status_code == 429
        assert exc_info.value.retry_after == 30

    @pytest.mark.parametrize(
        "status, error_class",
        [(401, UnauthorizedError), (404, NotFoundError), (429, RateLimitError), (503, ServerError)],
    )
    def test_fail_codes_are_classified(self, status, error_class):
        body = {"error": "RecordNotFound", "description": "Not found"}
        with pytest.raises(error_class) as exc_info:
            check_request_response(response(status, "Nope"), body)
        assert exc_info.value.status_code == status
        assert exc_info.value.result is body

    def test_unprocessable_entity(self):
        with pytest.raises(ApiError) as exc_info:
            check_request_response(response(422), {"error": "RecordInvalid"})
        assert type(exc_info.value) is ApiError
        assert exc_info.value.status_code == 422
        assert "Unprocessable Entity" in str(exc_info.value)

    def test_status_outside_fail_table_passes_through(self):
        result = {"error": "bad gateway"}
        assert check_request_response(response(502, "Bad Gateway"), result) is result


class TestFindBody:
    def test_first_declared_name_present_wins(self):
        result = {"ticket": {"id": 1}, "audits": [{"id": 2}]}
        assert find_body(result, ("tickets", "ticket", "audits")) == {"id": 1}

    def test_unknown_envelope_is_returned_as_is(self):
        result = {"something_else": []}
        assert find_body(result, ("tickets", "ticket")) is result

    def test_non_mapping_results_pass_through(self):
        marker = NoContentError()
        assert find_body(marker, ("tickets",)) is marker


TICKET_RULES = (
    SideLoadRule(field="requester_id", name="requester", dataset="users"),
    SideLoadRule(field="organization_id", name="organization", dataset="organizations"),
)


class TestPopulateFields:
    def envelope(self):
        return {
            "tickets": [
                {"id": 1, "requester_id": 10, "organization_id": 100},
                {"id": 2, "requester_id": 11},
                {"id": 3, "requester_id": 99},
            ],
            "users": [{"id": 10, "name": "Ada"}, {"id": 11, "name": "Grace"}],
            "organizations": [{"id": 100, "name": "Acme"}],
        }

    def test_single_match_is_attached(self):
        envelope = self.envelope()
        tickets = populate_fields(envelope["tickets"], envelope, TICKET_RULES)
        assert tickets[0]["requester"] == {"id": 10, "name": "Ada"}
        assert tickets[0]["organization"] == {"id": 100, "name": "Acme"}
        assert tickets[1]["requester"] == {"id": 11, "name": "Grace"}

    def test_missing_match_attaches_none(self):
        envelope = self.envelope()
        tickets = populate_fields(envelope["tickets"], envelope, TICKET_RULES)
        assert tickets[2]["requester"] is None

    def test_records_without_the_field_are_untouched(self):
        envelope = self.envelope()
        tickets = populate_fields(envelope["tickets"], envelope, TICKET_RULES)
        assert "organization" not in tickets[1]

    def test_datasets_are_not_modified(self):
        envelope = self.envelope()
        users = copy.deepcopy(envelope["users"])
        organizations = copy.deepcopy(envelope["organizations"])
        populate_fields(envelope["tickets"], envelope, TICKET_RULES)
        assert envelope["users"] == users
        assert envelope["organizations"] == organizations

    def test_missing_dataset_attaches_nothing(self):
        envelope = {"tickets": [{"id": 1, "requester_id": 10}]}
        tickets = populate_fields(envelope["tickets"], envelope, TICKET_RULES)
        assert tickets == [{"id": 1, "requester_id": 10}]

    def test_empty_dataset_attaches_empty_values(self):
        envelope = {
            "user": {"id": 1, "organization_id": 3},
            "organizations": [],
            "groups": [],
            "identities": [],
        }
        rules = (
            SideLoadRule(field="organization_id", name="organization", dataset="organizations"),
            SideLoadRule(field="id", name="group", dataset="groups", all=True),
            SideLoadRule(field="id", name="identity", dataset="identities", array=True, data_key="user_id"),
        )

        user = populate_fields(envelope["user"], envelope, rules)

        assert user == {"id": 1, "organization_id": 3, "organization": None, "group": [], "identity": []}

    def test_all_copies_the_whole_dataset(self):
        envelope = {"user": {"id": 1}, "groups": [{"id": 5}, {"id": 6}]}
        rules = (SideLoadRule(field="id", name="group", dataset="groups", all=True),)
        user = populate_fields(envelope["user"], envelope, rules)
        assert user["group"] == [{"id": 5}, {"id": 6}]
        assert user["group"] is not envelope["groups"]

    def test_array_collects_every_match_on_data_key(self):
        envelope = {
            "users": [{"id": 1}, {"id": 2}],
            "identities": [
                {"id": 7, "user_id": 1},
                {"id": 8, "user_id": 2},
                {"id": 9, "user_id": 1},
            ],
        }
        rules = (
            SideLoadRule(field="id", name="identity", dataset="identities", array=True, data_key="user_id"),
        )
        users = populate_fields(envelope["users"], envelope, rules)
        assert [identity["id"] for identity in users[0]["identity"]] == [7, 9]
        assert [identity["id"] for identity in users[1]["identity"]] == [8]


class TestProcessResponseBody:
    def test_unwraps_and_side_loads(self):
        meta = ResourceMeta(json_api_names=("tickets", "ticket"), side_load_map=TICKET_RULES)
        envelope = {
            "ticket": {"id": 1, "requester_id": 10},
            "users": [{"id": 10, "name": "Ada"}],
        }
        assert process_response_body(envelope, meta) == {
            "id": 1,
            "requester_id": 10,
            "requester": {"id": 10, "name": "Ada"},
        }


class TestPaginationHelpers:
    def test_cursor_link_is_preferred(self):
        page = {"links": {"next": "cursor-url"}, "next_page": "offset-url"}
        assert next_page_link(page) == "cursor-url"

    def test_offset_link(self):
        assert next_page_link({"links": {"next": None}, "next_page": "offset-url"}) == "offset-url"

    def test_no_link(self):
        assert next_page_link({"next_page": None}) is None
        assert next_page_link(NoContentError()) is None

    def test_flatten_is_one_level(self):
        assert flatten([[1, 2], [3], 4, [[5]]]) == [1, 2, 3, 4, [5]]
