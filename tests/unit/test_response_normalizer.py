"""
Tests for ZoomResponse.from_outcome under both status policies.
"""
import pytest  # type: ignore

from zoomkit.exceptions.zoom_exceptions import ZoomAPIError
from zoomkit.sources.client.http.http_response import HTTPResponse
from zoomkit.sources.client.zoom.zoom import (
    BROAD_POLICY,
    STRICT_POLICY,
    ResponsePolicy,
    ZoomResponse,
)

SENTINEL = {"status": 204, "message": "Action successful."}


class TestBroadPolicy:
    """200/201/202/204 are success; empty 202/204 bodies become a sentinel."""

    def test_empty_204_yields_sentinel(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=204), BROAD_POLICY)
        assert result.success
        assert result.data == SENTINEL
        assert result.status_code == 204

    def test_empty_202_yields_sentinel(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=202), BROAD_POLICY)
        assert result.data == SENTINEL

    def test_body_returned_unchanged(self):
        body = {"id": 123, "topic": "Standup"}
        result = ZoomResponse.from_outcome(HTTPResponse(status=200, body=body), BROAD_POLICY)
        assert result.success
        assert result.data == body

    def test_created_with_body(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=201, body={"id": 1}), BROAD_POLICY)
        assert result.success
        assert result.data == {"id": 1}

    def test_empty_200_is_success_without_data(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=200), BROAD_POLICY)
        assert result.success
        assert result.data is None

    def test_vendor_error_message(self):
        result = ZoomResponse.from_outcome(
            HTTPResponse(status=404, body={"code": 3001, "message": "Not found"}), BROAD_POLICY
        )
        assert not result.success
        assert result.error == "Not found (Status Code 404)"
        assert result.status_code == 404

    def test_vendor_error_without_message(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=500), BROAD_POLICY)
        assert result.error == " (Status Code 500)"

    def test_empty_object_on_204_yields_sentinel(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=204, body={}), BROAD_POLICY)
        assert result.data == SENTINEL

    def test_empty_list_on_200_is_data(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=200, body=[]), BROAD_POLICY)
        assert result.success
        assert result.data == []

    def test_sentinel_is_a_copy(self):
        first = ZoomResponse.from_outcome(HTTPResponse(status=204), BROAD_POLICY)
        first.data["status"] = 0
        second = ZoomResponse.from_outcome(HTTPResponse(status=204), BROAD_POLICY)
        assert second.data == SENTINEL


class TestStrictPolicy:
    """Only 200 is success."""

    def test_200_returns_body(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=200, body={"users": []}), STRICT_POLICY)
        assert result.success
        assert result.data == {"users": []}

    @pytest.mark.parametrize("body", [{}, []])
    def test_empty_container_is_returned_as_data(self, body):
        result = ZoomResponse.from_outcome(HTTPResponse(status=200, body=body), STRICT_POLICY)
        assert result.success
        assert result.data == body

    def test_201_is_failure(self):
        result = ZoomResponse.from_outcome(
            HTTPResponse(status=201, body={"message": "Created"}), STRICT_POLICY
        )
        assert not result.success
        assert result.error == "Created (Status Code 201)"

    def test_204_is_failure(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=204), STRICT_POLICY)
        assert not result.success
        assert result.error == " (Status Code 204)"


class TestEngineFailures:

    @pytest.mark.parametrize("policy", [BROAD_POLICY, STRICT_POLICY])
    def test_preflight_errors_joined(self, policy):
        outcome = HTTPResponse(errors=(
            "Required path parameter was not specified: meetingId",
            "Required path parameter was not specified: registrantId",
        ))
        result = ZoomResponse.from_outcome(outcome, policy)
        assert not result.success
        assert result.status_code is None
        assert result.error == (
            "Errors: Required path parameter was not specified: meetingId\n"
            "Required path parameter was not specified: registrantId"
        )

    def test_transport_error(self):
        result = ZoomResponse.from_outcome(HTTPResponse(transport_error="timed out"), BROAD_POLICY)
        assert not result.success
        assert result.status_code is None
        assert result.error == "Transport error: timed out"


class TestNormalizerProperties:

    @pytest.mark.parametrize("outcome", [
        HTTPResponse(status=204),
        HTTPResponse(status=200, body={"a": 1}),
        HTTPResponse(status=404, body={"message": "Not found"}),
        HTTPResponse(errors=("Required path parameter was not specified: id",)),
    ])
    def test_idempotent(self, outcome):
        assert ZoomResponse.from_outcome(outcome, BROAD_POLICY) == ZoomResponse.from_outcome(outcome, BROAD_POLICY)

    def test_custom_policy(self):
        policy = ResponsePolicy(
            success_statuses=frozenset({200, 204}),
            empty_body_statuses=frozenset({204}),
            empty_body_value={"deleted": True},
        )
        result = ZoomResponse.from_outcome(HTTPResponse(status=204), policy)
        assert result.data == {"deleted": True}

    def test_raise_for_error(self):
        ok = ZoomResponse.from_outcome(HTTPResponse(status=200, body={"id": 1}), STRICT_POLICY)
        assert ok.raise_for_error() == {"id": 1}

        failed = ZoomResponse.from_outcome(HTTPResponse(status=404, body={"message": "Not found"}), STRICT_POLICY)
        with pytest.raises(ZoomAPIError) as exc_info:
            failed.raise_for_error()
        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "Not found (Status Code 404)"

    def test_to_json(self):
        result = ZoomResponse.from_outcome(HTTPResponse(status=204), BROAD_POLICY)
        assert '"Action successful."' in result.to_json()
