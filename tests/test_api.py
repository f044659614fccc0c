"""Tests for response envelope handling."""

import httpx
import pytest

from conftest import envelope
from travel_console.services import api


class TestNormalizeResponse:
    """Both envelope formats fold into ApiResponse."""

    def test_new_format(self):
        response = api.normalize_response(envelope({"items": [1]}, message="Fetched"))
        assert response.success is True
        assert response.data == {"items": [1]}
        assert response.message == "Fetched"

    def test_legacy_format(self):
        payload = {
            "header": {"success": False, "message": "Bad", "messages": [{"message": "Nope"}]},
            "body": {"x": 1},
        }
        response = api.normalize_response(payload)
        assert response.success is False
        assert response.data == {"x": 1}
        assert response.message == "Bad"
        assert response.errors[0]["message"] == "Nope"

    @pytest.mark.parametrize("payload", [None, [], {"data": 1}, "text"])
    def test_unknown_format(self, payload):
        response = api.normalize_response(payload)
        assert response.success is False
        assert response.message == "Unknown response format"

    def test_keypath_lookup(self):
        response = api.normalize_response(envelope({"notifications": {"unread": {"total": 3}}}))
        assert response.get("notifications.unread.total") == 3
        assert response.get("notifications.read.total", 0) == 0

    def test_dotted_record_keys(self):
        documents = {"total": 1, "items": [{"id": 1, "file.name": "a.pdf"}]}
        response = api.normalize_response(envelope({"documents": documents}))
        assert response.get("documents") == documents
        assert response.get("documents.items[0]")["file.name"] == "a.pdf"
        assert response.get("documents.total") == 1

    def test_legacy_body_with_dotted_keys(self):
        payload = {
            "header": {"success": True, "message": "OK"},
            "body": {"documents": {"items": [{"file.name": "a.pdf"}]}},
        }
        response = api.normalize_response(payload)
        assert response.success is True
        assert response.get("documents.items[0]") == {"file.name": "a.pdf"}


class TestExtractErrorMessage:
    def test_prefers_structured_errors(self):
        payload = {"success": False, "message": "Top", "errors": [{"message": "Field"}]}
        assert api.extract_error_message(payload) == "Field"

    def test_falls_back_to_message(self):
        assert api.extract_error_message({"success": False, "message": "Top"}) == "Top"

    def test_legacy_messages(self):
        payload = {"header": {"messages": [{"message": "Legacy"}], "message": "Header"}}
        assert api.extract_error_message(payload) == "Legacy"

    def test_dotted_keys_elsewhere_in_payload(self):
        payload = {"success": False, "message": "Top", "data": {"file.name": "a.pdf"}}
        assert api.extract_error_message(payload) == "Top"

    def test_default(self):
        assert api.extract_error_message(None, "Default") == "Default"
        assert api.extract_error_message({}, "Default") == "Default"


class TestRequest:
    """api.request raises ApiError for every failure mode."""

    def test_success_returns_envelope(self, mock_api):
        client = mock_api(lambda request: httpx.Response(200, json=envelope({"ok": True})))
        response = api.request(client, "GET", "/ping", "Failed")
        assert response.get("ok") is True

    def test_http_error_status(self, mock_api):
        client = mock_api(
            lambda request: httpx.Response(404, json={"success": False, "message": "Missing"})
        )
        with pytest.raises(api.ApiError) as exc_info:
            api.request(client, "GET", "/thing", "Failed")
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Missing"

    def test_dotted_keys_in_records(self, mock_api):
        body = envelope({"documents": {"items": [{"id": 1, "file.name": "a.pdf"}]}})
        client = mock_api(lambda request: httpx.Response(200, json=body))
        response = api.request(client, "GET", "/documents", "Failed")
        assert response.get("documents.items")[0]["file.name"] == "a.pdf"

    def test_unsuccessful_envelope(self, mock_api):
        client = mock_api(lambda request: httpx.Response(200, json=envelope(success=False, message="Denied")))
        with pytest.raises(api.ApiError, match="Denied"):
            api.request(client, "PUT", "/thing", "Failed")

    def test_transport_error_is_wrapped(self, mock_api):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = mock_api(handler)
        with pytest.raises(api.ApiError, match="Network down") as exc_info:
            api.request(client, "GET", "/thing", "Network down")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_non_json_error_uses_default(self, mock_api):
        client = mock_api(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(api.ApiError, match="Failed"):
            api.request(client, "GET", "/thing", "Failed")
