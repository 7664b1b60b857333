# type: ignore
"""
Mailchimp Proxy Service — Mailchimp API Client Tests
=====================================================
Run:  pytest test_mailchimp_client.py -v
"""
import base64
import json

import httpx
import pytest

from mailchimp_proxy.core.config import _mailchimp_base_url
from mailchimp_proxy.core.errors import RemoteError
from mailchimp_proxy.services.mailchimp_client import MailChimpClient

BASE_URL = "https://us6.api.mailchimp.com/3.0"


def _client(handler):
    return MailChimpClient(base_url=BASE_URL, api_key="secret-us6",
                           transport=httpx.MockTransport(handler))


# ═══════════════════════════════════════════════════════════════════════════
# SUCCESSFUL CALLS
# ═══════════════════════════════════════════════════════════════════════════
class TestSuccess:
    def test_post_sends_json_with_basic_auth(self):
        captured = {}

        def handler(request):
            captured["method"] = request.method
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "abc123", "name": "New list"})

        result = _client(handler).post("lists", {"name": "New list"})
        assert result == {"id": "abc123", "name": "New list"}
        assert captured["method"] == "POST"
        assert captured["url"] == f"{BASE_URL}/lists"
        expected = base64.b64encode(b"apikey:secret-us6").decode()
        assert captured["auth"] == f"Basic {expected}"
        assert captured["body"] == {"name": "New list"}

    @pytest.mark.parametrize("verb", ["put", "patch"])
    def test_update_verbs(self, verb):
        def handler(request):
            assert request.method == verb.upper()
            assert request.url.path == "/3.0/lists/abc/members/def"
            return httpx.Response(200, json={"id": "def"})

        assert getattr(_client(handler), verb)("lists/abc/members/def", {"status": "pending"}) == {"id": "def"}

    def test_empty_body_is_empty_dict(self):
        client = _client(lambda request: httpx.Response(204))
        assert client.delete("lists/abc") == {}

    def test_get_passes_query(self):
        def handler(request):
            assert request.url.params["count"] == "5"
            return httpx.Response(200, json={"lists": []})

        assert _client(handler).get("lists", params={"count": 5}) == {"lists": []}

    def test_non_object_json_is_wrapped(self):
        client = _client(lambda request: httpx.Response(200, json=["a", "b"]))
        assert client.get("lists") == {"data": ["a", "b"]}


# ═══════════════════════════════════════════════════════════════════════════
# FAILURES
# ═══════════════════════════════════════════════════════════════════════════
class TestFailures:
    def test_problem_document_message(self):
        client = _client(lambda request: httpx.Response(
            400, json={"title": "Member Exists", "detail": "a@b.com is already a list member.",
                       "status": 400}))
        with pytest.raises(RemoteError) as exc_info:
            client.post("lists/abc/members", {"email_address": "a@b.com"})
        assert exc_info.value.message == "Member Exists: a@b.com is already a list member."
        assert exc_info.value.remote_status == 400

    def test_title_only(self):
        client = _client(lambda request: httpx.Response(404, json={"title": "Resource Not Found"}))
        with pytest.raises(RemoteError, match="^Resource Not Found$"):
            client.delete("lists/missing")

    def test_error_without_json_body(self):
        client = _client(lambda request: httpx.Response(503, text="upstream down"))
        with pytest.raises(RemoteError) as exc_info:
            client.get("lists")
        assert exc_info.value.message == "Mailchimp responded with HTTP 503"

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("Name or service not known", request=request)

        with pytest.raises(RemoteError, match="Name or service not known"):
            _client(handler).get("lists")

    def test_unreadable_success_body(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(RemoteError, match="unreadable body"):
            client.get("lists")

    def test_remote_error_renders_envelope(self):
        client = _client(lambda request: httpx.Response(401, json={"title": "API Key Invalid"}))
        with pytest.raises(RemoteError) as exc_info:
            client.get("lists")
        assert exc_info.value.status_code == 400
        assert exc_info.value.to_payload() == {"message": "API Key Invalid"}


# ═══════════════════════════════════════════════════════════════════════════
# CONFIG
# ═══════════════════════════════════════════════════════════════════════════
class TestBaseUrl:
    def test_data_center_from_key(self):
        assert _mailchimp_base_url("0123456789abcdef-us19") == "https://us19.api.mailchimp.com/3.0"

    def test_key_without_suffix_defaults(self):
        assert _mailchimp_base_url("") == "https://us1.api.mailchimp.com/3.0"
