# type: ignore
"""
Mailchimp Proxy Service — Domain Records & Validation Tests
============================================================
Run:  pytest test_domain.py -v
"""
import pytest

from conftest import make_list_data, make_member_data
from mailchimp_proxy.core.errors import NotFoundError, ids_desc
from mailchimp_proxy.models.domain import MailChimpList, MailChimpMember, coerce_bool
from mailchimp_proxy.schemas import ListPayload, MemberPayload
from mailchimp_proxy.services.validator import validate


# ═══════════════════════════════════════════════════════════════════════════
# RECORDS
# ═══════════════════════════════════════════════════════════════════════════
class TestRecords:
    def test_list_projection_excludes_local_ids(self):
        mc_list = MailChimpList.from_payload(make_list_data())
        mc_list.list_id, mc_list.mail_chimp_id = "local", "remote"
        view = mc_list.to_remote()
        assert "list_id" not in view and "mail_chimp_id" not in view
        assert "double_optin" not in view
        assert view["contact"]["country"] == "US"

    def test_member_projection(self):
        member = MailChimpMember.from_payload(make_member_data(list_id="l-1"))
        member.unique_email_id = "u-1"
        view = member.to_remote()
        assert view["email_address"] == "a@b.com"
        assert view["vip"] is False
        assert "list_id" not in view
        assert "unique_email_id" not in view

    def test_fill_only_present_writable_fields(self):
        member = MailChimpMember.from_payload(make_member_data(list_id="l-1"))
        member.fill({"status": "pending", "email_address": "x@y.com", "list_id": "other"})
        assert member.status == "pending"
        assert member.email_address == "a@b.com"
        assert member.list_id == "l-1"
        assert member.language == "en"

    def test_adopt_remote_ignores_missing_values(self):
        member = MailChimpMember(unique_email_id="keep")
        member.adopt_remote({"id": "x", "member_rating": 4, "unique_email_id": None})
        assert member.member_rating == 4
        assert member.unique_email_id == "keep"

    @pytest.mark.parametrize("raw,expected", [
        ("1", True), ("yes", True), (" TRUE ", True), (1, True),
        ("0", False), ("off", False), ("", False), (0, False),
        (True, True), (None, None), ("maybe", "maybe"),
    ])
    def test_coerce_bool(self, raw, expected):
        assert coerce_bool(raw) == expected


# ═══════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════════════════
class TestValidation:
    def test_valid_list(self):
        assert not validate(make_list_data(), ListPayload).fails

    def test_data_holds_converted_values(self):
        data = validate(make_list_data(email_type_option="yes", double_optin="0"), ListPayload).data
        assert data["email_type_option"] is True
        assert data["double_optin"] is False
        assert "marketing_permissions" not in data
        assert data["contact"] == make_list_data()["contact"]

    def test_failed_validation_has_no_data(self):
        assert validate({}, ListPayload).data == {}

    def test_missing_nested_object_expands_subfields(self):
        data = make_list_data()
        del data["contact"]
        errors = validate(data, ListPayload).errors
        assert errors["contact"] == ["The contact field is required."]
        for sub in ("company", "address1", "city", "state", "zip", "country"):
            assert f"contact.{sub}" in errors
        assert "contact.address2" not in errors
        assert "contact.phone" not in errors

    def test_missing_nested_field_dotted_key(self):
        data = make_list_data()
        del data["campaign_defaults"]["subject"]
        errors = validate(data, ListPayload).errors
        assert list(errors) == ["campaign_defaults.subject"]

    def test_bad_notify_email(self):
        errors = validate(make_list_data(notify_on_subscribe="not-an-email"), ListPayload).errors
        assert "notify_on_subscribe" in errors

    def test_visibility_choice(self):
        assert "visibility" in validate(make_list_data(visibility="public"), ListPayload).errors

    def test_member_required_fields(self):
        errors = validate({}, MemberPayload).errors
        assert set(errors) == {"email_address", "status"}

    def test_member_nested_location(self):
        errors = validate(make_member_data(location={"latitude": "north"}), MemberPayload).errors
        assert "location.latitude" in errors
        assert "location.longitude" in errors

    def test_member_tags_must_be_strings(self):
        errors = validate(make_member_data(tags=[{"name": "x"}]), MemberPayload).errors
        assert "tags.0" in errors


# ═══════════════════════════════════════════════════════════════════════════
# ERROR MESSAGES
# ═══════════════════════════════════════════════════════════════════════════
class TestErrors:
    def test_ids_desc_skips_empty(self):
        assert ids_desc("yxb", "hnq") == "List Id:yxb|Member Id:hnq"
        assert ids_desc(list_id="a", mailchimp_member_id="m") == "List Id:a|Member Mailchimp Id:m"
        assert ids_desc() == ""

    def test_not_found_payload(self):
        exc = NotFoundError("MailChimpList", ids_desc("abc"))
        assert exc.status_code == 404
        assert exc.to_payload() == {"message": "MailChimpList not found [List Id:abc]"}
