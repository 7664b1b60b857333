# type: ignore
"""
Shared fixtures: an in-memory SQLite store and a mocked Mailchimp client.

The environment is set before anything from mailchimp_proxy is imported so
the engine singleton binds to SQLite instead of a real database.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("MAILCHIMP_API_KEY", "test0000000000000000000000000000-us1")

from unittest.mock import MagicMock

import pytest
from sqlalchemy import text

from mailchimp_proxy.core.database import engine, init_schema
from mailchimp_proxy.repositories import ListRepository, MemberRepository
from mailchimp_proxy.services.list_service import ListService
from mailchimp_proxy.services.mailchimp_client import MailChimpClient
from mailchimp_proxy.services.member_service import MemberService

init_schema(engine)


# ── Payloads ──────────────────────────────────────────────────────────────
LIST_DATA = {
    "name": "New list",
    "permission_reminder": "You signed up for updates on Greeks economy.",
    "email_type_option": False,
    "contact": {
        "company": "Doe Ltd.",
        "address1": "DoeStreet 1",
        "address2": "",
        "city": "Doesy",
        "state": "Doedoe",
        "zip": "1672-12",
        "country": "US",
        "phone": "55533344412",
    },
    "campaign_defaults": {
        "from_name": "John Doe",
        "from_email": "john@doe.com",
        "subject": "My new campaign!",
        "language": "US",
    },
    "visibility": "prv",
    "use_archive_bar": False,
    "notify_on_subscribe": "notify@doe.com",
    "notify_on_unsubscribe": "notify@doe.com",
}

MEMBER_DATA = {
    "email_address": "a@b.com",
    "status": "subscribed",
    "email_type": "html",
    "language": "en",
    "vip": False,
    "tags": ["newsletter"],
    "location": {"latitude": 52.37, "longitude": 4.89},
}


def make_list_data(**overrides):
    data = {k: (dict(v) if isinstance(v, dict) else v) for k, v in LIST_DATA.items()}
    data.update(overrides)
    return data


def make_member_data(**overrides):
    data = dict(MEMBER_DATA)
    data.update(overrides)
    return data


# ── Fixtures ──────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def clean_store():
    with engine.begin() as conn:
        conn.execute(text("DELETE FROM mail_chimp_members"))
        conn.execute(text("DELETE FROM mail_chimp_lists"))
    yield


@pytest.fixture
def list_repo():
    return ListRepository(engine)


@pytest.fixture
def member_repo():
    return MemberRepository(engine)


@pytest.fixture
def remote():
    """Mailchimp stand-in; every call succeeds unless a test says otherwise."""
    mock = MagicMock(spec=MailChimpClient)
    mock.post.return_value = {"id": "mc-list-1"}
    mock.patch.return_value = {"id": "mc-list-1"}
    mock.put.return_value = {"id": "mc-member-1"}
    mock.delete.return_value = {}
    return mock


@pytest.fixture
def list_service(list_repo, member_repo, remote):
    return ListService(list_repo, member_repo, remote)


@pytest.fixture
def member_service(list_repo, member_repo, remote):
    return MemberService(list_repo, member_repo, remote)
