# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from mailchimp_proxy.core.database import engine
from mailchimp_proxy.repositories import ListRepository, MemberRepository
from mailchimp_proxy.services.list_service import ListService
from mailchimp_proxy.services.mailchimp_client import MailChimpClient
from mailchimp_proxy.services.member_service import MemberService

_list_repo = ListRepository(engine)
_member_repo = MemberRepository(engine)
_mailchimp = MailChimpClient()
_list_service = ListService(_list_repo, _member_repo, _mailchimp)
_member_service = MemberService(_list_repo, _member_repo, _mailchimp)


def get_list_repo() -> ListRepository:
    return _list_repo


def get_member_repo() -> MemberRepository:
    return _member_repo


def get_mailchimp_client() -> MailChimpClient:
    return _mailchimp


def get_list_service() -> ListService:
    return _list_service


def get_member_service() -> MemberService:
    return _member_service
