# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the list and member repositories."""
from mailchimp_proxy.repositories.list_repository import ListRepository
from mailchimp_proxy.repositories.member_repository import MemberRepository

__all__ = ["ListRepository", "MemberRepository"]
