# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""One email per list, checked before a member is built, validated or stored."""
from typing import Optional

from mailchimp_proxy.core.errors import ConflictError


class DuplicateGuard:
    """Racy by nature: two concurrent creates may both pass.

    Mailchimp's own "Member Exists" rejection is the backstop for that window.
    """

    def __init__(self, member_repo):
        self._members = member_repo

    def check(self, list_id: str, email_address) -> Optional[ConflictError]:
        if not email_address or not isinstance(email_address, str):
            return None
        if self._members.find_by_email(list_id, email_address):
            return ConflictError(email_address, list_id)
        return None
