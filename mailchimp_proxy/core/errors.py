# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Error kinds raised by the sync services.

Every kind maps to one HTTP status and renders the same JSON envelope:
``{"message": str, "errors"?: {field: [messages]}}``.
"""
from typing import Any, Dict, List, Optional

ENTITY_LIST = "MailChimpList"
ENTITY_MEMBER = "MailChimpMember"


def ids_desc(list_id: Optional[str] = None, member_id: Optional[str] = None,
             mailchimp_list_id: Optional[str] = None,
             mailchimp_member_id: Optional[str] = None) -> str:
    """Pipe-joined ``Label:value`` pairs, e.g. ``List Id:yxb|Member Id:hnq``."""
    labelled = (
        ("List Id", list_id),
        ("Member Id", member_id),
        ("List Mailchimp Id", mailchimp_list_id),
        ("Member Mailchimp Id", mailchimp_member_id),
    )
    return "|".join(f"{label}:{value}" for label, value in labelled if value)


class SyncError(Exception):
    status_code = 400

    def __init__(self, message: str, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message}
        if self.errors:
            payload["errors"] = self.errors
        return payload


class ValidationError(SyncError):
    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__("Invalid data given", errors)


class ConflictError(SyncError):
    def __init__(self, email_address: str, list_id: str):
        super().__init__(
            "A list cannot have duplicate Emails address. "
            f"[Email: {email_address}] [List ID: {list_id}]"
        )


class NotAllowedChangeError(SyncError):
    def __init__(self, original: str, new: str):
        super().__init__(
            "Member Email address is not allowed to change by this endpoint. "
            f"Original: {original}; New: {new}"
        )


class NotFoundError(SyncError):
    status_code = 404

    def __init__(self, entity_type: str, desc: str = ""):
        super().__init__(f"{entity_type} not found [{desc}]")
        self.entity_type = entity_type


class NotSyncedError(SyncError):
    def __init__(self, entity_type: str, desc: str = ""):
        super().__init__(f"{entity_type} not found on remote system [{desc}]")
        self.entity_type = entity_type


class RemoteError(SyncError):
    """Any failed Mailchimp call: HTTP error status, transport failure or bad body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.remote_status = status_code
