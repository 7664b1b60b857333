# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Pydantic schemas.

``*Payload`` models are the validation rules applied to the remote
projection of a record before anything is persisted or sent to Mailchimp.
``*Out`` models shape the local API responses.
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field


# ── Lists ─────────────────────────────────────────────────────────────────

class Contact(BaseModel):
    company: str
    address1: str
    address2: Optional[str] = None
    city: str
    state: str
    zip: str
    country: str = Field(..., min_length=2, max_length=2)
    phone: Optional[str] = None


class CampaignDefaults(BaseModel):
    from_name: str
    from_email: str
    subject: str
    language: str


class ListPayload(BaseModel):
    name: str
    contact: Contact
    permission_reminder: str
    use_archive_bar: Optional[bool] = None
    campaign_defaults: CampaignDefaults
    notify_on_subscribe: Optional[EmailStr] = None
    notify_on_unsubscribe: Optional[EmailStr] = None
    email_type_option: bool
    visibility: Optional[Literal["pub", "prv"]] = None
    double_optin: Optional[bool] = None
    marketing_permissions: Optional[bool] = None


# ── Members ───────────────────────────────────────────────────────────────

class Location(BaseModel):
    latitude: float
    longitude: float
    gmtoff: Optional[int] = None
    dstoff: Optional[int] = None
    country_code: Optional[str] = None
    timezone: Optional[str] = None


class MarketingPermission(BaseModel):
    marketing_permission_id: str
    enabled: bool


class MemberPayload(BaseModel):
    email_address: EmailStr
    email_type: Optional[Literal["html", "text"]] = None
    status: Literal["subscribed", "unsubscribed", "cleaned", "pending", "transactional"]
    language: Optional[str] = None
    vip: Optional[bool] = None
    location: Optional[Location] = None
    marketing_permissions: Optional[List[MarketingPermission]] = None
    ip_signup: Optional[str] = None
    timestamp_signup: Optional[str] = None
    ip_opt: Optional[str] = None
    timestamp_opt: Optional[str] = None
    tags: Optional[List[str]] = None


# ── Responses ─────────────────────────────────────────────────────────────

class ListOut(BaseModel):
    list_id: str
    mail_chimp_id: Optional[str] = None
    name: str
    contact: Dict[str, Any]
    permission_reminder: str
    campaign_defaults: Dict[str, Any]
    email_type_option: bool
    use_archive_bar: Optional[bool] = None
    notify_on_subscribe: Optional[str] = None
    notify_on_unsubscribe: Optional[str] = None
    visibility: Optional[str] = None
    double_optin: Optional[bool] = None
    marketing_permissions: Optional[bool] = None


class MemberOut(BaseModel):
    member_id: str
    list_id: str
    mail_chimp_id: Optional[str] = None
    email_address: str
    status: str
    email_type: Optional[str] = None
    language: Optional[str] = None
    vip: Optional[bool] = None
    location: Optional[Dict[str, Any]] = None
    marketing_permissions: Optional[List[Dict[str, Any]]] = None
    ip_signup: Optional[str] = None
    timestamp_signup: Optional[str] = None
    ip_opt: Optional[str] = None
    timestamp_opt: Optional[str] = None
    tags: Optional[List[str]] = None
    email_id: Optional[str] = None
    unique_email_id: Optional[str] = None
    member_rating: Optional[int] = None


class ErrorResponse(BaseModel):
    message: str
    errors: Optional[Dict[str, List[str]]] = None
