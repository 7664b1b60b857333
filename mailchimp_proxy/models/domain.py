# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain records — plain data, NO FastAPI or database dependency.

Each record knows two projections of itself: ``to_dict`` (the local API
shape, every column) and ``to_remote`` (the Mailchimp payload, only the
fields the provider accepts, with absent values dropped).
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Tuple

TRUE_STRINGS = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSE_STRINGS = frozenset({"", "0", "f", "false", "n", "no", "off"})


def coerce_bool(value: Any) -> Any:
    """Turn loosely typed form input ("1", "false", 0) into a bool.

    Strings that are not recognisable flags are returned untouched so the
    validator can report them.
    """
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return value


def normalise_email(value: Any) -> str:
    return str(value or "").strip().lower()


class MailChimpEntity:
    # Fields a client may set through create/update payloads.
    WRITABLE: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, data: Dict[str, Any]):
        return cls(**{name: data[name] for name in cls.WRITABLE if name in data})

    def fill(self, data: Dict[str, Any]) -> None:
        """Overwrite only the writable fields present in ``data``."""
        for name in self.WRITABLE:
            if name in data:
                setattr(self, name, data[name])

    def remote_fields(self) -> List[Tuple[str, Any]]:
        raise NotImplementedError

    def to_remote(self) -> Dict[str, Any]:
        return {key: value for key, value in self.remote_fields() if value is not None}

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class MailChimpList(MailChimpEntity):
    WRITABLE = (
        "name", "contact", "permission_reminder", "campaign_defaults",
        "email_type_option", "use_archive_bar", "notify_on_subscribe",
        "notify_on_unsubscribe", "visibility", "double_optin",
        "marketing_permissions",
    )

    list_id: Optional[str] = None
    mail_chimp_id: Optional[str] = None
    name: Any = None
    contact: Any = None
    permission_reminder: Any = None
    campaign_defaults: Any = None
    email_type_option: Any = None
    use_archive_bar: Any = None
    notify_on_subscribe: Any = None
    notify_on_unsubscribe: Any = None
    visibility: Any = None
    double_optin: Any = None
    marketing_permissions: Any = None

    def remote_fields(self) -> List[Tuple[str, Any]]:
        return [
            ("name", self.name),
            ("contact", self.contact),
            ("permission_reminder", self.permission_reminder),
            ("use_archive_bar", self.use_archive_bar),
            ("campaign_defaults", self.campaign_defaults),
            ("notify_on_subscribe", self.notify_on_subscribe),
            ("notify_on_unsubscribe", self.notify_on_unsubscribe),
            ("email_type_option", self.email_type_option),
            ("visibility", self.visibility),
            ("double_optin", self.double_optin),
            ("marketing_permissions", self.marketing_permissions),
        ]


@dataclass
class MailChimpMember(MailChimpEntity):
    # email_address and list_id are fixed at creation; see CREATE_ONLY.
    WRITABLE = (
        "status", "email_type", "language", "vip", "location",
        "marketing_permissions", "ip_signup", "timestamp_signup", "ip_opt",
        "timestamp_opt", "tags",
    )
    CREATE_ONLY = ("list_id", "email_address")
    # Assigned by Mailchimp, adopted from its responses.
    REMOTE_ASSIGNED = ("email_id", "unique_email_id", "member_rating")

    member_id: Optional[str] = None
    list_id: Optional[str] = None
    mail_chimp_id: Optional[str] = None
    email_address: Any = None
    status: Any = None
    email_type: Any = None
    language: Any = None
    vip: Any = None
    location: Any = None
    marketing_permissions: Any = None
    ip_signup: Any = None
    timestamp_signup: Any = None
    ip_opt: Any = None
    timestamp_opt: Any = None
    tags: Any = None
    email_id: Optional[str] = None
    unique_email_id: Optional[str] = None
    member_rating: Optional[int] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "MailChimpMember":
        member = super().from_payload(data)
        for name in cls.CREATE_ONLY:
            if name in data:
                setattr(member, name, data[name])
        return member

    def adopt_remote(self, response: Dict[str, Any]) -> None:
        for name in self.REMOTE_ASSIGNED:
            if response.get(name) is not None:
                setattr(self, name, response[name])

    def remote_fields(self) -> List[Tuple[str, Any]]:
        return [
            ("email_address", self.email_address),
            ("email_type", self.email_type),
            ("status", self.status),
            ("language", self.language),
            ("vip", self.vip),
            ("location", self.location),
            ("marketing_permissions", self.marketing_permissions),
            ("ip_signup", self.ip_signup),
            ("timestamp_signup", self.timestamp_signup),
            ("ip_opt", self.ip_opt),
            ("timestamp_opt", self.timestamp_opt),
            ("tags", self.tags),
        ]
