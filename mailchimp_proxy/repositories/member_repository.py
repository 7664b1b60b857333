# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for list members."""
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import text

from mailchimp_proxy.models.domain import MailChimpMember, normalise_email
from mailchimp_proxy.repositories.base import SqlRepository, dump_json, load_json, to_bool

MEMBER_COLS = (
    "id, list_id, mail_chimp_id, email_address, status, email_type, language, vip, "
    "location, marketing_permissions, ip_signup, timestamp_signup, ip_opt, timestamp_opt, "
    "tags, email_id, unique_email_id, member_rating"
)


def _row_to_member(row) -> MailChimpMember:
    return MailChimpMember(
        member_id=str(row["id"]),
        list_id=row["list_id"],
        mail_chimp_id=row["mail_chimp_id"],
        email_address=row["email_address"],
        status=row["status"],
        email_type=row["email_type"],
        language=row["language"],
        vip=to_bool(row["vip"]),
        location=load_json(row["location"]),
        marketing_permissions=load_json(row["marketing_permissions"]),
        ip_signup=row["ip_signup"],
        timestamp_signup=row["timestamp_signup"],
        ip_opt=row["ip_opt"],
        timestamp_opt=row["timestamp_opt"],
        tags=load_json(row["tags"]),
        email_id=row["email_id"],
        unique_email_id=row["unique_email_id"],
        member_rating=row["member_rating"],
    )


class MemberRepository(SqlRepository):
    TABLE = "mail_chimp_members"
    CRITERIA = {
        "member_id": "id",
        "list_id": "list_id",
        "mail_chimp_id": "mail_chimp_id",
        "email_address": "email_address",
    }

    # ── Read ───────────────────────────────────────────────────────────

    def find_by_id(self, member_id: str) -> Optional[MailChimpMember]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {MEMBER_COLS} FROM {self.TABLE} WHERE id = :id"),
                {"id": member_id},
            ).mappings().fetchone()
        return _row_to_member(row) if row else None

    def find_by(self, **criteria: Any) -> List[MailChimpMember]:
        where, params = self._where(criteria)
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(f"SELECT {MEMBER_COLS} FROM {self.TABLE}{where} ORDER BY email_address, id"),
                params,
            ).mappings().fetchall()
        return [_row_to_member(r) for r in rows]

    def find_by_email(self, list_id: str, email_address: str) -> List[MailChimpMember]:
        """Members of ``list_id`` whose email matches, ignoring case and padding."""
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(f"SELECT {MEMBER_COLS} FROM {self.TABLE} "
                     "WHERE list_id = :list_id AND LOWER(TRIM(email_address)) = :email"),
                {"list_id": list_id, "email": normalise_email(email_address)},
            ).mappings().fetchall()
        return [_row_to_member(r) for r in rows]

    # ── Write ──────────────────────────────────────────────────────────

    def save(self, member: MailChimpMember) -> MailChimpMember:
        """Insert or update; a member without an id gets a fresh UUID."""
        if not member.member_id:
            member.member_id = str(uuid.uuid4())
        columns: Dict[str, Any] = {
            "list_id": member.list_id,
            "mail_chimp_id": member.mail_chimp_id,
            "email_address": member.email_address,
            "status": member.status,
            "email_type": member.email_type,
            "language": member.language,
            "vip": to_bool(member.vip),
            "location": dump_json(member.location),
            "marketing_permissions": dump_json(member.marketing_permissions),
            "ip_signup": member.ip_signup,
            "timestamp_signup": member.timestamp_signup,
            "ip_opt": member.ip_opt,
            "timestamp_opt": member.timestamp_opt,
            "tags": dump_json(member.tags),
            "email_id": member.email_id,
            "unique_email_id": member.unique_email_id,
            "member_rating": member.member_rating,
        }
        with self._engine.begin() as conn:
            self._upsert(conn, member.member_id, columns)
        return member

    def remove(self, member: MailChimpMember) -> None:
        with self._engine.begin() as conn:
            conn.execute(text(f"DELETE FROM {self.TABLE} WHERE id = :id"), {"id": member.member_id})

    def remove_by_list(self, list_id: str) -> int:
        with self._engine.begin() as conn:
            return conn.execute(
                text(f"DELETE FROM {self.TABLE} WHERE list_id = :list_id"), {"list_id": list_id}
            ).rowcount
