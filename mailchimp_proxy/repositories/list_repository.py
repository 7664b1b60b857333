# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for mailing lists."""
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import text

from mailchimp_proxy.models.domain import MailChimpList
from mailchimp_proxy.repositories.base import SqlRepository, dump_json, load_json, to_bool

LIST_COLS = (
    "id, mail_chimp_id, name, contact, permission_reminder, campaign_defaults, "
    "email_type_option, use_archive_bar, notify_on_subscribe, notify_on_unsubscribe, "
    "visibility, double_optin, marketing_permissions"
)


def _row_to_list(row) -> MailChimpList:
    return MailChimpList(
        list_id=str(row["id"]),
        mail_chimp_id=row["mail_chimp_id"],
        name=row["name"],
        contact=load_json(row["contact"]),
        permission_reminder=row["permission_reminder"],
        campaign_defaults=load_json(row["campaign_defaults"]),
        email_type_option=to_bool(row["email_type_option"]),
        use_archive_bar=to_bool(row["use_archive_bar"]),
        notify_on_subscribe=row["notify_on_subscribe"],
        notify_on_unsubscribe=row["notify_on_unsubscribe"],
        visibility=row["visibility"],
        double_optin=to_bool(row["double_optin"]),
        marketing_permissions=to_bool(row["marketing_permissions"]),
    )


class ListRepository(SqlRepository):
    TABLE = "mail_chimp_lists"
    CRITERIA = {"list_id": "id", "mail_chimp_id": "mail_chimp_id", "name": "name"}

    # ── Read ───────────────────────────────────────────────────────────

    def find_by_id(self, list_id: str) -> Optional[MailChimpList]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {LIST_COLS} FROM {self.TABLE} WHERE id = :id"),
                {"id": list_id},
            ).mappings().fetchone()
        return _row_to_list(row) if row else None

    def find_by(self, **criteria: Any) -> List[MailChimpList]:
        where, params = self._where(criteria)
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(f"SELECT {LIST_COLS} FROM {self.TABLE}{where} ORDER BY name, id"),
                params,
            ).mappings().fetchall()
        return [_row_to_list(r) for r in rows]

    def find_all(self) -> List[MailChimpList]:
        return self.find_by()

    # ── Write ──────────────────────────────────────────────────────────

    def save(self, mc_list: MailChimpList) -> MailChimpList:
        """Insert or update; a list without an id gets a fresh UUID."""
        if not mc_list.list_id:
            mc_list.list_id = str(uuid.uuid4())
        columns: Dict[str, Any] = {
            "mail_chimp_id": mc_list.mail_chimp_id,
            "name": mc_list.name,
            "contact": dump_json(mc_list.contact),
            "permission_reminder": mc_list.permission_reminder,
            "campaign_defaults": dump_json(mc_list.campaign_defaults),
            "email_type_option": to_bool(mc_list.email_type_option),
            "use_archive_bar": to_bool(mc_list.use_archive_bar),
            "notify_on_subscribe": mc_list.notify_on_subscribe,
            "notify_on_unsubscribe": mc_list.notify_on_unsubscribe,
            "visibility": mc_list.visibility,
            "double_optin": to_bool(mc_list.double_optin),
            "marketing_permissions": to_bool(mc_list.marketing_permissions),
        }
        with self._engine.begin() as conn:
            self._upsert(conn, mc_list.list_id, columns)
        return mc_list

    def remove(self, mc_list: MailChimpList) -> None:
        with self._engine.begin() as conn:
            conn.execute(text(f"DELETE FROM {self.TABLE} WHERE id = :id"), {"id": mc_list.list_id})
