# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for mailing lists mirrored to Mailchimp."""
from typing import Any, Dict, List

from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.metrics import LISTS_STORED, MEMBERS_STORED
from mailchimp_proxy.models.domain import MailChimpList
from mailchimp_proxy.schemas import ListPayload
from mailchimp_proxy.services.sync import SyncOperation, SyncService, SyncStage

logger = get_logger(__name__)


class ListService(SyncService):

    # ── Reads (local store only, Mailchimp is never called) ────────────

    def get_lists(self) -> List[Dict[str, Any]]:
        return [mc_list.to_dict() for mc_list in self._lists.find_all()]

    def get_list(self, list_id: str) -> Dict[str, Any]:
        return self._find_list(list_id).to_dict()

    # ── Mutations ──────────────────────────────────────────────────────

    def create_list(self, data: Dict[str, Any]) -> Dict[str, Any]:
        with SyncOperation("list", "create") as op:
            mc_list = MailChimpList.from_payload(data)
            view = self._validate(mc_list, ListPayload, op)

            self._lists.save(mc_list)
            LISTS_STORED.inc()
            op.advance(SyncStage.LOCAL_PERSISTED)

            # A failure from here on leaves a local-only list (no mail_chimp_id).
            response = self._remote.post("lists", view)
            mc_list.mail_chimp_id = self._remote_id(response, "list")
            op.advance(SyncStage.REMOTE_SYNCED)

            self._lists.save(mc_list)
            op.advance(SyncStage.LOCAL_PERSISTED)
        logger.info("List created id=%s mailchimp_id=%s", mc_list.list_id, mc_list.mail_chimp_id)
        return mc_list.to_dict()

    def update_list(self, list_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        with SyncOperation("list", "update") as op:
            mc_list = self._find_list(list_id)
            mc_list.fill(data)
            view = self._validate(mc_list, ListPayload, op)

            self._require_synced(mc_list)

            self._remote.patch(f"lists/{mc_list.mail_chimp_id}", view)
            op.advance(SyncStage.REMOTE_SYNCED)

            self._lists.save(mc_list)
            op.advance(SyncStage.LOCAL_PERSISTED)
        return mc_list.to_dict()

    def delete_list(self, list_id: str) -> Dict[str, Any]:
        with SyncOperation("list", "delete") as op:
            mc_list = self._find_list(list_id)
            self._require_synced(mc_list)

            self._remote.delete(f"lists/{mc_list.mail_chimp_id}")
            op.advance(SyncStage.REMOTE_SYNCED)

            # Mailchimp drops the members together with the list.
            removed = self._members.remove_by_list(list_id)
            self._lists.remove(mc_list)
            LISTS_STORED.dec()
            MEMBERS_STORED.dec(removed)
            op.advance(SyncStage.LOCAL_PERSISTED)
        logger.info("List deleted id=%s mailchimp_id=%s members_removed=%d",
                    list_id, mc_list.mail_chimp_id, removed)
        return {}
