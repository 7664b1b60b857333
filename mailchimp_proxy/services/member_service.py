# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for list members mirrored to Mailchimp."""
from typing import Any, Dict, List

from mailchimp_proxy.core.errors import NotAllowedChangeError, ValidationError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.metrics import MEMBERS_STORED
from mailchimp_proxy.models.domain import MailChimpMember, coerce_bool, normalise_email
from mailchimp_proxy.schemas import MemberPayload
from mailchimp_proxy.services.duplicate_guard import DuplicateGuard
from mailchimp_proxy.services.sync import SyncOperation, SyncService, SyncStage

logger = get_logger(__name__)


class MemberService(SyncService):
    def __init__(self, list_repo, member_repo, remote):
        super().__init__(list_repo, member_repo, remote)
        self._guard = DuplicateGuard(member_repo)

    def get_members(self, list_id: str) -> List[Dict[str, Any]]:
        self._find_list(list_id)
        return [m.to_dict() for m in self._members.find_by(list_id=list_id)]

    def get_member(self, list_id: str, member_id: str) -> Dict[str, Any]:
        self._find_list(list_id)
        return self._find_member(list_id, member_id).to_dict()

    def create_member(self, list_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        with SyncOperation("member", "create") as op:
            mc_list = self._find_list(list_id)
            self._require_synced(mc_list)

            payload = dict(data)
            if not payload.get("list_id"):
                payload["list_id"] = list_id
            elif payload["list_id"] != list_id:
                raise ValidationError({"list_id": [
                    f"The list_id must match the list in the request path ({list_id})."
                ]})
            if "vip" in payload:
                payload["vip"] = coerce_bool(payload["vip"])

            conflict = self._guard.check(list_id, payload.get("email_address"))
            if conflict is not None:
                raise conflict

            member = MailChimpMember.from_payload(payload)
            view = self._validate(member, MemberPayload, op)
            member.email_address = view["email_address"]

            self._members.save(member)
            MEMBERS_STORED.inc()
            op.advance(SyncStage.LOCAL_PERSISTED)

            # On failure the row stays without mail_chimp_id; no rollback.
            response = self._remote.post(f"lists/{mc_list.mail_chimp_id}/members", view)
            member.mail_chimp_id = self._remote_id(response, "member")
            member.adopt_remote(response)
            op.advance(SyncStage.REMOTE_SYNCED)

            self._members.save(member)
            op.advance(SyncStage.LOCAL_PERSISTED)
        logger.info("Member created id=%s list=%s mailchimp_id=%s",
                    member.member_id, list_id, member.mail_chimp_id)
        return member.to_dict()

    def update_member(self, list_id: str, member_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        with SyncOperation("member", "update") as op:
            mc_list = self._find_list(list_id)
            member = self._find_member(list_id, member_id)

            original = normalise_email(member.email_address)
            requested = normalise_email(data.get("email_address"))
            if requested and requested != original:
                raise NotAllowedChangeError(original, requested)

            changes = dict(data)
            if "vip" in changes:
                changes["vip"] = coerce_bool(changes["vip"])
            member.fill(changes)
            view = self._validate(member, MemberPayload, op)

            self._require_synced(mc_list, member)

            response = self._remote.put(
                f"lists/{mc_list.mail_chimp_id}/members/{member.mail_chimp_id}", view
            )
            remote_id = response.get("id")
            if remote_id and remote_id != member.mail_chimp_id:
                logger.info("Member %s mailchimp id changed %s -> %s",
                            member_id, member.mail_chimp_id, remote_id)
                member.mail_chimp_id = remote_id
            member.adopt_remote(response)
            op.advance(SyncStage.REMOTE_SYNCED)

            self._members.save(member)
            op.advance(SyncStage.LOCAL_PERSISTED)
        return member.to_dict()

    def delete_member(self, list_id: str, member_id: str) -> Dict[str, Any]:
        with SyncOperation("member", "delete") as op:
            mc_list = self._find_list(list_id)
            member = self._find_member(list_id, member_id)
            self._require_synced(mc_list, member)

            self._remote.delete(f"lists/{mc_list.mail_chimp_id}/members/{member.mail_chimp_id}")
            op.advance(SyncStage.REMOTE_SYNCED)

            self._members.remove(member)
            MEMBERS_STORED.dec()
            op.advance(SyncStage.LOCAL_PERSISTED)
        logger.info("Member deleted id=%s list=%s", member_id, list_id)
        return {}
