# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Dual-write pipeline shared by the list and member services.

Every mutating operation walks a short linear pipeline::

    received ─► validated ─► (local_persisted | remote_synced)* ─► done
        └──────────┴──────────► rejected          (local guard failed)
                                partial_failure   (Mailchimp call failed)

Create persists locally before calling Mailchimp (the local id must exist
first); update and delete call Mailchimp first and touch the local row only
once the remote side agreed.
"""
from enum import Enum
from typing import Dict, List, Optional, Type

from pydantic import BaseModel

from mailchimp_proxy.core.errors import (
    ENTITY_LIST, ENTITY_MEMBER, NotFoundError, NotSyncedError, RemoteError, SyncError,
    ValidationError, ids_desc,
)
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.metrics import SYNC_OPERATIONS
from mailchimp_proxy.models.domain import MailChimpEntity, MailChimpList, MailChimpMember
from mailchimp_proxy.services.validator import validate

logger = get_logger(__name__)


class SyncStage(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    LOCAL_PERSISTED = "local_persisted"
    REMOTE_SYNCED = "remote_synced"
    DONE = "done"
    REJECTED = "rejected"
    PARTIAL_FAILURE = "partial_failure"


TERMINAL_STAGES = frozenset({SyncStage.DONE, SyncStage.REJECTED, SyncStage.PARTIAL_FAILURE})


class SyncOperation:
    """Context manager tracking one operation; classifies how it ended.

    Errors are never swallowed: the stage is recorded and the exception
    continues to the HTTP layer.
    """

    def __init__(self, entity: str, operation: str):
        self.entity = entity
        self.operation = operation
        self.stage = SyncStage.RECEIVED
        self.history: List[SyncStage] = [SyncStage.RECEIVED]

    def advance(self, stage: SyncStage) -> None:
        if self.stage in TERMINAL_STAGES:
            raise RuntimeError(f"{self.entity} {self.operation} already finished ({self.stage.value})")
        self.stage = stage
        self.history.append(stage)

    def __enter__(self) -> "SyncOperation":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is None:
            self.advance(SyncStage.DONE)
            logger.info("%s %s done stages=%s", self.entity, self.operation,
                        ",".join(s.value for s in self.history))
        elif isinstance(exc, RemoteError):
            self.advance(SyncStage.PARTIAL_FAILURE)
            logger.warning("%s %s partial failure after %s: %s", self.entity, self.operation,
                           self.history[-2].value, exc.message)
        elif isinstance(exc, SyncError):
            self.advance(SyncStage.REJECTED)
            logger.info("%s %s rejected: %s", self.entity, self.operation, exc.message)
        else:
            return False
        SYNC_OPERATIONS.labels(entity=self.entity, operation=self.operation,
                               outcome=self.stage.value).inc()
        return False


class SyncService:
    """Lookups and guards shared by the list and member pipelines."""

    def __init__(self, list_repo, member_repo, remote):
        self._lists = list_repo
        self._members = member_repo
        self._remote = remote

    def _find_list(self, list_id: str) -> MailChimpList:
        mc_list = self._lists.find_by_id(list_id)
        if mc_list is None:
            raise NotFoundError(ENTITY_LIST, ids_desc(list_id))
        return mc_list

    def _find_member(self, list_id: str, member_id: str) -> MailChimpMember:
        members = self._members.find_by(member_id=member_id, list_id=list_id)
        if not members:
            raise NotFoundError(ENTITY_MEMBER, ids_desc(list_id, member_id))
        return members[0]

    @staticmethod
    def _require_synced(mc_list: MailChimpList, member: Optional[MailChimpMember] = None) -> None:
        """Name the entity that lacks a Mailchimp id, the list first."""
        if not mc_list.mail_chimp_id:
            raise NotSyncedError(ENTITY_LIST, ids_desc(mc_list.list_id))
        if member is not None and not member.mail_chimp_id:
            raise NotSyncedError(ENTITY_MEMBER, ids_desc(mc_list.list_id, member.member_id))

    @staticmethod
    def _validate(entity: MailChimpEntity, schema: Type[BaseModel],
                  op: SyncOperation) -> Dict:
        result = validate(entity.to_remote(), schema)
        if result.fails:
            raise ValidationError(result.errors)
        # Local row, response and Mailchimp body all carry the converted values.
        entity.fill(result.data)
        op.advance(SyncStage.VALIDATED)
        return result.data

    @staticmethod
    def _remote_id(response: Dict, what: str) -> str:
        remote_id = response.get("id")
        if not remote_id:
            raise RemoteError(f"Mailchimp did not return an id for the {what}")
        return remote_id
