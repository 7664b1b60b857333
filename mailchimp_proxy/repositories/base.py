# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared plumbing for the SQL-backed repositories."""
import json
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Engine

from mailchimp_proxy.models.domain import coerce_bool


def dump_json(value: Any) -> Optional[str]:
    return json.dumps(value) if value is not None else None


def load_json(value: Any) -> Any:
    if isinstance(value, (str, bytes)):
        return json.loads(value)
    return value


def to_bool(value: Any) -> Optional[bool]:
    value = coerce_bool(value)
    return bool(value) if value is not None else None


class SqlRepository:
    TABLE = ""
    # criteria key -> column, the only names find_by accepts
    CRITERIA: Dict[str, str] = {}

    def __init__(self, engine: Engine):
        self._engine = engine

    def count(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(text(f"SELECT COUNT(*) FROM {self.TABLE}")).scalar() or 0

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def _where(self, criteria: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
        conditions: List[str] = []
        params: Dict[str, Any] = {}
        for key, value in criteria.items():
            column = self.CRITERIA.get(key)
            if column is None:
                raise ValueError(f"Unsupported criteria '{key}' for {self.TABLE}")
            conditions.append(f"{column} = :{key}")
            params[key] = value
        where = (" WHERE " + " AND ".join(conditions)) if conditions else ""
        return where, params

    def _upsert(self, conn, entity_id: str, columns: Dict[str, Any]) -> None:
        """UPDATE by id, INSERT when no row matched."""
        params = dict(columns, id=entity_id)
        assignments = ", ".join(f"{name} = :{name}" for name in columns)
        updated = conn.execute(
            text(f"UPDATE {self.TABLE} SET {assignments} WHERE id = :id"), params
        ).rowcount
        if updated:
            return
        names = ["id"] + list(columns)
        conn.execute(
            text(f"INSERT INTO {self.TABLE} ({', '.join(names)}) "
                 f"VALUES ({', '.join(':' + n for n in names)})"),
            params,
        )
