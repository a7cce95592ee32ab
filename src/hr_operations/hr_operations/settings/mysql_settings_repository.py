from __future__ import annotations

from typing import Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_many(self, keys: Sequence[str]) -> Dict[str, str]:
        keys = list(keys)
        if not keys:
            return {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT setting_key, setting_value
                FROM system_settings
                WHERE setting_key IN ({in_clause(keys)})
                """,
                tuple(keys),
            )
            return {r["setting_key"]: str(r["setting_value"]) for r in fetchall(cur)}

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT setting_value FROM system_settings WHERE setting_key=%s", (key,))
            r = fetchone(cur)
            return str(r["setting_value"]) if r else None

    def upsert(self, key: str, value: str, *, description: Optional[str] = None) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO system_settings (setting_key, setting_value, description)
                VALUES (%s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    setting_value=VALUES(setting_value),
                    description=COALESCE(VALUES(description), description)
                """,
                (key, str(value), description),
            )
