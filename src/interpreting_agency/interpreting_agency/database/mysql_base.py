from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from ..common.time_utils import normalize_time_to_hhmm
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> str:
    """Normalize a MySQL TIME value to "HH:MM".

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')

    Returns "" for NULL or unparsable values.
    """

    if value is None:
        return ""

    if isinstance(value, time):
        return f"{value.hour:02d}:{value.minute:02d}"

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return f"{total_seconds // 3600:02d}:{(total_seconds % 3600) // 60:02d}"

    return normalize_time_to_hhmm(value)


def optional_float(value: Any) -> Optional[float]:
    """DECIMAL columns come back as Decimal; keep NULL as None."""
    if value is None:
        return None
    return float(value)
