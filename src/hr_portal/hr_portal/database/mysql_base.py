from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Dictionary cursor on a fresh connection, one transaction per block.

    The block commits when it exits cleanly and rolls back on any error.
    """
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True)
    try:
        yield cur
    except Exception:
        conn.rollback()
        raise
    else:
        conn.commit()
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or ())


def in_clause(values: Sequence[Any]) -> str:
    """Placeholder list for ``IN (...)`` filters."""
    return ", ".join(["%s"] * len(values))


def to_float(value: Any) -> Optional[float]:
    """Normalize DECIMAL/NUMERIC columns (returned as Decimal) to float."""
    if value is None:
        return None
    return float(value)


def to_optional_int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None
