from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_sql_file(conn_factory: DatabaseConnection, path: Path) -> int:
    sql = _strip_create_db_and_use(path.read_text(encoding="utf-8"))
    conn = conn_factory.connect()
    count = 0
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def ensure_database_exists(db_config: dict) -> None:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _run_sql_file(DatabaseConnection(DBConfig.from_dict(db_config)), Path(schema_path))
    logger.info("applied %d schema statements from %s", count, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _run_sql_file(DatabaseConnection(DBConfig.from_dict(db_config)), Path(seed_path))
    logger.info("applied %d seed statements from %s", count, seed_path)


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
