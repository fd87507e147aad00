from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.enums import RoleName
from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
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
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: Optional[str | Path] = None) -> None:
    target = DBConfig.from_dict(db_config)
    ensure_database_exists(db_config)

    sql = _strip_create_db_and_use(Path(schema_path or SCHEMA_PATH).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s@%s:%s/%s", target.user, target.host, target.port, target.database)


def ensure_default_roles(db_config: dict) -> dict[str, str]:
    """Insert the Admin/HR/Employee roles if missing; return name -> role_id."""
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)
        ids: dict[str, str] = {}
        for role in RoleName:
            cur.execute("SELECT role_id FROM roles WHERE name=%s", (role.value,))
            row = cur.fetchone()
            if row:
                ids[role.value] = row["role_id"]
                continue
            role_id = str(uuid.uuid4())
            now = datetime.now()
            cur.execute(
                "INSERT INTO roles (role_id, name, created_date, updated_date) VALUES (%s, %s, %s, %s)",
                (role_id, role.value, now, now),
            )
            ids[role.value] = role_id
        conn.commit()
        return ids
    finally:
        conn.close()


def ensure_admin_account(db_config: dict, *, email: str, password: str, department_name: str = "Administration") -> None:
    """Create (or reset the password of) the bootstrap Admin employee."""
    if not email or not password:
        raise RuntimeError("ADMIN_EMAIL and ADMIN_PASSWORD must be set to seed the admin account")

    role_ids = ensure_default_roles(db_config)
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)
        now = datetime.now()

        cur.execute("SELECT department_id FROM departments WHERE name=%s", (department_name,))
        row = cur.fetchone()
        if row:
            department_id = row["department_id"]
        else:
            department_id = str(uuid.uuid4())
            cur.execute(
                "INSERT INTO departments (department_id, name, created_date, updated_date) VALUES (%s, %s, %s, %s)",
                (department_id, department_name, now, now),
            )

        password_hash = generate_password_hash(password)
        cur.execute("SELECT employee_id FROM employees WHERE email=%s", (email,))
        existing = cur.fetchone()
        if existing:
            cur.execute(
                """
                UPDATE employees
                SET password_hash=%s, role_id=%s, updated_date=%s
                WHERE email=%s
                """,
                (password_hash, role_ids[RoleName.ADMIN.value], now, email),
            )
        else:
            cur.execute(
                """
                INSERT INTO employees
                    (employee_id, name, email, password_hash, join_date, department_id, role_id, created_date, updated_date)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    str(uuid.uuid4()),
                    "Administrator",
                    email,
                    password_hash,
                    now,
                    department_id,
                    role_ids[RoleName.ADMIN.value],
                    now,
                    now,
                ),
            )

        conn.commit()
    finally:
        conn.close()
    logger.info("Admin account ready (%s)", email)


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
