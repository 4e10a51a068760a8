from __future__ import annotations

from typing import Optional

import yaml

from hashgen.settings import (
    BANNER_END,
    BANNER_START,
    DEFAULT_ROLE,
    DEFAULT_USERNAME,
    PASSWORD_COLUMN,
    USERS_TABLE,
)


def build_sql_update(password_hash: str, username: str = DEFAULT_USERNAME, table: str = USERS_TABLE) -> str:
    # OJO: interpolación directa, sin escapar (mismo formato que el script original)
    return f"UPDATE {table} SET {PASSWORD_COLUMN} = '{password_hash}' WHERE username = '{username}';"


def render_report(password: str, password_hash: str) -> str:
    """
    Salida completa del generador, lista para stdout.
    Cada elemento corresponde a una línea impresa.
    """
    lines = [
        f"\n{BANNER_START}",
        f"Password: {password}",
        f"Hash: {password_hash}",
        "\nSQL Update Command:",
        build_sql_update(password_hash),
        f"\n{BANNER_END}\n",
    ]
    return "\n".join(lines)


def build_users_yaml(
    username: str,
    password_hash: str,
    name: Optional[str] = None,
    role: str = DEFAULT_ROLE,
) -> str:
    """
    Snippet para users.yaml, en el formato que lee el login:
      users:
        admin: {name, role, password_hash, is_active}
    """
    doc = {
        "users": {
            username: {
                "name": name or username,
                "role": (role or DEFAULT_ROLE).strip().lower(),
                "password_hash": password_hash,
                "is_active": True,
            }
        }
    }
    return yaml.safe_dump(doc, allow_unicode=True, sort_keys=False)
