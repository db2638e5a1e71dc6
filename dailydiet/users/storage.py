# -*- coding: utf-8 -*-
"""Users — DB storage helpers."""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, Optional
from uuid import uuid4


class UserAlreadyExistsError(Exception):
    """Raised when a user with the same email is already stored."""


class SessionTokenTakenError(Exception):
    """Raised when the session token is already bound to another user."""


def _normalize_email(email: str) -> str:
    return email.lower().strip()


def get_user_by_session_token(conn: sqlite3.Connection, session_token: str) -> Optional[Dict[str, Any]]:
    row = conn.execute("SELECT * FROM users WHERE session_token = ?", (session_token,)).fetchone()
    return dict(row) if row else None


def create_user(conn: sqlite3.Connection, *, name: str, email: str, session_token: str) -> Dict[str, Any]:
    user_id = str(uuid4())
    email_norm = _normalize_email(email)
    try:
        conn.execute(
            "INSERT INTO users (id, name, email, session_token) VALUES (?, ?, ?, ?)",
            (user_id, name, email_norm, session_token),
        )
    except sqlite3.IntegrityError as exc:
        # Concurrent registration lost the race on one of the unique columns.
        if "users.email" in str(exc):
            raise UserAlreadyExistsError(email_norm) from exc
        if "users.session_token" in str(exc):
            raise SessionTokenTakenError(session_token) from exc
        raise
    conn.commit()
    row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
    return dict(row)
