# -*- coding: utf-8 -*-
"""Meals — DB storage helpers.

Every query carries the owner's ``user_id``; a meal owned by someone else is
indistinguishable from a missing one.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional
from uuid import uuid4

from .metrics import best_on_diet_sequence


def _row_to_meal(row: sqlite3.Row) -> Dict[str, Any]:
    meal = dict(row)
    meal["is_on_diet"] = bool(meal.get("is_on_diet"))
    return meal


def create_meal(
    conn: sqlite3.Connection,
    *,
    user_id: str,
    name: str,
    description: str,
    is_on_diet: bool,
    date_ms: int,
) -> str:
    meal_id = str(uuid4())
    conn.execute(
        """
        INSERT INTO meals (id, name, description, is_on_diet, date, user_id)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (meal_id, name, description, 1 if is_on_diet else 0, int(date_ms), user_id),
    )
    conn.commit()
    return meal_id


def list_meals(conn: sqlite3.Connection, *, user_id: str) -> List[Dict[str, Any]]:
    rows = conn.execute(
        "SELECT * FROM meals WHERE user_id = ? ORDER BY date DESC, rowid DESC",
        (user_id,),
    ).fetchall()
    return [_row_to_meal(r) for r in rows]


def get_meal(conn: sqlite3.Connection, *, user_id: str, meal_id: str) -> Optional[Dict[str, Any]]:
    row = conn.execute(
        "SELECT * FROM meals WHERE id = ? AND user_id = ?",
        (meal_id, user_id),
    ).fetchone()
    return _row_to_meal(row) if row else None


def update_meal(
    conn: sqlite3.Connection,
    *,
    user_id: str,
    meal_id: str,
    name: str,
    description: str,
    is_on_diet: bool,
    date_ms: int,
) -> bool:
    """Overwrite a meal in place. Returns False when no owned row matched."""
    cur = conn.execute(
        """
        UPDATE meals
        SET name = ?, description = ?, is_on_diet = ?, date = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ? AND user_id = ?
        """,
        (name, description, 1 if is_on_diet else 0, int(date_ms), meal_id, user_id),
    )
    conn.commit()
    return cur.rowcount > 0


def delete_meal(conn: sqlite3.Connection, *, user_id: str, meal_id: str) -> bool:
    cur = conn.execute("DELETE FROM meals WHERE id = ? AND user_id = ?", (meal_id, user_id))
    conn.commit()
    return cur.rowcount > 0


def get_meal_metrics(conn: sqlite3.Connection, *, user_id: str) -> Dict[str, int]:
    rows = conn.execute(
        "SELECT is_on_diet FROM meals WHERE user_id = ? ORDER BY date DESC, rowid DESC",
        (user_id,),
    ).fetchall()
    flags = [bool(r["is_on_diet"]) for r in rows]
    on_diet = sum(1 for f in flags if f)
    return {
        "totalMeals": len(flags),
        "totalMealsOnDiet": on_diet,
        "totalMealsOffDiet": len(flags) - on_diet,
        "bestOnDietSequence": best_on_diet_sequence(flags),
    }
