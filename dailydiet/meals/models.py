# -*- coding: utf-8 -*-
"""Meals — Pydantic models."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, Field, StrictBool, field_validator

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NUMERIC = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class MealWriteRequest(BaseModel):
    """Body for both meal creation and full-replacement update."""

    name: str = Field(..., min_length=1)
    description: str
    isOnTheDiet: StrictBool
    date: datetime = Field(..., description="ISO8601 date/datetime, or epoch milliseconds")

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_epoch_millis(cls, value: object) -> object:
        """Numbers are epoch milliseconds, the way browsers serialise timestamps.

        Numeric strings are ambiguous (seconds or milliseconds) and are rejected.
        """
        if isinstance(value, bool):
            raise ValueError("date must be a date string or epoch milliseconds")
        if isinstance(value, (int, float)):
            try:
                return _EPOCH + timedelta(milliseconds=value)
            except OverflowError as exc:
                raise ValueError("date is out of range") from exc
        if isinstance(value, str) and _NUMERIC.fullmatch(value.strip()):
            raise ValueError("date string must be ISO8601; send epoch milliseconds as a number")
        return value

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def date_millis(self) -> int:
        return (self.date - _EPOCH) // timedelta(milliseconds=1)


class Meal(BaseModel):
    id: str
    user_id: str
    name: str
    description: str
    is_on_diet: bool
    date: int = Field(..., description="Epoch milliseconds")
    created_at: str
    updated_at: str


class MealDetailResponse(BaseModel):
    meal: Meal


class MealNotFoundResponse(BaseModel):
    error: str


class MealMetricsResponse(BaseModel):
    totalMeals: int = Field(0, ge=0)
    totalMealsOnDiet: int = Field(0, ge=0)
    totalMealsOffDiet: int = Field(0, ge=0)
    bestOnDietSequence: int = Field(0, ge=0)

