# -*- coding: utf-8 -*-
"""Users — Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field


class UserCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr


class UserConflictResponse(BaseModel):
    message: str
