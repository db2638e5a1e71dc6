# -*- coding: utf-8 -*-
"""Meals — API endpoints."""

from __future__ import annotations

import logging
import sqlite3
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from ..app_db import get_db
from ..auth.security import get_current_user
from .models import Meal, MealDetailResponse, MealMetricsResponse, MealNotFoundResponse, MealWriteRequest
from .storage import create_meal, delete_meal, get_meal, get_meal_metrics, list_meals, update_meal

router = APIRouter(prefix="/meals", tags=["Meals"])

logger = logging.getLogger(__name__)

_NOT_FOUND = {404: {"model": MealNotFoundResponse}}


def _meal_not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Meal not found"})


@router.post("/", status_code=201, response_class=Response, summary="Record a meal")
def create(
    request: MealWriteRequest,
    user: dict = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    meal_id = create_meal(
        conn,
        user_id=user["id"],
        name=request.name,
        description=request.description,
        is_on_diet=request.isOnTheDiet,
        date_ms=request.date_millis(),
    )
    logger.info("Created meal %s for user %s", meal_id, user["id"])
    return Response(status_code=201)


@router.get("/", response_model=List[Meal], summary="List meals, most recent first")
def list_all(user: dict = Depends(get_current_user), conn: sqlite3.Connection = Depends(get_db)):
    return list_meals(conn, user_id=user["id"])


# Declared before "/{meal_id}" so "metrics" is not parsed as a meal id.
@router.get("/metrics", response_model=MealMetricsResponse, summary="On-diet counts and best streak")
def metrics(user: dict = Depends(get_current_user), conn: sqlite3.Connection = Depends(get_db)):
    return MealMetricsResponse(**get_meal_metrics(conn, user_id=user["id"]))


@router.get("/{meal_id}", response_model=MealDetailResponse, responses=_NOT_FOUND, summary="Get one meal")
def get_one(
    meal_id: UUID,
    user: dict = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    meal = get_meal(conn, user_id=user["id"], meal_id=str(meal_id))
    if meal is None:
        return _meal_not_found()
    return MealDetailResponse(meal=Meal(**meal))


@router.put("/{meal_id}", status_code=204, response_class=Response, responses=_NOT_FOUND, summary="Replace a meal")
def update(
    meal_id: UUID,
    request: MealWriteRequest,
    user: dict = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    updated = update_meal(
        conn,
        user_id=user["id"],
        meal_id=str(meal_id),
        name=request.name,
        description=request.description,
        is_on_diet=request.isOnTheDiet,
        date_ms=request.date_millis(),
    )
    if not updated:
        return _meal_not_found()
    logger.info("Updated meal %s", meal_id)
    return Response(status_code=204)


@router.delete("/{meal_id}", status_code=204, response_class=Response, responses=_NOT_FOUND, summary="Delete a meal")
def delete(
    meal_id: UUID,
    user: dict = Depends(get_current_user),
    conn: sqlite3.Connection = Depends(get_db),
):
    if not delete_meal(conn, user_id=user["id"], meal_id=str(meal_id)):
        return _meal_not_found()
    logger.info("Deleted meal %s", meal_id)
    return Response(status_code=204)
