# -*- coding: utf-8 -*-
"""Users — API endpoints."""

from __future__ import annotations

import logging
import sqlite3

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from ..app_db import get_db
from ..auth.security import get_session_token_from_request, new_session_token, set_session_cookie
from .models import UserConflictResponse, UserCreateRequest
from .storage import SessionTokenTakenError, UserAlreadyExistsError, create_user, get_user_by_session_token

router = APIRouter(prefix="/users", tags=["Users"])

logger = logging.getLogger(__name__)


def _conflict() -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": "User already exists"})


@router.post(
    "/",
    status_code=201,
    response_class=Response,
    responses={400: {"model": UserConflictResponse}},
    summary="Register a user bound to the session cookie",
)
def register(
    body: UserCreateRequest,
    request: Request,
    conn: sqlite3.Connection = Depends(get_db),
):
    """Create a user and bind it to the caller's session cookie.

    The body is validated before a session cookie is issued, and a cookie is
    only set when the user row is actually written. A rejected body or a
    duplicate email therefore leaves the client without a new cookie.
    """
    session_token = get_session_token_from_request(request)
    # A cookie already bound to another user cannot be shared; issue a fresh one.
    if session_token and get_user_by_session_token(conn, session_token):
        session_token = None

    issue_cookie = session_token is None
    if issue_cookie:
        session_token = new_session_token()

    try:
        try:
            user = create_user(conn, name=body.name, email=str(body.email), session_token=session_token)
        except SessionTokenTakenError:
            # Another registration claimed the same cookie first.
            logger.warning("Session cookie bound concurrently; issuing a fresh one")
            issue_cookie = True
            session_token = new_session_token()
            user = create_user(conn, name=body.name, email=str(body.email), session_token=session_token)
    except UserAlreadyExistsError:
        logger.warning("Registration rejected: email already registered")
        return _conflict()

    logger.info("Registered user %s", user["id"])
    resp = Response(status_code=201)
    if issue_cookie:
        set_session_cookie(resp, session_token)
    return resp
