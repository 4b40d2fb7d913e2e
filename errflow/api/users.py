# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import io

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from errflow.api.deps import get_db, get_user_exporter, get_user_usecase
from errflow.application.user.exporter import UserExporter
from errflow.application.user.usecase import UserUsecase
from errflow.common.errors import BadRequestError
from errflow.domain import schemas


router = APIRouter(prefix="/users", tags=["users"])


def _check_user_id(user_id: int) -> None:
    if user_id <= 0:
        raise BadRequestError(code="INVALID_USER_ID", message="user_id must be positive")


@router.post("", response_model=schemas.UserOut, status_code=201)
def create_user(
    req: schemas.UserCreate,
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    return uc.create_user(db, req=req)


@router.get("/{user_id}", response_model=schemas.UserOut)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    _check_user_id(user_id)
    return uc.get_user(db, user_id=user_id)


@router.get("/{user_id}/export")
def export_user(
    user_id: int,
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
    exporter: UserExporter = Depends(get_user_exporter),
):
    _check_user_id(user_id)
    user = uc.get_user(db, user_id=user_id)
    buf = io.BytesIO()
    exporter.export(user, buf)
    return Response(content=buf.getvalue(), media_type="text/plain; charset=utf-8")
