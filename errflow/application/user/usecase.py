# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session

from errflow.domain import schemas
from errflow.errors import Error, retry_call, wrap
from errflow.infra.config import settings
from errflow.infra.user_dao import UserDao

logger = logging.getLogger(__name__)


class UserUsecase:
    """服务层：补充业务上下文后把错误原样向上返回，不处理也不上报"""

    def __init__(
        self,
        dao: Optional[UserDao] = None,
        *,
        attempts: Optional[int] = None,
        backoff: Optional[float] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._dao = dao or UserDao()
        self._attempts = settings.RETRY_MAX_ATTEMPTS if attempts is None else attempts
        self._backoff = settings.RETRY_BACKOFF_SECONDS if backoff is None else backoff
        self._sleep = sleep

    def get_user(self, db: Session, *, user_id: int) -> schemas.UserOut:
        try:
            user = retry_call(
                lambda: self._dao.get(db, user_id),
                attempts=self._attempts,
                backoff=self._backoff,
                sleep=self._sleep,
            )
        except Error as e:
            raise wrap(e, f"service: load user {user_id}")
        return schemas.UserOut.model_validate(user)

    def create_user(self, db: Session, *, req: schemas.UserCreate) -> schemas.UserOut:
        # 写操作不自动重试，避免重复插入
        try:
            user = self._dao.create(db, name=req.name, email=req.email, bio=req.bio)
        except Error as e:
            raise wrap(e, "service: create user")
        logger.info("user created: id=%s name=%s", user.id, user.name)
        return schemas.UserOut.model_validate(user)
