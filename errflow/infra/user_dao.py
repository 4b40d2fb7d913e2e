# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""用户 DAO

只负责把驱动层异常包装成带上下文的 Error 链并返回给上层：
- 记录不存在 -> 链上挂 ERR_NOT_FOUND
- 唯一键冲突 -> 标记为 ERR_CONFLICT，保留 IntegrityError
- 连接/锁等 OperationalError -> temporary=True，交给上层决定是否重试
这里不打日志。
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from errflow.domain import models
from errflow.domain.errors import ERR_CONFLICT, ERR_NOT_FOUND
from errflow.errors import mark, wrap


class UserDao:
    def get(self, db: Session, user_id: int) -> models.User:
        try:
            user = db.get(models.User, user_id)
        except OperationalError as e:
            db.rollback()
            raise wrap(e, f"dao: get user {user_id}", temporary=True)

        if user is None:
            raise wrap(ERR_NOT_FOUND, f"dao: user {user_id}")
        return user

    def create(
        self,
        db: Session,
        *,
        name: str,
        email: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> models.User:
        user = models.User(name=name, email=email, bio=bio)
        db.add(user)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise mark(e, ERR_CONFLICT, f"dao: insert user {name!r}")
        except OperationalError as e:
            db.rollback()
            raise wrap(e, f"dao: insert user {name!r}", temporary=True)

        db.refresh(user)
        return user
