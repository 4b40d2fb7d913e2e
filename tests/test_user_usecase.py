# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List

import pytest
from sqlalchemy.exc import OperationalError

from errflow.application.user.usecase import UserUsecase
from errflow.domain import schemas
from errflow.domain.errors import ERR_CONFLICT, ERR_NOT_FOUND
from errflow.errors import Error, classify, format_chain, is_
from errflow.infra.user_dao import UserDao


def _locked() -> OperationalError:
    return OperationalError("SELECT users", {}, Exception("database is locked"))


class _LockedSession:
    def get(self, *args, **kwargs):
        raise _locked()

    def rollback(self) -> None:
        pass


class FlakyDao(UserDao):
    """前 failures 次读取遇到 database is locked"""

    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0

    def get(self, db, user_id):
        self.calls += 1
        if self.calls <= self.failures:
            return super().get(_LockedSession(), user_id)
        return super().get(db, user_id)


def test_create_and_get(db):
    uc = UserUsecase(attempts=1)
    created = uc.create_user(db, req=schemas.UserCreate(name="alice", email="a@example.com"))

    got = uc.get_user(db, user_id=created.id)
    assert got.name == "alice"
    assert got.email == "a@example.com"


def test_missing_user_is_wrapped_not_found(db):
    uc = UserUsecase(attempts=1)

    with pytest.raises(Error) as exc_info:
        uc.get_user(db, user_id=404)

    err = exc_info.value
    assert is_(err, ERR_NOT_FOUND)
    assert format_chain(err) == "service: load user 404: dao: user 404: record not found"
    assert not classify(err).retryable


def test_duplicate_name_is_conflict_and_keeps_driver_error(db):
    uc = UserUsecase(attempts=1)
    uc.create_user(db, req=schemas.UserCreate(name="bob"))

    with pytest.raises(Error) as exc_info:
        uc.create_user(db, req=schemas.UserCreate(name="bob"))

    err = exc_info.value
    assert is_(err, ERR_CONFLICT)
    assert format_chain(err).startswith("service: create user: dao: insert user 'bob': ")
    assert "UNIQUE" in format_chain(err)


def test_operational_error_is_temporary_and_retried(db):
    uc = UserUsecase(attempts=1)
    created = uc.create_user(db, req=schemas.UserCreate(name="carol"))

    sleeps: List[float] = []
    dao = FlakyDao(failures=2)
    uc = UserUsecase(dao, attempts=3, backoff=0.01, sleep=sleeps.append)

    got = uc.get_user(db, user_id=created.id)
    assert got.name == "carol"
    assert dao.calls == 3
    assert len(sleeps) == 2


def test_retries_exhausted_keeps_temporary_flag(db):
    dao = FlakyDao(failures=10)
    uc = UserUsecase(dao, attempts=2, backoff=0, sleep=lambda s: None)

    with pytest.raises(Error) as exc_info:
        uc.get_user(db, user_id=1)

    err = exc_info.value
    assert classify(err).is_temporary
    assert dao.calls == 2
    assert format_chain(err).startswith("service: load user 1: dao: get user 1: ")


def test_zero_attempts_is_rejected_not_defaulted(db):
    uc = UserUsecase(attempts=0)

    with pytest.raises(ValueError):
        uc.get_user(db, user_id=1)
