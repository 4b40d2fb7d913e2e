# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Generator, List

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from errflow.domain import models  # noqa: F401
from errflow.infra.db import Base


class RecordingSink:
    """内存 sink：记录每次写入，可指定第 N 次写入失败"""

    def __init__(self, fail_on: int = 0, error: BaseException | None = None) -> None:
        self.fail_on = fail_on
        self.error = error or OSError("disk full")
        self.calls = 0
        self.chunks: List[bytes] = []

    def write(self, data: bytes) -> int:
        self.calls += 1
        if self.calls == self.fail_on:
            raise self.error
        self.chunks.append(bytes(data))
        return len(data)

    @property
    def data(self) -> bytes:
        return b"".join(self.chunks)


@pytest.fixture
def session_factory() -> sessionmaker:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    s = session_factory()
    try:
        yield s
    finally:
        s.close()
