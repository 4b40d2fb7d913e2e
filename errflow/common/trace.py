# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import uuid
from contextvars import ContextVar

TRACE_HEADER_IN = "X-Request-Id"
TRACE_HEADER_OUT = "X-Trace-Id"

_NO_TRACE = "-"

_trace_id_ctx: ContextVar[str] = ContextVar("errflow_trace_id", default=_NO_TRACE)


def new_trace_id() -> str:
    return uuid.uuid4().hex


def set_trace_id(trace_id: str) -> None:
    _trace_id_ctx.set(trace_id or _NO_TRACE)


def get_trace_id() -> str:
    return _trace_id_ctx.get() or _NO_TRACE
