# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from errflow.common.exception_handlers import unhandled_error_response
from errflow.common.trace import TRACE_HEADER_IN, TRACE_HEADER_OUT, new_trace_id, set_trace_id


class TraceIdMiddleware(BaseHTTPMiddleware):
    """每个请求一个 trace_id，沿用调用方传入的 X-Request-Id"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        trace_id = request.headers.get(TRACE_HEADER_IN) or new_trace_id()
        set_trace_id(trace_id)
        response: Response = await call_next(request)
        response.headers[TRACE_HEADER_OUT] = trace_id
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """兜底：未处理的异常在应用内上报一次并转成 500（ServerErrorMiddleware 会在 handler 之后重新抛出）"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:  # noqa: BLE001
            return unhandled_error_response(request, e)
