# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""全局异常处理：错误在这里被"处理"并上报，且只上报一次"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from errflow.common.errors import (
    AppError,
    ConflictError,
    InternalError,
    NotFoundError,
    ServiceUnavailableError,
)
from errflow.common.logging import report_error
from errflow.common.trace import get_trace_id
from errflow.domain.errors import ERR_CONFLICT, ERR_NOT_FOUND
from errflow.errors import Error, classify, is_

logger = logging.getLogger(__name__)


def _err_payload(code: str, message: str, detail: Any = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "code": code,
        "message": message,
        "trace_id": get_trace_id(),
    }
    if detail is not None:
        data["detail"] = detail
    return data


def _app_error_response(exc: AppError, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_err_payload(exc.code, exc.message, exc.detail),
        headers=headers,
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:  # noqa: ARG001
    return _app_error_response(exc)


async def domain_error_handler(request: Request, exc: Error) -> JSONResponse:
    # 可预期的业务错误：按身份判断后直接转成响应，不打日志；内部上下文不对外暴露
    if is_(exc, ERR_NOT_FOUND):
        return _app_error_response(NotFoundError(message="resource not found"))
    if is_(exc, ERR_CONFLICT):
        return _app_error_response(ConflictError(message="resource already exists"))

    report_error(logger, exc, f"{request.method} {request.url.path}")

    if classify(exc).retryable:
        return _app_error_response(ServiceUnavailableError(), headers={"Retry-After": "1"})
    return _app_error_response(InternalError())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(
        status_code=422,
        content=_err_payload(
            "VALIDATION_ERROR",
            "invalid request",
            detail=exc.errors(),
        ),
    )


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    """由 UnhandledErrorMiddleware 调用：在应用内转成响应，不再向 server 抛出"""
    report_error(logger, exc, f"unhandled error in {request.method} {request.url.path}")
    return _app_error_response(InternalError())
