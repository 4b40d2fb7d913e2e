# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AppError(Exception):
    """对外（HTTP）错误统一：只在 handler 边界构造，领域层使用 errflow.errors.Error"""
    code: str
    message: str
    status_code: int = 400
    detail: Optional[Any] = None


class BadRequestError(AppError):
    def __init__(self, code: str = "BAD_REQUEST", message: str = "bad request", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=400, detail=detail)


class NotFoundError(AppError):
    def __init__(self, code: str = "NOT_FOUND", message: str = "not found", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=404, detail=detail)


class ConflictError(AppError):
    def __init__(self, code: str = "CONFLICT", message: str = "conflict", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=409, detail=detail)


class InternalError(AppError):
    def __init__(self, code: str = "INTERNAL_ERROR", message: str = "internal server error", detail: Any = None) -> None:
        super().__init__(code=code, message=message, status_code=500, detail=detail)


class ServiceUnavailableError(AppError):
    def __init__(
        self,
        code: str = "SERVICE_UNAVAILABLE",
        message: str = "service temporarily unavailable",
        detail: Any = None,
    ) -> None:
        super().__init__(code=code, message=message, status_code=503, detail=detail)
