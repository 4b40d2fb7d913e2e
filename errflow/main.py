# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from errflow.api import users as users_api
from errflow.common.errors import AppError
from errflow.common.exception_handlers import (
    app_error_handler,
    domain_error_handler,
    validation_error_handler,
)
from errflow.common.logging import setup_logging
from errflow.common.middlewares import TraceIdMiddleware, UnhandledErrorMiddleware
from errflow.errors import Error
from errflow.infra.config import settings

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="errflow",
    version="0.1.0",
)


# ---------- middlewares / handlers ----------

# 后添加的在外层：trace_id 先注入，兜底异常处理在其内侧
app.add_middleware(UnhandledErrorMiddleware)
app.add_middleware(TraceIdMiddleware)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(Error, domain_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)


@app.get("/health")
def health_check() -> dict:
    return {"status": "ok"}


# 用户
app.include_router(users_api.router)
