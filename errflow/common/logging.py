# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Optional, Union

from errflow.common.trace import get_trace_id
from errflow.errors import classify, format_chain


class TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        setattr(record, "trace_id", get_trace_id())
        return True


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """初始化全局日志（重复调用安全）"""

    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s - %(levelname)s - trace=%(trace_id)s - %(name)s - %(message)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for h in root.handlers:
        has_filter = any(isinstance(f, TraceIdFilter) for f in getattr(h, "filters", []))
        if not has_filter:
            h.addFilter(TraceIdFilter())


def report_error(logger: logging.Logger, err: BaseException, what: Optional[str] = None) -> None:
    """在调用链顶端上报一次完整错误链

    中间层只负责 wrap 并返回，禁止"打日志再返回"，否则同一个错误会被重复上报。
    """
    c = classify(err)
    logger.error(
        "%s: %s (timeout=%s, temporary=%s)",
        what or "request failed",
        format_chain(err),
        c.is_timeout,
        c.is_temporary,
        exc_info=(type(err), err, err.__traceback__),
    )
