# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import time
from typing import Callable, Optional, TypeVar

from errflow.errors.classify import classify

T = TypeVar("T")


def retry_call(
    fn: Callable[[], T],
    *,
    attempts: int = 3,
    backoff: float = 0.1,
    max_delay: float = 2.0,
    sleep: Optional[Callable[[float], None]] = None,
) -> T:
    """调用 fn，仅当错误被判定为 timeout/temporary 时重试

    - 不可重试的错误立即原样抛出
    - 次数用尽后抛出最后一次的错误（不额外包装，也不打日志，由上层统一上报）
    """
    if attempts < 1:
        raise ValueError("attempts must be >= 1")

    _sleep = sleep or time.sleep

    for attempt in range(attempts):
        try:
            return fn()
        except Exception as e:  # noqa: BLE001
            if not classify(e).retryable or attempt == attempts - 1:
                raise
            _sleep(min(backoff * (2 ** attempt), max_delay))

    raise RuntimeError("retry_call: unexpected state")
