# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""错误组合工具

- chain: 不可变的错误值与 cause 链（wrap / is_ / format_chain）
- classify: 按能力（timeout / temporary）判断错误，不依赖具体类型
- retry: 基于能力判断的重试
"""

from __future__ import annotations

from errflow.errors.chain import (
    Error,
    Marked,
    format_chain,
    is_,
    iter_chain,
    mark,
    new,
    root_cause,
    sentinel,
    unwrap,
    wrap,
)
from errflow.errors.classify import Classification, Temporary, Timeout, classify
from errflow.errors.retry import retry_call

__all__ = [
    "Error",
    "Marked",
    "new",
    "sentinel",
    "wrap",
    "mark",
    "unwrap",
    "iter_chain",
    "root_cause",
    "is_",
    "format_chain",
    "Classification",
    "Timeout",
    "Temporary",
    "classify",
    "retry_call",
]
