# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""errflow：不透明错误 + 能力判断 + 快速失败写入"""

from __future__ import annotations

from errflow.errors import Error, classify, format_chain, is_, wrap
from errflow.sink import FailFastSink

__all__ = ["Error", "wrap", "is_", "classify", "format_chain", "FailFastSink"]

__version__ = "0.1.0"
