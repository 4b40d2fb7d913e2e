# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from errflow.sink.fail_fast import ERR_SHORT_WRITE, ByteSink, FailFastSink, SinkState

__all__ = ["ByteSink", "FailFastSink", "SinkState", "ERR_SHORT_WRITE"]
