# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import subprocess

from errflow.errors import Classification, Timeout, classify, new, wrap


class UpstreamTimeout(Exception):
    """第三方错误：不继承 Error，只实现 timeout() 方法"""

    def timeout(self) -> bool:
        return True


def test_plain_error_classifies_all_false():
    c = classify(wrap(new("boom"), "ctx"))

    assert c == Classification(is_timeout=False, is_temporary=False)
    assert not c.retryable


def test_none_classifies_all_false():
    assert classify(None) == Classification()


def test_flags_survive_wrapping():
    e = new("read deadline exceeded", timeout=True)

    assert classify(wrap(e, "ctx")).is_timeout == classify(e).is_timeout


def test_timeout_wrapped_three_times():
    err = wrap(wrap(wrap(new("i/o timeout", timeout=True), "a"), "b"), "c")

    c = classify(err)
    assert c.is_timeout
    assert not c.is_temporary
    assert c.retryable


def test_flags_collected_from_different_links():
    err = wrap(new("conn reset", temporary=True), "query", timeout=True)

    c = classify(err)
    assert c.is_timeout and c.is_temporary


def test_foreign_error_with_capability_method():
    err = wrap(UpstreamTimeout("upstream"), "call payment service")

    assert isinstance(UpstreamTimeout(), Timeout)
    assert classify(err).is_timeout


def test_timeout_attribute_that_is_not_a_method_is_ignored():
    exc = subprocess.TimeoutExpired(cmd="sleep", timeout=5)

    assert classify(wrap(exc, "run tool")) == Classification()


def test_builtin_timeout_error_has_no_capability():
    # 按能力判断，不按类型：内置 TimeoutError 没有 timeout() 方法
    assert not classify(TimeoutError("slow")).is_timeout
