# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""错误值与 cause 链

约定：
- Error 一旦构造，message / cause / 能力标记均不可修改
- 每一层只做 wrap（补充上下文），不替换原始错误，也不在中间层打日志
- 判断错误时用 is_() 按身份比较，或用 classify() 按能力判断，不按具体类型分支
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional


class Error(Exception):
    """不透明错误值：消息 + 可选 cause + 固定的能力标记"""

    __slots__ = ("_message", "_cause", "_timeout", "_temporary")

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        timeout: bool = False,
        temporary: bool = False,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._cause = cause
        self._timeout = bool(timeout)
        self._temporary = bool(temporary)
        # 让 traceback 也能展示同一条链
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    def timeout(self) -> bool:
        return self._timeout

    def temporary(self) -> bool:
        return self._temporary

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        flags = [name for name, on in (("timeout", self._timeout), ("temporary", self._temporary)) if on]
        suffix = f", flags={flags}" if flags else ""
        return f"Error({self._message!r}{suffix})"

    def _state(self) -> Dict[str, Any]:
        return {"cause": self._cause, "timeout": self._timeout, "temporary": self._temporary}

    # 状态存在 __slots__ 里，BaseException 默认的 __reduce__ 只带 args
    def __reduce__(self):
        return _restore, (type(self), self._message, self._state())


def _restore(cls: type, message: str, state: Dict[str, Any]) -> "Error":
    return cls(message, **state)


def new(message: str, *, timeout: bool = False, temporary: bool = False) -> Error:
    """构造一个没有 cause 的根错误"""
    return Error(message, timeout=timeout, temporary=temporary)


def sentinel(message: str) -> Error:
    """模块级哨兵错误，只能按身份比较，例如 ERR_NOT_FOUND = sentinel("record not found")"""
    return Error(message)


def wrap(
    cause: Optional[BaseException],
    message: str,
    *,
    timeout: bool = False,
    temporary: bool = False,
) -> Error:
    """给已有错误补充上下文；cause 为空时直接拒绝"""
    if cause is None:
        raise ValueError("wrap requires an existing error as cause")
    return Error(message, cause=cause, timeout=timeout, temporary=temporary)


class Marked(Error):
    """保留真实 cause，同时声明自己与某个哨兵等价（is_ 通过 matches 命中）"""

    __slots__ = ("_mark",)

    def __init__(self, message: str, *, mark: BaseException, cause: Optional[BaseException] = None, **flags: bool) -> None:
        super().__init__(message, cause=cause, **flags)
        self._mark = mark

    def matches(self, target: BaseException) -> bool:
        return target is self._mark

    def _state(self) -> Dict[str, Any]:
        state = super()._state()
        state["mark"] = self._mark
        return state


def mark(cause: Optional[BaseException], target: BaseException, message: str) -> Error:
    """例如把驱动层的 IntegrityError 标记为 ERR_CONFLICT，而不丢掉原始错误"""
    if cause is None:
        raise ValueError("mark requires an existing error as cause")
    return Marked(message, mark=target, cause=cause)


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    if err is None:
        return None
    if isinstance(err, Error):
        return err.cause
    if err.__cause__ is not None:
        return err.__cause__
    if err.__context__ is not None and not err.__suppress_context__:
        return err.__context__
    return None


def iter_chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """从最外层到最内层依次产出链上的每个错误"""
    seen = set()
    cur = err
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        yield cur
        cur = unwrap(cur)


def root_cause(err: Optional[BaseException]) -> Optional[BaseException]:
    last = None
    for link in iter_chain(err):
        last = link
    return last


def is_(err: Optional[BaseException], target: BaseException) -> bool:
    """沿 cause 链查找 target：先按身份，再看链节点自带的 matches() 判定"""
    for link in iter_chain(err):
        if link is target:
            return True
        matches = getattr(link, "matches", None)
        if callable(matches) and matches(target):
            return True
    return False


def _link_message(link: BaseException) -> str:
    if isinstance(link, Error):
        return link.message
    text = str(link)
    return text or type(link).__name__


def format_chain(err: Optional[BaseException], sep: str = ": ") -> str:
    """渲染完整链（外层在前），只在最终上报处调用一次"""
    return sep.join(_link_message(link) for link in iter_chain(err))
