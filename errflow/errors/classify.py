# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from errflow.errors.chain import iter_chain


@runtime_checkable
class Timeout(Protocol):
    def timeout(self) -> bool: ...


@runtime_checkable
class Temporary(Protocol):
    def temporary(self) -> bool: ...


@dataclass(frozen=True)
class Classification:
    is_timeout: bool = False
    is_temporary: bool = False

    @property
    def retryable(self) -> bool:
        return self.is_timeout or self.is_temporary


# subprocess.TimeoutExpired 之类的异常带有同名的非方法属性
def _reports(capability: object) -> bool:
    return callable(capability) and bool(capability())


def classify(err: Optional[BaseException]) -> Classification:
    """按能力判断错误：链上任一节点声明了 timeout/temporary 即视为具备该能力

    不关心错误由谁产生，只要实现了 timeout() / temporary() 方法即可参与判断。
    """
    is_timeout = False
    is_temporary = False
    for link in iter_chain(err):
        if not is_timeout and isinstance(link, Timeout) and _reports(link.timeout):
            is_timeout = True
        if not is_temporary and isinstance(link, Temporary) and _reports(link.temporary):
            is_temporary = True
        if is_timeout and is_temporary:
            break
    return Classification(is_timeout=is_timeout, is_temporary=is_temporary)
