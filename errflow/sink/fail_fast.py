# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""快速失败写入器

把一组相互依赖的写操作收拢成一次错误检查：
第一次写失败后记住该错误，之后的写全部直接丢弃，批次结束时调用 final_error() 检查一次。

注意：没有内部加锁，只适用于单个顺序写入者。
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, Tuple

from errflow.errors import Error, sentinel, wrap

ERR_SHORT_WRITE = sentinel("short write")


class ByteSink(Protocol):
    """底层字节 sink：io.BytesIO / 以 "wb" 打开的文件 / socket.makefile("wb") 等"""

    def write(self, data: bytes) -> Optional[int]: ...


class SinkState(str, Enum):
    HEALTHY = "healthy"
    FAILED = "failed"


class FailFastSink:
    def __init__(self, sink: ByteSink) -> None:
        self._sink = sink
        self._err: Optional[BaseException] = None
        self._written = 0

    @property
    def state(self) -> SinkState:
        return SinkState.FAILED if self._err is not None else SinkState.HEALTHY

    @property
    def failed(self) -> bool:
        return self._err is not None

    @property
    def bytes_written(self) -> int:
        return self._written

    def write(self, data: bytes) -> Tuple[int, bool]:
        """失败（含部分写入）统一返回 (0, False)，已写出的字节数见 bytes_written"""
        if self._err is not None:
            return 0, False

        # 已关闭的 file-like 对象抛 ValueError
        try:
            n = self._sink.write(data)
        except (OSError, ValueError, Error) as e:
            self._err = e
            return 0, False

        # 部分 file-like 对象的 write() 不返回字节数
        if n is None:
            n = len(data)

        self._written += n
        if n < len(data):
            self._err = wrap(ERR_SHORT_WRITE, f"wrote {n} of {len(data)} bytes")
            return 0, False
        return n, True

    def write_text(self, text: str, encoding: str = "utf-8") -> Tuple[int, bool]:
        return self.write(text.encode(encoding))

    def final_error(self) -> Optional[BaseException]:
        return self._err

    def raise_for_error(self, message: str = "write batch failed") -> None:
        if self._err is not None:
            raise wrap(self._err, message)
