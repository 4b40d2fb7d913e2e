# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from errflow.domain import schemas
from errflow.errors import wrap
from errflow.sink import ByteSink, FailFastSink


class UserExporter:
    """把用户导出成多段文本

    各段写入互相依赖，部分写出没有意义：中间不逐个检查，结束时只看一次 final_error()。
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def export(self, user: schemas.UserOut, out: ByteSink) -> int:
        w = FailFastSink(out)

        w.write_text(f"--- user {user.id} ---\n", self._encoding)
        w.write_text(f"name: {user.name}\n", self._encoding)
        w.write_text(f"email: {user.email or '-'}\n", self._encoding)
        w.write_text(f"created_at: {user.created_at}\n", self._encoding)
        if user.bio:
            w.write_text("bio:\n", self._encoding)
            for line in user.bio.splitlines():
                w.write_text(f"  {line}\n", self._encoding)
        w.write_text("--- end ---\n", self._encoding)

        err = w.final_error()
        if err is not None:
            raise wrap(err, f"export user {user.id}")
        return w.bytes_written
