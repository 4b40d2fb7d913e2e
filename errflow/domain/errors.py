# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""领域层哨兵错误

调用方用 errflow.errors.is_(err, ERR_NOT_FOUND) 判断，永远不要比较消息文本。
"""

from __future__ import annotations

from errflow.errors import sentinel

ERR_NOT_FOUND = sentinel("record not found")
ERR_CONFLICT = sentinel("record already exists")
