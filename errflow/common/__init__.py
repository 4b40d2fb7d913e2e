# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""通用基础设施（HTTP 错误/日志/trace 等）

约定：
- Router 不写业务逻辑：领域错误以 errflow.errors.Error 链返回，由全局异常处理统一转为标准响应
- 错误只在全局异常处理处上报一次（format_chain），中间层只 wrap 不打日志
- trace_id 通过 middleware 注入，并写入日志，便于线上排障
"""

from __future__ import annotations
