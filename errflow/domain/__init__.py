# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""
领域层：

- models: ORM 实体（User）
- schemas: Pydantic 请求/响应模型
- errors: 哨兵错误（ERR_NOT_FOUND / ERR_CONFLICT）
"""
from . import errors, models, schemas  # noqa: F401

__all__ = ["errors", "models", "schemas"]
