# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from errflow.application.user.exporter import UserExporter
from errflow.application.user.usecase import UserUsecase
from errflow.infra.db import get_db  # noqa: F401

_user_uc_singleton = UserUsecase()
_user_exporter_singleton = UserExporter()


def get_user_usecase() -> UserUsecase:
    return _user_uc_singleton


def get_user_exporter() -> UserExporter:
    return _user_exporter_singleton
