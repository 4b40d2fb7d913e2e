# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import argparse

from errflow.domain import models  # noqa: F401
from errflow.infra.config import settings
from errflow.infra.db import Base, engine


def init_db(drop: bool = False) -> None:
    if drop:
        print(f"Dropping tables on {engine.url!r}...")
        Base.metadata.drop_all(bind=engine)
    print(f"Creating tables on {engine.url!r}...")
    Base.metadata.create_all(bind=engine)
    print("Done.")


def main() -> None:
    parser = argparse.ArgumentParser(description="初始化 errflow 示例服务的数据表")
    parser.add_argument("--drop", action="store_true", help="先删除已有表（仅限 dev 环境）")
    args = parser.parse_args()

    if args.drop and settings.ENV != "dev":
        parser.error(f"--drop is only allowed when ENV=dev (current: {settings.ENV})")
    init_db(drop=args.drop)


if __name__ == "__main__":
    main()
