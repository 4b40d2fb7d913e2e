# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import io

import pytest

from errflow.application.user.exporter import UserExporter
from errflow.domain import schemas
from errflow.errors import Error, format_chain, root_cause
from tests.conftest import RecordingSink


def _user(**kw) -> schemas.UserOut:
    data = {"id": 7, "name": "dave", "email": None, "bio": "line one\nline two", "created_at": 1700000000}
    data.update(kw)
    return schemas.UserOut(**data)


def test_export_writes_all_parts():
    buf = io.BytesIO()
    n = UserExporter().export(_user(), buf)

    text = buf.getvalue().decode("utf-8")
    assert text == (
        "--- user 7 ---\n"
        "name: dave\n"
        "email: -\n"
        "created_at: 1700000000\n"
        "bio:\n"
        "  line one\n"
        "  line two\n"
        "--- end ---\n"
    )
    assert n == len(buf.getvalue())


def test_export_without_bio_skips_section():
    buf = io.BytesIO()
    UserExporter().export(_user(bio=None, email="d@example.com"), buf)

    text = buf.getvalue().decode("utf-8")
    assert "bio:" not in text
    assert "email: d@example.com\n" in text


def test_export_stops_at_first_failure():
    sink = RecordingSink(fail_on=3)

    with pytest.raises(Error) as exc_info:
        UserExporter().export(_user(), sink)

    assert sink.data == b"--- user 7 ---\nname: dave\n"
    assert sink.calls == 3
    assert format_chain(exc_info.value) == "export user 7: disk full"
    assert root_cause(exc_info.value) is sink.error
