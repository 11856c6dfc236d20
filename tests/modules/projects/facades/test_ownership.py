# -*- coding: utf-8 -*-
import pytest

from app.modules.projects.facades import is_owner


@pytest.mark.parametrize(
    "owner,user,expected",
    [(7, 7, True), (7, "7", True), (7, 8, False), (None, 7, False), (7, None, False)],
)
def test_is_owner(owner, user, expected):
    assert is_owner(owner, user) is expected
