# -*- coding: utf-8 -*-
import pytest

from app.shared.utils.pagination import PageRequest, total_pages


def test_page_request_offset():
    assert PageRequest(page=0, size=10).offset == 0
    assert PageRequest(page=3, size=10).offset == 30


def test_page_request_of_uses_default_size():
    req = PageRequest.of(0, None, default_size=10, max_size=100)
    assert req == PageRequest(page=0, size=10)


@pytest.mark.parametrize(
    "page,size,expected",
    [
        (-1, 5, PageRequest(page=0, size=5)),
        (2, 0, PageRequest(page=2, size=1)),
        (1, 500, PageRequest(page=1, size=100)),
    ],
)
def test_page_request_of_clamps(page, size, expected):
    assert PageRequest.of(page, size, default_size=10, max_size=100) == expected


@pytest.mark.parametrize(
    "total,size,expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (5, 0, 0)],
)
def test_total_pages(total, size, expected):
    assert total_pages(total, size) == expected
