# -*- coding: utf-8 -*-
"""
backend/tests/modules/comments/test_comment_facade.py
"""
import pytest

from app.modules.comments.facades import (
    CommentFacade,
    CommentNotFound,
    InvalidCommentContent,
    PermissionDenied,
    ProjectNotFound,
)
from app.modules.comments.facades.comment_facade import normalize_content
from app.modules.projects.facades import ProjectFacade
from app.shared.utils.pagination import PageRequest

WRITER = 3
OTHER = 4


@pytest.fixture
def comments(db_session, clock):
    return CommentFacade(db_session, clock)


@pytest.fixture
async def project_id(db_session, storage, clock, make_project_request):
    project = await ProjectFacade(db_session, storage, clock).create(make_project_request(), user_id=1)
    return project.project_id


def test_normalize_content_strips():
    assert normalize_content("  hola  ") == "hola"


@pytest.mark.parametrize("raw", ["", "   ", "x" * 2001])
def test_normalize_content_rejects(raw):
    with pytest.raises(InvalidCommentContent):
        normalize_content(raw)


async def test_post_on_missing_project(comments):
    with pytest.raises(ProjectNotFound):
        await comments.post(404, "Hola", user_id=WRITER)


async def test_list_slice_oldest_first_with_has_next(comments, project_id, clock):
    for text in ("uno", "dos", "tres"):
        await comments.post(project_id, text, user_id=WRITER)
        clock.advance(minutes=1)

    first, has_next = await comments.list_slice(project_id, PageRequest(0, 2))
    last, has_more = await comments.list_slice(project_id, PageRequest(1, 2))

    assert [c.content for c in first] == ["uno", "dos"]
    assert has_next is True
    assert [c.content for c in last] == ["tres"]
    assert has_more is False


async def test_update_by_writer(comments, project_id, clock):
    comment = await comments.post(project_id, "borrador", user_id=WRITER)
    clock.advance(minutes=10)

    updated = await comments.update(project_id, comment.comment_id, " final ", user_id=WRITER)

    assert updated.content == "final"
    assert updated.updated_at == clock.now


async def test_update_by_other_is_denied(comments, project_id):
    comment = await comments.post(project_id, "mío", user_id=WRITER)

    with pytest.raises(PermissionDenied):
        await comments.update(project_id, comment.comment_id, "tuyo", user_id=OTHER)


async def test_comment_must_belong_to_path_project(comments, project_id, db_session, storage, clock, make_project_request):
    other_project = await ProjectFacade(db_session, storage, clock).create(make_project_request(), user_id=1)
    comment = await comments.post(project_id, "hola", user_id=WRITER)

    with pytest.raises(CommentNotFound):
        await comments.delete(other_project.project_id, comment.comment_id, user_id=WRITER)


async def test_delete_by_writer(comments, project_id):
    comment = await comments.post(project_id, "adiós", user_id=WRITER)

    assert await comments.delete(project_id, comment.comment_id, user_id=WRITER) is True
    rows, _ = await comments.list_slice(project_id, PageRequest(0, 10))
    assert rows == []
