# -*- coding: utf-8 -*-
import pytest

import app.modules.projects.services.commands as commands_mod
from app.modules.projects.enums import RecruitmentStatus
from app.modules.projects.facades import ProjectUpload
from app.modules.projects.schemas import ProjectRequest
from app.modules.projects.services import ProjectsCommandService


@pytest.fixture
def facade_mock(monkeypatch, mocker):
    facade = mocker.AsyncMock()
    monkeypatch.setattr(commands_mod, "ProjectFacade", lambda db, storage, clock: facade)
    return facade


@pytest.fixture
def svc(facade_mock):
    return ProjectsCommandService(db=object(), storage=object())


async def test_create_returns_saved_message(svc, facade_mock):
    request = ProjectRequest(title="Alpha")
    upload = ProjectUpload(filename="a.pdf", content_type="application/pdf", data=b"x")

    assert await svc.create_project(request, upload, user_id=5) == "Proyecto guardado"
    facade_mock.create.assert_awaited_once_with(request, upload, user_id=5)


async def test_update_returns_updated_message(svc, facade_mock):
    request = ProjectRequest(title="Beta")

    assert await svc.update_project(3, request, user_id=5) == "Proyecto actualizado"
    facade_mock.update.assert_awaited_once_with(3, request, None, user_id=5)


async def test_delete_returns_deleted_message(svc, facade_mock):
    assert await svc.delete_project(3, user_id=5) == "Proyecto eliminado"
    facade_mock.delete.assert_awaited_once_with(3, user_id=5)


async def test_errors_bubble_up(svc, facade_mock):
    from app.modules.projects.facades import PermissionDenied

    facade_mock.delete.side_effect = PermissionDenied("no")
    with pytest.raises(PermissionDenied):
        await svc.delete_project(3, user_id=5)


async def test_change_recruitment_and_favorites_delegate(svc, facade_mock):
    facade_mock.mark_favorite.return_value = True
    facade_mock.unmark_favorite.return_value = False

    await svc.change_recruitment(3, RecruitmentStatus.CLOSED, user_id=5)
    assert await svc.mark_favorite(3, user_id=6) is True
    assert await svc.unmark_favorite(3, user_id=6) is False

    facade_mock.change_recruitment.assert_awaited_once_with(3, RecruitmentStatus.CLOSED, user_id=5)
    facade_mock.mark_favorite.assert_awaited_once_with(3, user_id=6)
