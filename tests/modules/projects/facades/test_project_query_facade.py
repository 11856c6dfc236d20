# -*- coding: utf-8 -*-
"""
backend/tests/modules/projects/facades/test_project_query_facade.py

Listados (flag recent, filtros, orden, paginación), hot list y detalle con
incremento de vistas.
"""
import datetime as dt

import pytest

from app.modules.projects.enums import RecruitmentStatus
from app.modules.projects.facades import ProjectFacade, ProjectQueryFacade
from app.modules.projects.schemas import ProjectSearchParams
from app.shared.utils.pagination import PageRequest

OWNER = 1
OTHER = 2


@pytest.fixture
def commands(db_session, storage, clock):
    return ProjectFacade(db_session, storage, clock)


@pytest.fixture
def queries(db_session, clock):
    return ProjectQueryFacade(db_session, clock=clock)


async def _seed(commands, make_project_request, clock, titles, user_id=OWNER, **kwargs):
    """Crea proyectos con una hora de diferencia entre cada uno."""
    created = []
    for title in titles:
        created.append(await commands.create(make_project_request(title=title, **kwargs), user_id=user_id))
        clock.advance(hours=1)
    return created


# ---------------------------------------------------------------------------
# recent
# ---------------------------------------------------------------------------
async def test_recent_flag_follows_clock(commands, queries, make_project_request, clock):
    await _seed(commands, make_project_request, clock, ["Viejo"])
    clock.advance(hours=30)
    await _seed(commands, make_project_request, clock, ["Nuevo"])

    page = await queries.find_list(None, PageRequest(0, 10))

    flags = {item.title: item.recent for item in page.data}
    assert flags == {"Nuevo": True, "Viejo": False}


async def test_recent_boundary_is_exclusive(commands, queries, make_project_request, clock):
    project = await commands.create(make_project_request(), user_id=OWNER)
    clock.now = project.created_at + dt.timedelta(hours=24)

    page = await queries.find_list(None, PageRequest(0, 10))

    assert page.data[0].recent is False


# ---------------------------------------------------------------------------
# listados
# ---------------------------------------------------------------------------
async def test_find_list_newest_first_with_totals(commands, queries, make_project_request, clock):
    await _seed(commands, make_project_request, clock, ["A", "B", "C"])

    first = await queries.find_list(None, PageRequest(0, 2))
    second = await queries.find_list(None, PageRequest(1, 2))

    assert [p.title for p in first.data] == ["C", "B"]
    assert [p.title for p in second.data] == ["A"]
    assert first.total_elements == 3
    assert first.total_pages == 2


async def test_find_list_filters(commands, queries, make_project_request, clock):
    await _seed(commands, make_project_request, clock, ["Bot de Discord"], tech_stack="Python")
    await _seed(
        commands, make_project_request, clock, ["Tienda"],
        tech_stack="React", recruits=(("Diseño", 0, 1),),
    )

    by_keyword = await queries.find_list(ProjectSearchParams(keyword="discord"), PageRequest(0, 10))
    by_stack = await queries.find_list(ProjectSearchParams(tech_stack="react"), PageRequest(0, 10))
    by_position = await queries.find_list(ProjectSearchParams(position="Diseño"), PageRequest(0, 10))

    assert [p.title for p in by_keyword.data] == ["Bot de Discord"]
    assert [p.title for p in by_stack.data] == ["Tienda"]
    assert [p.title for p in by_position.data] == ["Tienda"]


async def test_find_list_keyword_wildcards_are_literal(commands, queries, make_project_request, clock):
    await _seed(commands, make_project_request, clock, ["100% remoto", "Presencial"])

    page = await queries.find_list(ProjectSearchParams(keyword="100%"), PageRequest(0, 10))

    assert [p.title for p in page.data] == ["100% remoto"]


async def test_find_list_by_recruitment(commands, queries, make_project_request, clock):
    abierto, cerrado = await _seed(commands, make_project_request, clock, ["Abierto", "Cerrado"])
    await commands.change_recruitment(cerrado.project_id, RecruitmentStatus.CLOSED, user_id=OWNER)

    page = await queries.find_list(
        ProjectSearchParams(recruitment=RecruitmentStatus.CLOSED), PageRequest(0, 10)
    )

    assert [p.project_id for p in page.data] == [cerrado.project_id]


async def test_find_my_list_only_owned(commands, queries, make_project_request, clock):
    await _seed(commands, make_project_request, clock, ["Mío"], user_id=OWNER)
    await _seed(commands, make_project_request, clock, ["Ajeno"], user_id=OTHER)

    page = await queries.find_my_list(OWNER, PageRequest(0, 10))

    assert [p.title for p in page.data] == ["Mío"]
    assert page.total_elements == 1


async def test_find_favorite_list_latest_marked_first(commands, queries, make_project_request, clock):
    a, b = await _seed(commands, make_project_request, clock, ["A", "B"], user_id=OWNER)
    await commands.mark_favorite(b.project_id, user_id=OTHER)
    clock.advance(minutes=5)
    await commands.mark_favorite(a.project_id, user_id=OTHER)

    page = await queries.find_favorite_list(OTHER, PageRequest(0, 10))

    assert [p.title for p in page.data] == ["A", "B"]
    assert (await queries.find_favorite_list(OWNER, PageRequest(0, 10))).total_elements == 0


async def test_empty_list_has_zero_pages(queries):
    page = await queries.find_list(None, PageRequest(0, 10))
    assert page.data == []
    assert page.total_pages == 0
    assert page.total_elements == 0


# ---------------------------------------------------------------------------
# hot
# ---------------------------------------------------------------------------
async def test_hot_list_orders_by_views_and_skips_closed(commands, queries, make_project_request, clock):
    poco, mucho, cerrado = await _seed(commands, make_project_request, clock, ["Poco", "Mucho", "Cerrado"])
    for _ in range(3):
        await queries.find_by_id(mucho.project_id)
    await queries.find_by_id(poco.project_id)
    for _ in range(5):
        await queries.find_by_id(cerrado.project_id)
    await commands.change_recruitment(cerrado.project_id, RecruitmentStatus.CLOSED, user_id=OWNER)

    hot = await queries.find_hot_list(10)

    assert [p.title for p in hot] == ["Mucho", "Poco"]
    assert [p.view_count for p in hot] == [3, 1]


async def test_hot_list_respects_size(commands, queries, make_project_request, clock):
    await _seed(commands, make_project_request, clock, ["A", "B", "C"])

    assert len(await queries.find_hot_list(2)) == 2


# ---------------------------------------------------------------------------
# detalle
# ---------------------------------------------------------------------------
async def test_find_by_id_increments_views_once_per_read(commands, queries, make_project_request):
    project = await commands.create(make_project_request(), user_id=OWNER)

    first = await queries.find_by_id(project.project_id)
    second = await queries.find_by_id(project.project_id)

    assert first.view_count == 1
    assert second.view_count == 2
    assert [r.position for r in second.recruits] == ["Backend", "Frontend"]
    assert second.favorite_count == 0


async def test_find_by_id_counts_favorites(commands, queries, make_project_request):
    project = await commands.create(make_project_request(), user_id=OWNER)
    await commands.mark_favorite(project.project_id, user_id=OTHER)

    detail = await queries.find_by_id(project.project_id)

    assert detail.favorite_count == 1


async def test_find_by_id_missing_returns_none(queries, mocker):
    from app.modules.projects.repositories import project_repository

    spy = mocker.spy(project_repository, "increment_view_count")

    assert await queries.find_by_id(12345) is None
    assert spy.call_count == 1
