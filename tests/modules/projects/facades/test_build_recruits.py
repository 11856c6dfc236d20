# -*- coding: utf-8 -*-
from app.modules.projects.facades import build_recruits
from app.modules.projects.schemas import RecruitRequest


def test_summary_joins_positions_in_order():
    recruits, summary = build_recruits([
        RecruitRequest(position="Backend", current_count=0, target_count=2),
        RecruitRequest(position="Diseño", current_count=1, target_count=1),
        RecruitRequest(position="Backend", current_count=0, target_count=1),
    ])
    assert summary == "Backend, Diseño, Backend"
    assert [r.position for r in recruits] == ["Backend", "Diseño", "Backend"]
    assert [r.sort_order for r in recruits] == [0, 1, 2]
    assert (recruits[1].current_count, recruits[1].target_count) == (1, 1)


def test_empty_list_gives_empty_summary():
    recruits, summary = build_recruits([])
    assert recruits == []
    assert summary == ""
