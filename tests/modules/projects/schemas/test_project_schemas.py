# -*- coding: utf-8 -*-
import pytest
from pydantic import ValidationError

from app.modules.projects.enums import RecruitmentStatus
from app.modules.projects.schemas import ProjectRequest, RecruitRequest, RecruitmentChangeIn


def test_project_request_minimal():
    req = ProjectRequest(title="  Hackatón  ")
    assert req.title == "Hackatón"
    assert req.recruits == []
    assert req.deadline is None


def test_project_request_rejects_blank_title():
    with pytest.raises(ValidationError):
        ProjectRequest(title="   ")


def test_project_request_parses_json_with_recruits():
    req = ProjectRequest.model_validate_json(
        '{"title": "Bot", "deadline": "2026-04-30T23:59:59Z",'
        ' "recruits": [{"position": "Backend", "target_count": 2}]}'
    )
    assert req.recruits[0].position == "Backend"
    assert req.recruits[0].current_count == 0
    assert req.deadline.year == 2026


def test_recruit_current_cannot_exceed_target():
    with pytest.raises(ValidationError):
        RecruitRequest(position="Backend", current_count=3, target_count=2)


def test_recruit_rejects_negative_counts():
    with pytest.raises(ValidationError):
        RecruitRequest(position="Backend", current_count=-1, target_count=2)


def test_recruitment_change_accepts_enum_values():
    assert RecruitmentChangeIn(recruitment="CLOSED").recruitment is RecruitmentStatus.CLOSED
    with pytest.raises(ValidationError):
        RecruitmentChangeIn(recruitment="PAUSED")
