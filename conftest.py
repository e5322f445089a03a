"""
Pytest configuration and shared fixtures.
"""

import pytest

from src.models import JobMatchProfile, TalentMatchProfile


@pytest.fixture
def python_talent() -> TalentMatchProfile:
    """Talent con un solo criterio e una sola skill."""
    return TalentMatchProfile(
        id="talent-python",
        o1_score=75,
        criteria_met=["awards"],
        skills=["python"],
    )


@pytest.fixture
def python_job() -> JobMatchProfile:
    """Job con min_score, due criteri preferiti, una required e una preferred."""
    return JobMatchProfile(
        id="job-python",
        min_score=70,
        preferred_criteria=["awards", "judging"],
        required_skills=["python"],
        preferred_skills=["aws"],
    )


@pytest.fixture
def empty_talent() -> TalentMatchProfile:
    return TalentMatchProfile(id="talent-empty", o1_score=0, criteria_met=[], skills=[])


@pytest.fixture
def empty_job() -> JobMatchProfile:
    return JobMatchProfile(id="job-empty")


@pytest.fixture
def sample_jobs() -> list:
    """Job con requisiti crescenti (ordine di input volutamente non ordinato per score)."""
    return [
        JobMatchProfile(
            id="job-hard",
            min_score=95,
            preferred_criteria=["judging", "memberships", "high_salary"],
            required_skills=["rust", "haskell"],
        ),
        JobMatchProfile(id="job-open"),
        JobMatchProfile(
            id="job-medium",
            min_score=70,
            preferred_criteria=["awards", "judging"],
            required_skills=["python"],
            preferred_skills=["aws"],
        ),
    ]


@pytest.fixture
def talent_records() -> list:
    """Record grezzi come arrivano dal DB / JSON."""
    return [
        {
            "id": "t-1",
            "o1_score": 88,
            "criteria_met": ["awards", "judging"],
            "skills": ["Python", "AWS"],
            "education_level": "PhD",
            "years_experience": 10,
        },
        {
            "id": "t-2",
            "o1_score": 40,
            "criteria_met": [],
            "skills": ["JavaScript"],
        },
        {
            "o1_score": 60,
            "skills": ["Go"],
        },
    ]


@pytest.fixture
def job_records() -> list:
    return [
        {
            "id": "j-1",
            "title": "ML Engineer",
            "min_score": 70,
            "preferred_criteria": ["awards"],
            "required_skills": ["python"],
            "preferred_skills": ["aws"],
            "required_education": "master",
            "min_experience": 5,
        },
        {
            "id": "j-2",
            "title": "Frontend Engineer",
            "required_skills": ["js"],
        },
    ]
