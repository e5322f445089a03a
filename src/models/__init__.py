# models package
"""Data models for the O-1 match-scoring engine."""

from src.models.criteria import O1Criterion, O1_CRITERIA, criterion_label
from src.models.talent import TalentMatchProfile
from src.models.job import JobMatchProfile
from src.models.weights import MatchingWeights, MATCHING_WEIGHTS
from src.models.match_result import (
    MatchCategory,
    ScoreRequirementMatch,
    CriterionMatch,
    SkillMatch,
    EducationMatch,
    ExperienceMatch,
    MatchBreakdown,
    MatchResult,
)

__all__ = [
    "O1Criterion",
    "O1_CRITERIA",
    "criterion_label",
    "TalentMatchProfile",
    "JobMatchProfile",
    "MatchingWeights",
    "MATCHING_WEIGHTS",
    "MatchCategory",
    "ScoreRequirementMatch",
    "CriterionMatch",
    "SkillMatch",
    "EducationMatch",
    "ExperienceMatch",
    "MatchBreakdown",
    "MatchResult",
]
