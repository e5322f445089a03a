# services package
"""Normalization services for the match-scoring engine."""

from src.services.skill_mapper import (
    SKILL_SYNONYMS,
    SkillMapper,
    DEFAULT_SKILL_MAPPER,
    load_custom_synonyms,
    normalize_skill,
    skills_match,
)
from src.services.education import (
    EDUCATION_HIERARCHY,
    get_education_level,
    meets_education_requirement,
)
from src.services.categories import MATCH_THRESHOLDS, get_match_category

__all__ = [
    "SKILL_SYNONYMS",
    "SkillMapper",
    "DEFAULT_SKILL_MAPPER",
    "load_custom_synonyms",
    "normalize_skill",
    "skills_match",
    "EDUCATION_HIERARCHY",
    "get_education_level",
    "meets_education_requirement",
    "MATCH_THRESHOLDS",
    "get_match_category",
]
