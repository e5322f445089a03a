# agents package
"""Agents that build profiles and score talent/job matches."""

from src.agents.matching_agent import MatchingAgent, calculate_match_score
from src.agents.profile_agent import (
    ProfileAgent,
    RecordMappingError,
    talent_profile_from_record,
    job_profile_from_record,
)

__all__ = [
    "MatchingAgent",
    "calculate_match_score",
    "ProfileAgent",
    "RecordMappingError",
    "talent_profile_from_record",
    "job_profile_from_record",
]
