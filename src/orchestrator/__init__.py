# orchestrator package
"""Batch ranking of talents and jobs on top of the MatchingAgent."""

from src.orchestrator.ranking_orchestrator import (
    RankingOrchestrator,
    JobMatch,
    TalentMatch,
    filter_eligible_talents,
    get_best_job_matches,
    get_best_talent_matches,
)

__all__ = [
    "RankingOrchestrator",
    "JobMatch",
    "TalentMatch",
    "filter_eligible_talents",
    "get_best_job_matches",
    "get_best_talent_matches",
]
