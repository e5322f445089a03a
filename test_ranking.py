"""
Tests for RankingOrchestrator and the batch ranking helpers.
"""

import pytest

from src.agents import MatchingAgent
from src.models import JobMatchProfile, TalentMatchProfile
from src.orchestrator import (
    JobMatch,
    RankingOrchestrator,
    TalentMatch,
    filter_eligible_talents,
    get_best_job_matches,
    get_best_talent_matches,
)


class CountingMatchingAgent(MatchingAgent):
    """MatchingAgent che conta le chiamate a match()."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.calls = 0

    def match(self, talent, job):
        self.calls += 1
        return super().match(talent, job)


class TestRankJobs:
    """Test best-jobs-for-talent ranking."""

    def test_sorted_descending(self, python_talent, sample_jobs):
        results = get_best_job_matches(python_talent, sample_jobs)

        assert all(isinstance(r, JobMatch) for r in results)
        assert [r.job.id for r in results] == ["job-open", "job-medium", "job-hard"]
        assert [r.match.overall_score for r in results] == [100, 70, 34]

    def test_limit_applied_after_sort(self, python_talent, sample_jobs):
        results = get_best_job_matches(python_talent, sample_jobs, limit=1)

        assert len(results) == 1
        # job-open è in seconda posizione nell'input ma vince
        assert results[0].job.id == "job-open"

    def test_limit_larger_than_input(self, python_talent, sample_jobs):
        assert len(get_best_job_matches(python_talent, sample_jobs, limit=50)) == 3

    def test_ties_keep_input_order(self, python_talent):
        jobs = [JobMatchProfile(id=f"job-{i}") for i in range(5)]
        results = get_best_job_matches(python_talent, jobs)
        assert [r.job.id for r in results] == [f"job-{i}" for i in range(5)]

    def test_each_pair_scored_once(self, python_talent, sample_jobs):
        agent = CountingMatchingAgent()
        RankingOrchestrator(matching_agent=agent).rank_jobs(python_talent, sample_jobs, limit=1)
        assert agent.calls == len(sample_jobs)

    def test_matches_single_pair_scoring(self, python_talent, sample_jobs):
        agent = MatchingAgent()
        results = RankingOrchestrator(matching_agent=agent).rank_jobs(python_talent, sample_jobs)
        for item in results:
            assert item.match == agent.match(python_talent, item.job)

    def test_no_limit(self, python_talent):
        jobs = [JobMatchProfile(id=f"job-{i}") for i in range(15)]
        orchestrator = RankingOrchestrator()

        assert len(orchestrator.rank_jobs(python_talent, jobs)) == 10
        assert len(orchestrator.rank_jobs(python_talent, jobs, limit=None)) == 15

    def test_zero_limit_and_empty_input(self, python_talent, sample_jobs):
        assert get_best_job_matches(python_talent, sample_jobs, limit=0) == []
        assert get_best_job_matches(python_talent, []) == []


class TestRankTalents:
    """Test best-talents-for-job ranking."""

    def test_sorted_descending(self, python_job):
        talents = [
            TalentMatchProfile(id="t-low", o1_score=20),
            TalentMatchProfile(id="t-top", o1_score=90, criteria_met=["awards", "judging"], skills=["python", "aws"]),
            TalentMatchProfile(id="t-mid", o1_score=75, criteria_met=["awards"], skills=["python"]),
        ]
        results = get_best_talent_matches(python_job, talents)

        assert all(isinstance(r, TalentMatch) for r in results)
        assert [r.talent.id for r in results] == ["t-top", "t-mid", "t-low"]
        scores = [r.match.overall_score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_limit(self, python_job):
        talents = [TalentMatchProfile(id=f"t-{i}", o1_score=i * 10) for i in range(8)]
        results = get_best_talent_matches(python_job, talents, limit=3)

        assert len(results) == 3
        assert results[0].talent.id == "t-7"

    def test_pre_filter(self, python_job):
        talents = [
            TalentMatchProfile(id="t-1", o1_score=10),
            TalentMatchProfile(id="t-2", o1_score=35),
            TalentMatchProfile(id="t-3", o1_score=80),
        ]
        agent = CountingMatchingAgent()
        orchestrator = RankingOrchestrator(matching_agent=agent)
        results = orchestrator.rank_talents(python_job, talents, min_score_ratio=0.5)

        assert [r.talent.id for r in results] == ["t-3", "t-2"]
        assert agent.calls == 2

    def test_no_pre_filter_by_default(self, python_job):
        talents = [TalentMatchProfile(id="t-1", o1_score=0)]
        assert len(get_best_talent_matches(python_job, talents)) == 1


class TestFilterEligibleTalents:
    """Test the o1_score pre-filter."""

    def test_threshold_is_inclusive(self):
        job = JobMatchProfile(id="j", min_score=80)
        talents = [
            TalentMatchProfile(id="a", o1_score=39),
            TalentMatchProfile(id="b", o1_score=40),
            TalentMatchProfile(id="c", o1_score=90),
        ]
        assert [t.id for t in filter_eligible_talents(job, talents)] == ["b", "c"]

    @pytest.mark.parametrize("min_score", [0, None])
    def test_no_min_score_keeps_everyone(self, min_score):
        job = JobMatchProfile(id="j", min_score=min_score)
        talents = [TalentMatchProfile(id="a", o1_score=0), TalentMatchProfile(id="b", o1_score=5)]
        assert len(filter_eligible_talents(job, talents)) == 2

    def test_custom_ratio(self):
        job = JobMatchProfile(id="j", min_score=80)
        talents = [TalentMatchProfile(id="a", o1_score=60), TalentMatchProfile(id="b", o1_score=80)]
        assert [t.id for t in filter_eligible_talents(job, talents, min_score_ratio=1.0)] == ["b"]


class TestRankingLogging:
    """Test verbose output of the orchestrator."""

    def test_verbose(self, python_talent, sample_jobs, capsys):
        RankingOrchestrator(verbose=True).rank_jobs(python_talent, sample_jobs)
        out = capsys.readouterr().out
        assert "[Ranking]" in out
        assert "1. job-open -> 100 (excellent)" in out

    def test_silent_by_default(self, python_talent, sample_jobs, capsys):
        get_best_job_matches(python_talent, sample_jobs)
        assert capsys.readouterr().out == ""
