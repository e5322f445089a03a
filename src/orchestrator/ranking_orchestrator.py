"""
Ranking Orchestrator
Ordina molte job per un talent, o molti talent per una job.

Responsabilità:
- Chiama il MatchingAgent una volta per ogni coppia
- Ordina per overall_score decrescente (sort stabile: a parità vince l'ordine di input)
- Tronca a `limit` solo dopo l'ordinamento

Nessun parallelismo e nessuna cache: ogni chiamata è indipendente.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from src.agents.matching_agent import MatchingAgent
from src.services.logging_utils import log_section, print_with_prefix
from src.models.talent import TalentMatchProfile
from src.models.job import JobMatchProfile
from src.models.match_result import MatchResult


@dataclass
class JobMatch:
    """Una job con il suo match per un talent."""
    job: JobMatchProfile
    match: MatchResult


@dataclass
class TalentMatch:
    """Un talent con il suo match per una job."""
    talent: TalentMatchProfile
    match: MatchResult


def filter_eligible_talents(
    job: JobMatchProfile,
    talents: Sequence[TalentMatchProfile],
    min_score_ratio: float = 0.5
) -> List[TalentMatchProfile]:
    """Tiene i talent con o1_score >= min_score * ratio (tutti se il job non ha min_score)."""
    threshold = (job.min_score or 0) * min_score_ratio
    return [t for t in talents if t.o1_score >= threshold]


class RankingOrchestrator:
    """
    Orchestratore per il ranking batch.

    FLUSSO:
    1. (opzionale) pre-filtro talent per o1_score
    2. MatchingAgent su ogni coppia
    3. Sort stabile decrescente
    4. Troncamento a limit
    """

    def __init__(
        self,
        matching_agent: Optional[MatchingAgent] = None,
        verbose: bool = False
    ):
        self.verbose = verbose
        self._matching_agent = matching_agent

    @property
    def matching_agent(self) -> MatchingAgent:
        if self._matching_agent is None:
            self._matching_agent = MatchingAgent(verbose=self.verbose)
        return self._matching_agent

    def rank_jobs(
        self,
        talent: TalentMatchProfile,
        jobs: Sequence[JobMatchProfile],
        limit: Optional[int] = 10
    ) -> List[JobMatch]:
        """
        Migliori job per un talent.

        Args:
            talent: Profilo del talent
            jobs: Job candidate
            limit: Numero massimo di risultati (None = tutti)

        Returns:
            Lista di JobMatch ordinata per overall_score decrescente
        """
        log_section(self._log, f"RANKING: {len(jobs)} jobs for talent {talent.id}", width=70, char="=")

        matches = [JobMatch(job=job, match=self.matching_agent.match(talent, job)) for job in jobs]
        ranked = sorted(matches, key=lambda m: m.match.overall_score, reverse=True)

        if limit is not None:
            ranked = ranked[:limit]
        self._log_ranking([(m.job.id, m.match) for m in ranked])
        return ranked

    def rank_talents(
        self,
        job: JobMatchProfile,
        talents: Sequence[TalentMatchProfile],
        limit: Optional[int] = 10,
        min_score_ratio: Optional[float] = None
    ) -> List[TalentMatch]:
        """
        Migliori talent per una job.

        Args:
            job: Profilo della job
            talents: Talent candidati
            limit: Numero massimo di risultati (None = tutti)
            min_score_ratio: Se impostato, scarta prima i talent sotto min_score * ratio

        Returns:
            Lista di TalentMatch ordinata per overall_score decrescente
        """
        log_section(self._log, f"RANKING: {len(talents)} talents for job {job.id}", width=70, char="=")

        if min_score_ratio is not None:
            eligible = filter_eligible_talents(job, talents, min_score_ratio)
            self._log(f"Pre-filter (ratio {min_score_ratio}): {len(eligible)}/{len(talents)} talents")
            talents = eligible

        matches = [TalentMatch(talent=talent, match=self.matching_agent.match(talent, job)) for talent in talents]
        ranked = sorted(matches, key=lambda m: m.match.overall_score, reverse=True)

        if limit is not None:
            ranked = ranked[:limit]
        self._log_ranking([(m.talent.id, m.match) for m in ranked])
        return ranked

    def _log_ranking(self, rows: List[tuple]) -> None:
        for position, (item_id, match) in enumerate(rows, start=1):
            self._log(f"   {position}. {item_id} -> {match.overall_score} ({match.category})")

    def _log(self, message: str) -> None:
        """Conditional logging."""
        print_with_prefix("[Ranking]", message, enabled=self.verbose)


# ═══════════════════════════════════════════════════════════════════════════
# SIMPLE API
# ═══════════════════════════════════════════════════════════════════════════

def get_best_job_matches(
    talent: TalentMatchProfile,
    jobs: Sequence[JobMatchProfile],
    limit: Optional[int] = 10
) -> List[JobMatch]:
    return RankingOrchestrator().rank_jobs(talent, jobs, limit)


def get_best_talent_matches(
    job: JobMatchProfile,
    talents: Sequence[TalentMatchProfile],
    limit: Optional[int] = 10
) -> List[TalentMatch]:
    return RankingOrchestrator().rank_talents(job, talents, limit)
