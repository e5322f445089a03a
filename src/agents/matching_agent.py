"""
Matching Agent
Agente che calcola il match tra un talent e una job listing.

Responsabilità:
- Confronta o1_score con il min_score del job
- Confronta criteri O-1 posseduti con quelli preferiti
- Confronta skill (esatto, sinonimi, sottostringa)
- Verifica titolo di studio ed esperienza
- Calcola score aggregato pesato + categoria
- Genera breakdown e spiegazione deterministica

Nessun I/O: dati gli stessi input ritorna sempre lo stesso risultato.
"""

import math
from typing import List, Optional, Tuple

from src.services.skill_mapper import SkillMapper, DEFAULT_SKILL_MAPPER
from src.services.education import meets_education_requirement
from src.services.categories import get_match_category
from src.services.logging_utils import format_points, log_section, print_with_prefix
from src.models.talent import TalentMatchProfile
from src.models.job import JobMatchProfile
from src.models.weights import MatchingWeights, MATCHING_WEIGHTS
from src.models.match_result import (
    CriterionMatch,
    EducationMatch,
    ExperienceMatch,
    MatchBreakdown,
    MatchResult,
    ScoreRequirementMatch,
    SkillMatch,
)


def _round_half_up(value: float) -> int:
    # round() di Python arrotonda al pari (2.5 -> 2), qui serve 2.5 -> 3
    return int(math.floor(value + 0.5))


class MatchingAgent:
    """
    Agente che calcola il match tra un talent e i requisiti di un job.

    LOGICA DI MATCHING:
    1. Requisito O-1 score (40%)
    2. Overlap criteri O-1 (30%)
    3. Match skill (20%)
    4. Education + esperienza (10%)
    5. Score aggregato, categoria e summary

    Un requisito non dichiarato non penalizza mai il candidato:
    ogni fattore senza requisiti vale 100.
    """

    def __init__(
        self,
        skill_mapper: Optional[SkillMapper] = None,
        weights: Optional[MatchingWeights] = None,
        verbose: bool = False
    ):
        self.weights = weights or MATCHING_WEIGHTS
        self.verbose = verbose

        self._skill_mapper = skill_mapper

    @property
    def skill_mapper(self) -> SkillMapper:
        if self._skill_mapper is None:
            self._skill_mapper = DEFAULT_SKILL_MAPPER
        return self._skill_mapper

    def match(self, talent: TalentMatchProfile, job: JobMatchProfile) -> MatchResult:
        """Calcola il match tra talent e job."""
        self._log(f"Matching: talent {talent.id} vs job {job.id}")
        required_score = job.min_score or 0

        # ═══════════════════════════════════════════════════════════════
        # STEP 1: Requisito O-1 score
        # ═══════════════════════════════════════════════════════════════
        log_section(self._log, "Step 1: O-1 score requirement", width=60, char="-")
        score_points = self._calculate_score_points(talent.o1_score, required_score)
        score_requirement = ScoreRequirementMatch(
            required=required_score,
            has=talent.o1_score,
            met=talent.o1_score >= required_score,
            points=score_points,
        )
        self._log(f"   -> {talent.o1_score}/{required_score} -> {format_points(score_points)} pts")

        # ═══════════════════════════════════════════════════════════════
        # STEP 2: Overlap criteri
        # ═══════════════════════════════════════════════════════════════
        log_section(self._log, "Step 2: Criteria overlap", width=60, char="-")
        criteria_points, criteria_breakdown = self._calculate_criteria_points(
            [c.value for c in talent.criteria_met],
            [c.value for c in job.preferred_criteria]
        )
        self._log(f"   -> {len(criteria_breakdown)} entries -> {format_points(criteria_points)} pts")

        # ═══════════════════════════════════════════════════════════════
        # STEP 3: Match skill
        # ═══════════════════════════════════════════════════════════════
        log_section(self._log, "Step 3: Skills match", width=60, char="-")
        skills_points, skills_breakdown = self._calculate_skills_points(
            talent.skills, job.required_skills, job.preferred_skills
        )
        self._log(f"   -> {format_points(skills_points)} pts")

        # ═══════════════════════════════════════════════════════════════
        # STEP 4: Education + esperienza
        # ═══════════════════════════════════════════════════════════════
        log_section(self._log, "Step 4: Education & experience", width=60, char="-")
        education_points, experience_points = self._calculate_education_experience_points(talent, job)
        education_match = EducationMatch(
            required=job.required_education or None,
            has=talent.education_level or None,
            met=meets_education_requirement(talent.education_level, job.required_education),
            points=education_points,
        )
        experience_match = ExperienceMatch(
            required=job.min_experience or None,
            has=talent.years_experience,
            met=not job.min_experience or (talent.years_experience or 0) >= job.min_experience,
            points=experience_points,
        )
        self._log(
            f"   -> education {format_points(education_points)}, "
            f"experience {format_points(experience_points)}"
        )

        # ═══════════════════════════════════════════════════════════════
        # STEP 5: Score aggregato
        # ═══════════════════════════════════════════════════════════════
        education_experience_points = (education_points + experience_points) / 2
        weighted = (
            score_points * self.weights.o1_score +
            criteria_points * self.weights.criteria_overlap +
            skills_points * self.weights.skills_match +
            education_experience_points * self.weights.education_experience
        )
        overall_score = max(0, min(100, _round_half_up(weighted)))
        category = get_match_category(overall_score)
        self._log(f"SCORE FINALE: {overall_score}/100 ({category})")

        breakdown = MatchBreakdown(
            score_requirement=score_requirement,
            criteria_match=criteria_breakdown,
            skills_match=skills_breakdown,
            education_match=education_match,
            experience_match=experience_match,
        )

        return MatchResult(
            overall_score=overall_score,
            category=category,
            breakdown=breakdown,
            summary=self._generate_summary(category, breakdown),
            score_points=score_points,
            criteria_points=criteria_points,
            skills_points=skills_points,
            education_experience_points=education_experience_points,
        )

    def _calculate_score_points(self, talent_score: int, required_score: int) -> float:
        """Punti per il requisito di O-1 score."""
        if not required_score:
            return 100.0

        if talent_score >= required_score:
            # Base 80 + mezzo punto per ogni punto in eccesso
            excess = talent_score - required_score
            return min(100.0, 80 + excess * 0.5)

        # Credito parziale, sempre sotto la soglia "met" (80)
        return float(_round_half_up(talent_score / required_score * 70))

    def _calculate_criteria_points(
        self,
        talent_criteria: List[str],
        preferred_criteria: List[str]
    ) -> Tuple[float, List[CriterionMatch]]:
        """Punti per l'overlap tra criteri del talent e criteri preferiti dal job."""
        if not preferred_criteria:
            return 100.0, []

        breakdown: List[CriterionMatch] = []
        n_preferred = len(preferred_criteria)
        matched_count = 0

        for criterion in preferred_criteria:
            has = criterion in talent_criteria
            if has:
                matched_count += 1
            breakdown.append(CriterionMatch(
                criterion=criterion,
                required=True,
                has=has,
                points=100 / n_preferred if has else 0.0,
            ))
            self._log(f"   {'MATCH' if has else 'GAP'} {criterion}")

        # Bonus per criteri extra (5 pts ciascuno, max 20)
        extra_criteria = [c for c in talent_criteria if c not in preferred_criteria]
        for criterion in extra_criteria:
            breakdown.append(CriterionMatch(
                criterion=criterion,
                required=False,
                has=True,
                points=5.0,
            ))
            self._log(f"   EXTRA {criterion}")

        base_points = matched_count / n_preferred * 100
        bonus_points = min(len(extra_criteria) * 5, 20)

        return min(100.0, base_points + bonus_points), breakdown

    def _calculate_skills_points(
        self,
        talent_skills: List[str],
        required_skills: List[str],
        preferred_skills: List[str]
    ) -> Tuple[float, List[SkillMatch]]:
        """
        Punti per il match delle skill.

        Split 60/40: le required pesano 60, le preferred 40.
        Se manca anche una sola required, le preferred non contano.
        """
        if not required_skills and not preferred_skills:
            return 100.0, []

        breakdown: List[SkillMatch] = []
        required_matched = 0
        preferred_matched = 0

        for skill in required_skills:
            matched_with, match_type = self.skill_mapper.find_match(skill, talent_skills)
            has = matched_with is not None
            if has:
                required_matched += 1
            breakdown.append(SkillMatch(
                skill=skill,
                required=True,
                has=has,
                points=100 / len(required_skills) if has else 0.0,
                matched_with=matched_with,
                match_type=match_type,
            ))
            self._log(f"   {'MATCH' if has else 'GAP'} {skill}" + (f" ({match_type})" if has else ""))

        for skill in preferred_skills:
            matched_with, match_type = self.skill_mapper.find_match(skill, talent_skills)
            has = matched_with is not None
            if has:
                preferred_matched += 1
            breakdown.append(SkillMatch(
                skill=skill,
                required=False,
                has=has,
                points=50 / len(preferred_skills) if has else 0.0,
                matched_with=matched_with,
                match_type=match_type,
            ))
            self._log(f"   {'MATCH' if has else 'GAP'} (preferred) {skill}")

        if not required_skills or required_matched == len(required_skills):
            required_points = 60 if required_skills else 0
            if preferred_skills:
                preferred_points = preferred_matched / len(preferred_skills) * 40
            elif required_skills:
                preferred_points = 40
            else:
                preferred_points = 100
            return float(required_points + preferred_points), breakdown

        # Required mancanti: cap proporzionale, niente credito dalle preferred
        return float(_round_half_up(required_matched / len(required_skills) * 60)), breakdown

    def _calculate_education_experience_points(
        self,
        talent: TalentMatchProfile,
        job: JobMatchProfile
    ) -> Tuple[float, float]:
        """Punti education (100 o 40) ed esperienza (100/80/60/30)."""
        education_points = 100.0
        if job.required_education:
            met = meets_education_requirement(talent.education_level, job.required_education)
            education_points = 100.0 if met else 40.0

        experience_points = 100.0
        if job.min_experience:
            talent_years = talent.years_experience or 0
            if talent_years >= job.min_experience:
                experience_points = 100.0
            elif talent_years >= job.min_experience * 0.75:
                experience_points = 80.0
            elif talent_years >= job.min_experience * 0.5:
                experience_points = 60.0
            else:
                experience_points = 30.0

        return education_points, experience_points

    def _generate_summary(self, category: str, breakdown: MatchBreakdown) -> str:
        """Genera spiegazione testuale del match."""
        parts = []

        if category == "excellent":
            parts.append("Excellent match!")
        elif category == "good":
            parts.append("Good potential match.")
        elif category == "fair":
            parts.append("Moderate match.")
        else:
            parts.append("Limited match.")

        requirement = breakdown.score_requirement
        if not requirement.met and requirement.required > 0:
            parts.append(
                f"O-1 score ({requirement.has}%) is below requirement ({requirement.required}%)."
            )

        missing_required = [s.skill for s in breakdown.skills_match if s.required and not s.has]
        if 0 < len(missing_required) <= 3:
            parts.append(f"Missing skills: {', '.join(missing_required)}.")
        elif len(missing_required) > 3:
            parts.append(f"Missing {len(missing_required)} required skills.")

        missing_criteria = [c for c in breakdown.criteria_match if c.required and not c.has]
        if missing_criteria:
            parts.append(f"Missing {len(missing_criteria)} preferred criteria.")

        return " ".join(parts)

    def _log(self, message: str) -> None:
        print_with_prefix("[MatchingAgent]", message, enabled=self.verbose)


# ═══════════════════════════════════════════════════════════════════════════
# SIMPLE API
# ═══════════════════════════════════════════════════════════════════════════

def calculate_match_score(talent: TalentMatchProfile, job: JobMatchProfile) -> MatchResult:
    """
    API semplice per il match talent-job (pesi di default, nessun log).

    Args:
        talent: Profilo di matching del talent
        job: Profilo di matching del job

    Returns:
        MatchResult con score, categoria, breakdown e summary
    """
    return MatchingAgent().match(talent, job)
