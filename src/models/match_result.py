from pydantic import BaseModel, Field
from typing import List, Literal, Optional

MatchCategory = Literal["excellent", "good", "fair", "poor"]


class ScoreRequirementMatch(BaseModel):
    required: int = 0          # min_score del job (0 = nessun requisito)
    has: int = 0               # o1_score del talent
    met: bool = False
    points: float = 0.0


class CriterionMatch(BaseModel):
    criterion: str
    required: bool             # False = criterio extra del talent (bonus)
    has: bool
    points: float = 0.0


class SkillMatch(BaseModel):
    skill: str
    required: bool             # False = skill preferenziale
    has: bool
    points: float = 0.0
    # Skill del talent che ha soddisfatto il requisito e tipo di match
    # Tipi: "exact", "synonym", "substring"
    matched_with: Optional[str] = None
    match_type: Optional[str] = None


class EducationMatch(BaseModel):
    required: Optional[str] = None
    has: Optional[str] = None
    met: bool = False
    points: float = 0.0


class ExperienceMatch(BaseModel):
    required: Optional[float] = None
    has: Optional[float] = None
    met: bool = False
    points: float = 0.0


class MatchBreakdown(BaseModel):
    score_requirement: ScoreRequirementMatch = Field(default_factory=ScoreRequirementMatch)
    criteria_match: List[CriterionMatch] = []
    skills_match: List[SkillMatch] = []
    education_match: EducationMatch = Field(default_factory=EducationMatch)
    experience_match: ExperienceMatch = Field(default_factory=ExperienceMatch)


class MatchResult(BaseModel):
    overall_score: int  # 0-100
    category: MatchCategory
    breakdown: MatchBreakdown
    summary: str
    # Breakdown score per componente (prima dei pesi)
    score_points: float = 0.0
    criteria_points: float = 0.0
    skills_points: float = 0.0
    education_experience_points: float = 0.0

    @property
    def missing_required_skills(self) -> List[str]:
        return [s.skill for s in self.breakdown.skills_match if s.required and not s.has]

    @property
    def missing_preferred_criteria(self) -> List[str]:
        return [c.criterion for c in self.breakdown.criteria_match if c.required and not c.has]
