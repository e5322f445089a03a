import math

from pydantic import BaseModel, Field, model_validator


class MatchingWeights(BaseModel):
    """Pesi dei quattro fattori di matching (devono sommare a 1.0)."""
    o1_score: float = Field(default=0.40, ge=0)
    criteria_overlap: float = Field(default=0.30, ge=0)
    skills_match: float = Field(default=0.20, ge=0)
    education_experience: float = Field(default=0.10, ge=0)

    @model_validator(mode="after")
    def _check_total(self) -> "MatchingWeights":
        total = self.o1_score + self.criteria_overlap + self.skills_match + self.education_experience
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"matching weights must sum to 1.0 (got {total:.4f})")
        return self


MATCHING_WEIGHTS = MatchingWeights()
