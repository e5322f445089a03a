from pydantic import BaseModel, Field, field_validator
from src.models.criteria import O1Criterion
from typing import List, Optional


def _unique(values: List) -> List:
    # Deduplica mantenendo ordine
    return list(dict.fromkeys(values))


class TalentMatchProfile(BaseModel):
    """Snapshot delle qualifiche del talent usato solo per il matching."""
    id: str
    o1_score: int = Field(default=0, ge=0, le=100)   # Readiness O-1 (calcolato altrove)
    criteria_met: List[O1Criterion] = []
    skills: List[str] = []
    education_level: Optional[str] = None            # Testo libero (es. "bachelor's", "PhD")
    years_experience: Optional[float] = Field(default=None, ge=0)

    @field_validator("criteria_met", "skills")
    @classmethod
    def _dedupe(cls, values: List) -> List:
        return _unique(values)
