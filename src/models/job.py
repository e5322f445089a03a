from pydantic import BaseModel, Field, field_validator
from src.models.criteria import O1Criterion
from src.models.talent import _unique
from typing import List, Optional


class JobMatchProfile(BaseModel):
    """Sottoinsieme di una job listing rilevante per il matching."""
    id: str
    min_score: Optional[int] = Field(default=0, ge=0, le=100)  # 0 = nessun requisito
    preferred_criteria: List[O1Criterion] = []
    required_skills: List[str] = []
    preferred_skills: List[str] = []
    required_education: Optional[str] = None
    min_experience: Optional[float] = Field(default=None, ge=0)

    @field_validator("preferred_criteria", "required_skills", "preferred_skills")
    @classmethod
    def _dedupe(cls, values: List) -> List:
        return _unique(values)
