from enum import Enum
from typing import Dict, Union


class O1Criterion(str, Enum):
    """Gli 8 criteri di evidenza per il visto O-1."""
    AWARDS = "awards"
    MEMBERSHIPS = "memberships"
    PUBLISHED_MATERIAL = "published_material"
    JUDGING = "judging"
    ORIGINAL_CONTRIBUTIONS = "original_contributions"
    SCHOLARLY_ARTICLES = "scholarly_articles"
    CRITICAL_ROLE = "critical_role"
    HIGH_SALARY = "high_salary"


# Nome visualizzato + descrizione per ogni criterio
O1_CRITERIA: Dict[O1Criterion, Dict[str, str]] = {
    O1Criterion.AWARDS: {
        "name": "Awards",
        "description": "Nationally or internationally recognized prizes or awards for excellence",
    },
    O1Criterion.MEMBERSHIPS: {
        "name": "Memberships",
        "description": "Membership in associations requiring outstanding achievements",
    },
    O1Criterion.PUBLISHED_MATERIAL: {
        "name": "Published Material",
        "description": "Published material about you in professional/major media",
    },
    O1Criterion.JUDGING: {
        "name": "Judging",
        "description": "Participation as a judge of others' work in the field",
    },
    O1Criterion.ORIGINAL_CONTRIBUTIONS: {
        "name": "Original Contributions",
        "description": "Original contributions of major significance in the field",
    },
    O1Criterion.SCHOLARLY_ARTICLES: {
        "name": "Scholarly Articles",
        "description": "Authorship of scholarly articles in professional journals",
    },
    O1Criterion.CRITICAL_ROLE: {
        "name": "Critical Role",
        "description": "Employment in a critical or essential capacity for distinguished organizations",
    },
    O1Criterion.HIGH_SALARY: {
        "name": "High Salary",
        "description": "High salary or remuneration compared to others in the field",
    },
}


def criterion_label(criterion: Union[O1Criterion, str]) -> str:
    """Nome leggibile di un criterio (fallback: il valore grezzo)."""
    try:
        return O1_CRITERIA[O1Criterion(criterion)]["name"]
    except ValueError:
        return str(criterion)
