"""
Education Levels
Mappa titoli di studio free-text su una scala ordinale.

Euristica volutamente lossy: qualsiasi input produce un livello,
le stringhe non riconosciute valgono "high_school" (0).
"""

import re
from typing import Optional

# Gerarchia titoli (indice più alto = livello più alto)
EDUCATION_HIERARCHY = [
    "high_school",
    "associate",
    "bachelor",
    "master",
    "phd",
]

_NON_ALPHA = re.compile(r"[^a-z]")

# Ordine dei controlli: dal livello più alto al più basso
# ("mba" contiene "ba", quindi master va valutato prima di bachelor)
_LEVEL_MARKERS = [
    ("phd", ("phd", "doctorate")),
    ("master", ("master", "mba", "ms")),
    ("bachelor", ("bachelor", "bs", "ba")),
    ("associate", ("associate", "aa")),
]


def get_education_level(education: Optional[str]) -> int:
    """Rank 0-4 di un titolo di studio (0 = high_school / non riconosciuto)."""
    if not education:
        return 0

    normalized = _NON_ALPHA.sub("", str(education).lower())

    for level, markers in _LEVEL_MARKERS:
        if any(marker in normalized for marker in markers):
            return EDUCATION_HIERARCHY.index(level)

    return 0


def meets_education_requirement(
    talent_education: Optional[str],
    required_education: Optional[str]
) -> bool:
    """True se il titolo del talent è >= a quello richiesto (o se non c'è requisito)."""
    if not required_education:
        return True
    if not talent_education:
        return False

    return get_education_level(talent_education) >= get_education_level(required_education)
