from typing import Dict

from src.models.match_result import MatchCategory

# Soglie score -> categoria di match
MATCH_THRESHOLDS: Dict[str, int] = {
    "excellent": 85,
    "good": 70,
    "fair": 50,
    "poor": 0,
}


def get_match_category(score: float) -> MatchCategory:
    if score >= MATCH_THRESHOLDS["excellent"]:
        return "excellent"
    if score >= MATCH_THRESHOLDS["good"]:
        return "good"
    if score >= MATCH_THRESHOLDS["fair"]:
        return "fair"
    return "poor"
