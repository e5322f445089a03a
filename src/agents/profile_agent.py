"""
Profile Agent
Agente che trasforma record grezzi (righe del DB, JSON) nei profili di matching.

Responsabilità:
- Restringe record con molti campi opzionali ai soli campi di matching
- Applica i default (o1_score mancante = 0, liste mancanti = [])
- Normalizza i criteri O-1 e scarta quelli sconosciuti
- Scarta skill vuote e coerce dei campi numerici

Lo scoring engine non dipende mai dalla forma completa del record.
"""

import math
from typing import Any, List, Mapping, Optional

from src.agents.matching_agent import _round_half_up
from src.services.logging_utils import print_with_prefix
from src.models.criteria import O1Criterion
from src.models.talent import TalentMatchProfile
from src.models.job import JobMatchProfile


class RecordMappingError(Exception):
    """Eccezione per record che non possono diventare un profilo di matching."""
    pass


class ProfileAgent:
    """
    Agente che costruisce TalentMatchProfile / JobMatchProfile da record grezzi.

    Tollerante sui campi opzionali, rigido solo su forma del record e id.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def build_talent_profile(self, record: Mapping[str, Any]) -> TalentMatchProfile:
        """
        Costruisce il profilo di matching di un talent.

        Args:
            record: Riga talent_profiles (dict), campi extra ignorati

        Returns:
            TalentMatchProfile validato
        """
        record_id = self._require_id(record, "talent")

        profile = TalentMatchProfile(
            id=record_id,
            o1_score=self._parse_score(record.get("o1_score")),
            criteria_met=self._parse_criteria(record.get("criteria_met"), record_id),
            skills=self._parse_labels(record.get("skills")),
            education_level=self._parse_text(record.get("education_level")),
            years_experience=self._parse_years(record.get("years_experience")),
        )
        self._log(
            f"Talent {record_id}: score={profile.o1_score}, "
            f"criteri={len(profile.criteria_met)}, skill={len(profile.skills)}"
        )
        return profile

    def build_job_profile(self, record: Mapping[str, Any]) -> JobMatchProfile:
        """
        Costruisce il profilo di matching di una job listing.

        Args:
            record: Riga job_listings (dict), campi extra ignorati

        Returns:
            JobMatchProfile validato
        """
        record_id = self._require_id(record, "job")

        profile = JobMatchProfile(
            id=record_id,
            min_score=self._parse_score(record.get("min_score")),
            preferred_criteria=self._parse_criteria(record.get("preferred_criteria"), record_id),
            required_skills=self._parse_labels(record.get("required_skills")),
            preferred_skills=self._parse_labels(record.get("preferred_skills")),
            required_education=self._parse_text(record.get("required_education")),
            min_experience=self._parse_years(record.get("min_experience")),
        )
        self._log(
            f"Job {record_id}: min_score={profile.min_score}, "
            f"required={len(profile.required_skills)}, preferred={len(profile.preferred_skills)}"
        )
        return profile

    def _require_id(self, record: Any, kind: str) -> str:
        if not isinstance(record, Mapping):
            raise RecordMappingError(f"{kind} record must be a mapping, got {type(record).__name__}")
        record_id = record.get("id")
        if record_id is None or str(record_id).strip() == "":
            raise RecordMappingError(f"{kind} record has no id")
        return str(record_id)

    def _parse_score(self, value: Any) -> int:
        """Score 0-100 (mancante o non numerico = 0)."""
        number = self._to_number(value)
        if number is None:
            return 0
        return int(max(0, min(100, _round_half_up(number))))

    def _parse_years(self, value: Any) -> Optional[float]:
        number = self._to_number(value)
        if number is None or number < 0:
            return None
        return number

    def _parse_text(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    def _parse_labels(self, value: Any) -> List[str]:
        """Lista di etichette free-text, senza vuoti."""
        if value is None:
            return []
        if not isinstance(value, (list, tuple, set)):
            value = [value]
        labels = []
        for item in value:
            if item is None:
                continue
            label = str(item).strip()
            if label:
                labels.append(label)
        return labels

    def _parse_criteria(self, value: Any, record_id: str) -> List[O1Criterion]:
        criteria = []
        for label in self._parse_labels(value):
            key = label.lower().replace("-", "_").replace(" ", "_")
            try:
                criteria.append(O1Criterion(key))
            except ValueError:
                self._log(f"   Record {record_id}: criterio sconosciuto scartato '{label}'")
        return criteria

    def _to_number(self, value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        if math.isnan(number) or math.isinf(number):
            return None
        return number

    def _log(self, message: str) -> None:
        print_with_prefix("[ProfileAgent]", message, enabled=self.verbose)


def talent_profile_from_record(record: Mapping[str, Any]) -> TalentMatchProfile:
    return ProfileAgent().build_talent_profile(record)


def job_profile_from_record(record: Mapping[str, Any]) -> JobMatchProfile:
    return ProfileAgent().build_job_profile(record)
