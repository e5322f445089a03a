"""
Skill Mapper Service
Confronta skill free-text tra talent e job in modo tollerante.

Strategia a 3 livelli:
1. Match esatto sul nome normalizzato (lowercase, solo [a-z0-9])
2. Match per sinonimi (tabella fissa + eventuali sinonimi custom da CSV)
3. Match per sottostringa ("react" vs "reactjs")

Il matching è volutamente permissivo: meglio qualche falso positivo
che penalizzare un candidato per differenze di formattazione.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple, Union

import pandas as pd

from src.services.logging_utils import print_with_prefix


SKILL_SYNONYMS: Dict[str, List[str]] = {
    "javascript": ["js", "ecmascript", "es6", "es2015+", "vanilla js"],
    "typescript": ["ts"],
    "python": ["py", "python3"],
    "react": ["reactjs", "react.js"],
    "nodejs": ["node", "node.js"],
    "nextjs": ["next", "next.js"],
    "postgresql": ["postgres", "psql", "pg"],
    "mongodb": ["mongo"],
    "docker": ["containerization", "containers"],
    "kubernetes": ["k8s"],
    "aws": ["amazon web services", "amazon aws"],
    "gcp": ["google cloud", "google cloud platform"],
    "azure": ["microsoft azure"],
    "machinelearning": ["ml", "machine-learning"],
    "deeplearning": ["dl", "deep-learning"],
    "artificialintelligence": ["ai", "artificial-intelligence"],
    "datascience": ["data-science", "ds"],
    "java": ["java8", "java11", "java17"],
    "csharp": ["c#", ".net", "dotnet"],
    "cpp": ["c++", "cplusplus"],
    "golang": ["go"],
    "rust": ["rustlang"],
    "sql": ["mysql", "mssql", "sqlite"],
    "graphql": ["gql"],
    "rest": ["restful", "rest api", "restful api"],
    "html": ["html5"],
    "css": ["css3", "scss", "sass", "less"],
    "git": ["github", "gitlab", "version control"],
    "agile": ["scrum", "kanban", "sprint"],
    "leadership": ["team lead", "tech lead", "engineering manager"],
    "communication": ["presentation", "public speaking"],
    "problemsolving": ["analytical", "critical thinking"],
}

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_skill(skill: Optional[str]) -> str:
    """Lowercase + rimozione di tutto ciò che non è alfanumerico."""
    if not skill:
        return ""
    return _NON_ALNUM.sub("", str(skill).lower())


def load_custom_synonyms(csv_path: Union[str, Path]) -> Dict[str, List[str]]:
    """
    Carica sinonimi custom da CSV.

    Formato atteso (stesso schema del dizionario skill custom):
        name,aliases
        terraform,"tf, hcl"

    Args:
        csv_path: Percorso al CSV

    Returns:
        Dizionario nome canonico -> lista alias
    """
    df = pd.read_csv(csv_path)
    if "name" not in df.columns:
        raise ValueError(f"{csv_path}: missing 'name' column")

    synonyms: Dict[str, List[str]] = {}
    for _, row in df.iterrows():
        name = row["name"]
        if pd.isna(name) or not str(name).strip():
            continue

        aliases: List[str] = []
        if "aliases" in df.columns and pd.notna(row["aliases"]) and row["aliases"]:
            aliases = [a.strip() for a in str(row["aliases"]).split(",") if a.strip()]

        # Più righe con lo stesso nome vengono unite
        synonyms.setdefault(str(name).strip(), []).extend(aliases)

    return synonyms


class SkillMapper:
    """
    Confronta coppie di skill usando la tabella sinonimi.

    Il lookup variante -> gruppi viene pre-calcolato una volta sola,
    dopo la costruzione l'istanza è di sola lettura.
    """

    def __init__(
        self,
        synonyms: Optional[Dict[str, List[str]]] = None,
        custom_csv_path: Optional[Union[str, Path]] = None,
        verbose: bool = False
    ):
        """
        Args:
            synonyms: Tabella sinonimi di base (default: SKILL_SYNONYMS)
            custom_csv_path: CSV opzionale con sinonimi aggiuntivi
            verbose: Se True, stampa log
        """
        self.verbose = verbose

        table = dict(SKILL_SYNONYMS if synonyms is None else synonyms)
        if custom_csv_path:
            self._log(f"Caricamento sinonimi custom da: {custom_csv_path}")
            custom = load_custom_synonyms(custom_csv_path)
            for name, aliases in custom.items():
                key = normalize_skill(name)
                table[key] = list(table.get(key, [])) + aliases
            self._log(f"   -> {len(custom)} gruppi custom")

        # Variante normalizzata -> indici dei gruppi che la contengono
        self._groups: List[Set[str]] = []
        self._variant_lookup: Dict[str, Set[int]] = {}
        for key, aliases in table.items():
            variants = {normalize_skill(key)} | {normalize_skill(a) for a in aliases}
            variants.discard("")
            group_idx = len(self._groups)
            self._groups.append(variants)
            for variant in variants:
                self._variant_lookup.setdefault(variant, set()).add(group_idx)

        self._log(f"SkillMapper pronto ({len(self._groups)} gruppi, {len(self._variant_lookup)} varianti)")

    @property
    def group_count(self) -> int:
        return len(self._groups)

    def match_type(self, skill_a: Optional[str], skill_b: Optional[str]) -> Optional[str]:
        """
        Tipo di match tra due skill.

        Returns:
            "exact", "synonym", "substring" oppure None se non matchano
        """
        norm_a = normalize_skill(skill_a)
        norm_b = normalize_skill(skill_b)

        # Match 1: nome normalizzato identico
        if norm_a == norm_b:
            return "exact"

        # Match 2: stesso gruppo di sinonimi
        groups_a = self._variant_lookup.get(norm_a)
        if groups_a and groups_a & self._variant_lookup.get(norm_b, set()):
            return "synonym"

        # Match 3: una contiene l'altra
        if norm_b in norm_a or norm_a in norm_b:
            return "substring"

        return None

    def match(self, skill_a: Optional[str], skill_b: Optional[str]) -> bool:
        return self.match_type(skill_a, skill_b) is not None

    def find_match(
        self,
        job_skill: str,
        talent_skills: List[str]
    ) -> Tuple[Optional[str], Optional[str]]:
        """
        Cerca la prima skill del talent che soddisfa una skill del job.

        Returns:
            Tupla (skill_talent, match_type) oppure (None, None)
        """
        for talent_skill in talent_skills:
            kind = self.match_type(talent_skill, job_skill)
            if kind:
                return talent_skill, kind
        return None, None

    def _log(self, message: str) -> None:
        print_with_prefix("[SkillMapper]", message, enabled=self.verbose)


DEFAULT_SKILL_MAPPER = SkillMapper()


def skills_match(skill_a: Optional[str], skill_b: Optional[str]) -> bool:
    """True se le due skill sono equivalenti (esatto, sinonimo o sottostringa)."""
    return DEFAULT_SKILL_MAPPER.match(skill_a, skill_b)
