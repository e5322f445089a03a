import argparse
import csv
import json
import os
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import pandas as pd
from dotenv import load_dotenv

load_dotenv()

from src.agents import MatchingAgent, ProfileAgent
from src.models import JobMatchProfile, MatchResult, TalentMatchProfile
from src.orchestrator import RankingOrchestrator
from src.services import SkillMapper


FIELDNAMES = [
    "run_id",
    "timestamp_utc",
    "mode",
    "rank",
    "talent_id",
    "job_id",
    "overall_score",
    "category",
    "score_points",
    "criteria_points",
    "skills_points",
    "education_experience_points",
    "talent_o1_score",
    "job_min_score",
    "n_required_skills",
    "n_missing_required",
    "n_preferred_criteria",
    "n_missing_criteria",
    "missing_required_json",
    "breakdown_json",
    "summary",
    "elapsed_ms",
    "error",
]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _json_dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


def _load_records(path: Path, key: str) -> List[Dict[str, Any]]:
    """Legge una lista di record da JSON (lista nuda oppure {key: [...]})."""
    if not path.exists():
        raise SystemExit(f"File non trovato: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SystemExit(f"{path}: JSON non valido ({e})")
    if isinstance(data, dict):
        data = data.get(key, [])
    if not isinstance(data, list):
        raise SystemExit(f"{path}: atteso un array JSON di record")
    return data


def _build_profiles(
    records: List[Dict[str, Any]],
    builder: Callable[[Dict[str, Any]], Any],
    kind: str,
) -> Tuple[List[Any], List[Dict[str, Any]]]:
    """Costruisce i profili; i record non validi diventano righe di errore."""
    profiles: List[Any] = []
    errors: List[Dict[str, Any]] = []
    for idx, record in enumerate(records):
        try:
            profiles.append(builder(record))
        except Exception as e:
            record_id = record.get("id", f"#{idx}") if isinstance(record, dict) else f"#{idx}"
            errors.append({
                f"{kind}_id": str(record_id),
                "error": f"{type(e).__name__}: {e}",
            })
    return profiles, errors


def _match_row(
    run_id: str,
    mode: str,
    rank: Optional[int],
    talent: TalentMatchProfile,
    job: JobMatchProfile,
    match: MatchResult,
    elapsed_ms: int,
) -> Dict[str, Any]:
    breakdown = match.breakdown
    return {
        "run_id": run_id,
        "timestamp_utc": _utc_now_iso(),
        "mode": mode,
        "rank": "" if rank is None else rank,
        "talent_id": talent.id,
        "job_id": job.id,
        "overall_score": match.overall_score,
        "category": match.category,
        "score_points": match.score_points,
        "criteria_points": match.criteria_points,
        "skills_points": match.skills_points,
        "education_experience_points": match.education_experience_points,
        "talent_o1_score": talent.o1_score,
        "job_min_score": job.min_score or 0,
        "n_required_skills": len(job.required_skills),
        "n_missing_required": len(match.missing_required_skills),
        "n_preferred_criteria": len(job.preferred_criteria),
        "n_missing_criteria": len(match.missing_preferred_criteria),
        "missing_required_json": _json_dumps(match.missing_required_skills),
        "breakdown_json": _json_dumps(breakdown.model_dump(mode="json")),
        "summary": match.summary,
        "elapsed_ms": elapsed_ms,
        "error": "",
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Calcola il match tra talent e job letti da JSON e salva un CSV "
            "con score, breakdown e statistiche riassuntive."
        )
    )
    parser.add_argument("--talents", required=True, help="JSON con i record talent.")
    parser.add_argument("--jobs", required=True, help="JSON con i record job.")
    parser.add_argument("--mode", choices=["jobs", "talents", "matrix"], default="jobs",
                        help="jobs: migliori job per talent; talents: migliori talent per job; matrix: tutte le coppie.")
    parser.add_argument("--limit", type=int, default=int(os.getenv("O1MATCH_LIMIT", "10")),
                        help="Risultati per ranking (<= 0 = nessun limite).")
    parser.add_argument("--min-score-ratio", type=float, default=_env_float("O1MATCH_MIN_SCORE_RATIO"),
                        help="Pre-filtro talent: o1_score >= min_score * ratio (solo mode talents).")
    parser.add_argument("--custom-synonyms-csv", default=os.getenv("O1MATCH_CUSTOM_SYNONYMS_CSV") or None,
                        help="CSV opzionale (name,aliases) con sinonimi skill aggiuntivi.")
    parser.add_argument("--out", default="data/results/match_results.csv", help="Percorso output CSV.")
    parser.add_argument("--verbose", action="store_true", help="Abilita log verbose.")

    args = parser.parse_args(argv)

    talents_path = Path(args.talents).resolve()
    jobs_path = Path(args.jobs).resolve()
    out_path = Path(args.out).resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    limit = args.limit if args.limit > 0 else None

    profile_agent = ProfileAgent(verbose=args.verbose)
    talents, talent_errors = _build_profiles(
        _load_records(talents_path, "talents"), profile_agent.build_talent_profile, "talent"
    )
    jobs, job_errors = _build_profiles(
        _load_records(jobs_path, "jobs"), profile_agent.build_job_profile, "job"
    )

    skill_mapper = SkillMapper(custom_csv_path=args.custom_synonyms_csv, verbose=args.verbose)
    matching_agent = MatchingAgent(skill_mapper=skill_mapper, verbose=args.verbose)
    orchestrator = RankingOrchestrator(matching_agent=matching_agent, verbose=args.verbose)

    run_id = f"{args.mode}__{int(time.time())}"
    rows: List[Dict[str, Any]] = []

    for err in talent_errors + job_errors:
        rows.append({**{k: "" for k in FIELDNAMES}, "run_id": run_id, "timestamp_utc": _utc_now_iso(),
                     "mode": args.mode, **err})

    # ═══════════════════════════════════════════════════════════════
    # Matching
    # ═══════════════════════════════════════════════════════════════
    if args.mode == "jobs":
        for talent in talents:
            started = time.perf_counter()
            ranked = orchestrator.rank_jobs(talent, jobs, limit)
            elapsed = int((time.perf_counter() - started) * 1000)
            for rank, item in enumerate(ranked, start=1):
                rows.append(_match_row(run_id, args.mode, rank, talent, item.job, item.match, elapsed))

    elif args.mode == "talents":
        for job in jobs:
            started = time.perf_counter()
            ranked = orchestrator.rank_talents(job, talents, limit, min_score_ratio=args.min_score_ratio)
            elapsed = int((time.perf_counter() - started) * 1000)
            for rank, item in enumerate(ranked, start=1):
                rows.append(_match_row(run_id, args.mode, rank, item.talent, job, item.match, elapsed))

    else:
        for job in jobs:
            for talent in talents:
                started = time.perf_counter()
                match = matching_agent.match(talent, job)
                elapsed = int((time.perf_counter() - started) * 1000)
                rows.append(_match_row(run_id, args.mode, None, talent, job, match, elapsed))

    with out_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)

    print(f"  {len(talents)} talent, {len(jobs)} job, {len(rows)} righe "
          f"({len(talent_errors) + len(job_errors)} record scartati)")

    stats_path = out_path.parent / f"{out_path.stem}_stats.csv"
    _generate_match_stats(out_path, stats_path, args)

    return 0


# ═══════════════════════════════════════════════════════════════════════
# STATS GENERATION
# ═══════════════════════════════════════════════════════════════════════

def _generate_match_stats(csv_path: Path, stats_path: Path, args: argparse.Namespace) -> None:
    """Genera un CSV (section, metric, value) con statistiche del run."""
    df = pd.read_csv(csv_path, dtype={"talent_id": str, "job_id": str})
    if df.empty:
        print("\nNessun risultato nel CSV.")
        return

    ok = df[df["error"].isna()]
    stats: List[Dict[str, str]] = []

    def _add(section: str, metric: str, value: Any) -> None:
        stats.append({"section": section, "metric": metric, "value": str(value)})

    # — Overview —
    _add("overview", "total_rows", len(df))
    _add("overview", "ok_rows", len(ok))
    _add("overview", "error_rows", len(df) - len(ok))

    scores = ok["overall_score"].astype(float)
    if not scores.empty:
        _add("score", "mean", f"{scores.mean():.2f}")
        _add("score", "median", f"{scores.median():.2f}")
        std_dev = scores.std() if len(scores) > 1 else 0.0
        _add("score", "std_dev", f"{std_dev:.2f}")
        _add("score", "min", f"{scores.min():.2f}")
        _add("score", "max", f"{scores.max():.2f}")

        # — Categorie —
        counts = ok["category"].value_counts()
        for category in ("excellent", "good", "fair", "poor"):
            _add("category_distribution", category, int(counts.get(category, 0)))

        # — Componenti —
        for column in ("score_points", "criteria_points", "skills_points", "education_experience_points"):
            _add("components", f"{column}_mean", f"{ok[column].astype(float).mean():.2f}")

        # — Per job / per talent —
        for job_id, group in ok.groupby("job_id"):
            _add("per_job", f"{job_id}|mean", f"{group['overall_score'].mean():.2f}")
            _add("per_job", f"{job_id}|count", len(group))
        for talent_id, group in ok.groupby("talent_id"):
            _add("per_talent", f"{talent_id}|mean", f"{group['overall_score'].mean():.2f}")

    # — Config —
    _add("config", "mode", args.mode)
    _add("config", "limit", args.limit)
    _add("config", "min_score_ratio", "" if args.min_score_ratio is None else args.min_score_ratio)
    _add("config", "custom_synonyms_csv", args.custom_synonyms_csv or "")

    pd.DataFrame(stats, columns=["section", "metric", "value"]).to_csv(stats_path, index=False)

    print("\n" + "=" * 70)
    print("  SUMMARY – Batch Match Results")
    print("=" * 70)
    print(f"  Righe: {len(df)} totali ({len(ok)} OK, {len(df) - len(ok)} errori)")
    if not scores.empty:
        print(f"  Score: media={scores.mean():.1f}  mediana={scores.median():.1f}  "
              f"min={scores.min():.0f}  max={scores.max():.0f}")
        print(f"  Categorie: {ok['category'].value_counts().to_dict()}")
    print(f"  Output CSV: {csv_path}")
    print(f"  Stats CSV:  {stats_path}")
    print("=" * 70)


if __name__ == "__main__":
    raise SystemExit(main())
