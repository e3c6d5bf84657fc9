# salary_estimator/main.py
from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from salary_estimator.api import NullLookup, SalaryApiClient, SalaryLookup
from salary_estimator.cache import EstimateCache
from salary_estimator.config import Config, load_config
from salary_estimator.estimator import explain_estimate, get_company_tier
from salary_estimator.formatting import format_annual_salary, format_salary_range, generate_glassdoor_url
from salary_estimator.log import setup_logging
from salary_estimator.models import JobDescriptor
from salary_estimator.service import SOURCE_HEURISTIC, SalaryService
from salary_estimator.utils import safe_str

REPO_ROOT = Path(__file__).resolve().parents[1]

log = logging.getLogger(__name__)

JOB_FIELDS = ["title", "company", "category", "city", "url", "level", "size", "updated", "job_category"]


def load_jobs(path: Path) -> List[JobDescriptor]:
    if not path.exists():
        raise FileNotFoundError(f"Jobs file not found: {path}")

    jobs: List[JobDescriptor] = []
    with path.open("r", newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            fields = {k: safe_str(row.get(k)) for k in JOB_FIELDS}
            # blank optional columns mean "unknown"
            for k in ("level", "size", "job_category"):
                fields[k] = fields[k] or None
            jobs.append(JobDescriptor(**fields))
    return jobs


def build_service(cfg: Config) -> SalaryService:
    lookup: SalaryLookup
    if cfg.api.enabled:
        lookup = SalaryApiClient(cfg.api.base_url, timeout=cfg.api.timeout_seconds)
    else:
        lookup = NullLookup()
    cache = EstimateCache(ttl_seconds=cfg.cache.ttl_seconds)
    return SalaryService(lookup=lookup, cache=cache, currency=cfg.output.currency)


def estimate_jobs(service: SalaryService, jobs: List[JobDescriptor], explain: bool = False) -> List[Dict[str, Any]]:
    results: List[Dict[str, Any]] = []
    for job in jobs:
        resolved = service.estimate(job)
        est = resolved.estimate
        row: Dict[str, Any] = {
            "title": job.title,
            "company": job.company,
            "level": job.level or "",
            "size": job.size or "",
            "job_category": job.job_category or "",
            "min_monthly": est.min_monthly,
            "max_monthly": est.max_monthly,
            "min_annual": est.min_annual,
            "max_annual": est.max_annual,
            "currency": est.currency,
            "confidence": est.confidence,
            "source": resolved.source,
            "crowd_data": service.has_api_salary_data(job),
            "monthly": format_salary_range(est),
            "annual": format_annual_salary(est),
            "company_tier": get_company_tier(job.company),
            "glassdoor_url": generate_glassdoor_url(job),
            "url": job.url,
        }
        if explain and resolved.source == SOURCE_HEURISTIC:
            b = explain_estimate(job, service.currency)
            row["explain"] = {
                "level": b.level,
                "category_mult": b.category_mult,
                "title_mult": b.title_mult,
                "title_rule": b.title_rule,
                "size_mult": b.size_mult,
                "company_mult": b.company_mult,
                "company_match": b.company_match,
                "total_mult": b.total_mult,
                "confidence_rules": b.confidence_rules,
            }
        results.append(row)
    return results


def _write_results(results: List[Dict[str, Any]], out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    out_json = out_dir / "estimates.json"
    out_csv = out_dir / "estimates.csv"

    out_json.write_text(json.dumps(results, indent=2, ensure_ascii=False), encoding="utf-8")

    fieldnames = [
        "company",
        "title",
        "level",
        "size",
        "job_category",
        "min_monthly",
        "max_monthly",
        "min_annual",
        "max_annual",
        "currency",
        "confidence",
        "source",
        "crowd_data",
        "monthly",
        "annual",
        "company_tier",
        "glassdoor_url",
        "url",
    ]

    with out_csv.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in results:
            writer.writerow({k: r.get(k, "") for k in fieldnames})

    print(f"Wrote {len(results)} estimates → {out_json}")
    print(f"Wrote CSV → {out_csv}")


def run(config_path: str = "config/config.yaml", out_dir: Path | None = None) -> List[Dict[str, Any]]:
    config_file = (REPO_ROOT / config_path).resolve()
    log.debug("Using config file: %s", config_file)

    cfg = load_config(str(config_file))

    jobs_path = (REPO_ROOT / cfg.jobs.path).resolve()
    log.debug("Using jobs file: %s", jobs_path)
    jobs = load_jobs(jobs_path)
    if not jobs:
        log.warning("No jobs found in %s", jobs_path)
        return []

    service = build_service(cfg)
    log.info("Estimating %d jobs (api=%s)", len(jobs), "on" if cfg.api.enabled else "off")

    results = estimate_jobs(service, jobs, explain=cfg.output.explain)

    _write_results(results, out_dir or (REPO_ROOT / "data" / "results"))
    return results


if __name__ == "__main__":
    setup_logging()
    run()
