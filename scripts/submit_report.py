# scripts/submit_report.py
from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from salary_estimator.api import SalaryApiClient
from salary_estimator.config import load_config
from salary_estimator.log import setup_logging
from salary_estimator.main import REPO_ROOT
from salary_estimator.models import SalaryReport

log = logging.getLogger("submit_report")


def main() -> int:
    parser = argparse.ArgumentParser(description="Submit an anonymous salary report")
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--company", required=True)
    parser.add_argument("--title", required=True)
    parser.add_argument("--salary", type=int, required=True, help="monthly base salary (ILS)")
    parser.add_argument("--experience", type=int, default=None, help="years of experience")
    parser.add_argument("--location", default="Tel Aviv")
    parser.add_argument("--total-comp", type=int, default=None)
    args = parser.parse_args()
    setup_logging()

    cfg = load_config(str((REPO_ROOT / args.config).resolve()))

    try:
        report = SalaryReport(
            company_name=args.company,
            job_title=args.title,
            base_salary=args.salary,
            experience_years=args.experience,
            location=args.location,
            total_compensation=args.total_comp,
        )
    except ValidationError as e:
        log.error("Invalid report: %s", e)
        return 2

    client = SalaryApiClient(cfg.api.base_url, timeout=cfg.api.timeout_seconds)
    result = client.submit_salary_report(report)
    if not result.success:
        print(f"[ERROR] {result.error}")
        return 1

    print("Thanks! Your report will be reviewed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
