# salary_estimator/api.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from salary_estimator.models import RemoteSalary, SalaryReport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class SalaryLookup(ABC):
    """
    Remote salary lookup. Returns None when the service has no data.
    Transport and payload problems are raised, not swallowed; the caller
    decides what a failure means.
    """

    @abstractmethod
    def get_salary_estimate(
        self,
        company: str,
        title: str,
        level: Optional[str],
        job_category: Optional[str],
        size: Optional[str],
    ) -> Optional[RemoteSalary]:
        raise NotImplementedError


class NullLookup(SalaryLookup):
    """
    A lookup that never has data.
    Used offline and when the API is disabled in config.
    """
    def get_salary_estimate(self, company, title, level, job_category, size) -> Optional[RemoteSalary]:
        return None


@dataclass(frozen=True)
class SubmitResult:
    success: bool
    error: Optional[str] = None


class SalaryApiClient(SalaryLookup):
    """
    Client for the job board backend's salary endpoints:
      GET  {base_url}/api/salaries/estimate?company=&title=&level=&category=&size=
      POST {base_url}/api/salaries
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_salary_estimate(
        self,
        company: str,
        title: str,
        level: Optional[str],
        job_category: Optional[str],
        size: Optional[str],
    ) -> Optional[RemoteSalary]:
        url = f"{self.base_url}/api/salaries/estimate"
        params = {
            "company": company or "",
            "title": title or "",
            "level": level or "",
            "category": job_category or "",
            "size": size or "",
        }

        response = self.session.get(url, params=params, timeout=self.timeout)
        if response.status_code == 404:
            logger.debug("no salary data for %s / %s", company, title)
            return None
        response.raise_for_status()

        data = response.json() if response.content else None
        if not data:
            return None
        return RemoteSalary.model_validate(data)

    def submit_salary_report(self, report: SalaryReport) -> SubmitResult:
        url = f"{self.base_url}/api/salaries"
        payload: Dict[str, Any] = report.model_dump(exclude_none=True)

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("salary report submission failed: %s", e)
            return SubmitResult(success=False, error=str(e))

        if response.ok:
            logger.info("submitted salary report for %s / %s", report.company_name, report.job_title)
            return SubmitResult(success=True)

        message = _error_message(response)
        logger.warning("salary report rejected (%s): %s", response.status_code, message)
        return SubmitResult(success=False, error=message)


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"
