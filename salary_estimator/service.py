# salary_estimator/service.py
"""
API-backed estimates with a TTL cache and a heuristic fallback.

Failure policy: any exception from the remote lookup (network errors,
non-2xx responses, payloads that fail validation) is reported as
LookupResult.error and treated as "no data". "No data" answers from the
service are cached; failures are not, so the next call retries.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from salary_estimator.api import NullLookup, SalaryLookup
from salary_estimator.cache import EstimateCache
from salary_estimator.estimator import estimate_salary
from salary_estimator.models import JobDescriptor, RemoteSalary, SalaryEstimate
from salary_estimator.tables import DEFAULT_CURRENCY
from salary_estimator.utils import cache_key, round_half_up

logger = logging.getLogger(__name__)

SOURCE_API = "api"
SOURCE_HEURISTIC = "heuristic"


@dataclass(frozen=True)
class LookupResult:
    estimate: Optional[SalaryEstimate] = None
    error: Optional[Exception] = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ResolvedEstimate:
    estimate: SalaryEstimate
    source: str                       # SOURCE_API | SOURCE_HEURISTIC
    error: Optional[Exception] = None


class SalaryService:
    def __init__(
        self,
        lookup: Optional[SalaryLookup] = None,
        cache: Optional[EstimateCache] = None,
        currency: str = DEFAULT_CURRENCY,
    ):
        self.lookup_backend = lookup if lookup is not None else NullLookup()
        self.cache = cache if cache is not None else EstimateCache()
        self.currency = currency

    def _to_estimate(self, remote: Optional[RemoteSalary]) -> Optional[SalaryEstimate]:
        if remote is None or remote.min <= 0:
            return None
        min_monthly = round_half_up(remote.min)
        max_monthly = round_half_up(remote.max)
        return SalaryEstimate(
            min_monthly=min_monthly,
            max_monthly=max_monthly,
            min_annual=min_monthly * 12,
            max_annual=max_monthly * 12,
            currency=self.currency,
            confidence=remote.confidence,
        )

    def lookup(self, job: JobDescriptor) -> LookupResult:
        key = cache_key(job.company, job.title)

        entry = self.cache.get_fresh(key)
        if entry is not None:
            logger.debug("cache hit: %s", key)
            return LookupResult(estimate=self._to_estimate(entry.value), from_cache=True)

        logger.debug("cache miss: %s", key)
        try:
            remote = self.lookup_backend.get_salary_estimate(
                job.company,
                job.title,
                job.level,
                job.job_category,
                job.size,
            )
            estimate = self._to_estimate(remote)
        except Exception as e:
            return LookupResult(error=e)

        self.cache.put(key, remote)
        return LookupResult(estimate=estimate)

    def fetch_api_salary(self, job: JobDescriptor) -> Optional[SalaryEstimate]:
        result = self.lookup(job)
        if not result.ok:
            logger.warning("salary lookup failed for %s / %s: %s", job.company, job.title, result.error)
            return None
        return result.estimate

    def has_api_salary_data(self, job: JobDescriptor) -> bool:
        """Cache-only: True when crowd data (not a remote fallback) is cached for this job."""
        entry = self.cache.peek(cache_key(job.company, job.title))
        if entry is None or entry.value is None:
            return False
        return entry.value.min > 0 and entry.value.is_database

    def estimate(self, job: JobDescriptor) -> ResolvedEstimate:
        """API estimate when available; the local heuristic on no data or any lookup failure."""
        result = self.lookup(job)
        if not result.ok:
            logger.warning("salary lookup failed for %s / %s, using heuristic: %s", job.company, job.title, result.error)
        if result.estimate is not None:
            return ResolvedEstimate(estimate=result.estimate, source=SOURCE_API)
        return ResolvedEstimate(
            estimate=estimate_salary(job, self.currency),
            source=SOURCE_HEURISTIC,
            error=result.error,
        )
