# salary_estimator/formatting.py
from urllib.parse import quote

from salary_estimator.models import JobDescriptor, SalaryEstimate
from salary_estimator.utils import round_half_up

GLASSDOOR_SEARCH_URL = "https://www.glassdoor.com/Search/results.htm"
GLASSDOOR_ISRAEL_LOC_ID = 120


def _short(num: int, millions: bool = False) -> str:
    if millions and num >= 1_000_000:
        # one decimal, halves rounded up
        return f"{round_half_up(num / 100_000) / 10}M"
    if num >= 1000:
        return f"{round_half_up(num / 1000)}K"
    return f"{num:,}"


def format_salary_range(estimate: SalaryEstimate) -> str:
    """₪46K - ₪89K/mo"""
    c = estimate.currency
    return f"{c}{_short(estimate.min_monthly)} - {c}{_short(estimate.max_monthly)}/mo"


def format_annual_salary(estimate: SalaryEstimate) -> str:
    """₪552K - ₪1.1M/yr"""
    c = estimate.currency
    lo = _short(estimate.min_annual, millions=True)
    hi = _short(estimate.max_annual, millions=True)
    return f"{c}{lo} - {c}{hi}/yr"


def generate_glassdoor_url(job: JobDescriptor) -> str:
    query = quote(f"{job.title} {job.company}", safe="!*'()")
    return f"{GLASSDOOR_SEARCH_URL}?keyword={query}&locT=N&locId={GLASSDOOR_ISRAEL_LOC_ID}"
