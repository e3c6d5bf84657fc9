# salary_estimator/estimator.py
"""
Local salary heuristic.

estimate_salary() is pure and total: unknown or missing fields fall back
to the Engineer range and neutral 1.0 multipliers instead of raising.
"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from salary_estimator.models import Confidence, JobDescriptor, SalaryEstimate
from salary_estimator.tables import (
    CATEGORY_MULTIPLIERS,
    COMPANY_MULTIPLIERS,
    COMPANY_TIERS,
    DEFAULT_CURRENCY,
    DEFAULT_LEVEL,
    LEVEL_SALARY_RANGES,
    SIZE_MULTIPLIERS,
    TITLE_RULES,
)
from salary_estimator.utils import normalize_key, round_to_thousand


@dataclass
class EstimateBreakdown:
    level: str
    category_mult: float
    title_mult: float
    title_rule: Optional[str]
    size_mult: float
    company_mult: float
    company_match: Optional[str]
    total_mult: float
    confidence_rules: List[str] = field(default_factory=list)
    estimate: Optional[SalaryEstimate] = None


# --------------------------
# Title
# --------------------------

def match_title_rule(title: str) -> Tuple[Optional[str], float]:
    """Returns (matched keyword, multiplier) for the first rule that hits."""
    title_n = normalize_key(title)
    for keywords, mult in TITLE_RULES:
        for kw in keywords:
            if kw in title_n:
                return kw, mult
    return None, 1.0


def title_multiplier(title: str) -> float:
    return match_title_rule(title)[1]


# --------------------------
# Company
# --------------------------

def resolve_company(company_name: str) -> Tuple[Optional[str], float]:
    """
    Exact match first, then the first table entry (declaration order) where
    either name contains the other. Returns (table key, multiplier).
    """
    company_n = normalize_key(company_name)
    if not company_n:
        return None, 1.0

    if company_n in COMPANY_MULTIPLIERS:
        return company_n, COMPANY_MULTIPLIERS[company_n]

    for known, mult in COMPANY_MULTIPLIERS.items():
        if known in company_n or company_n in known:
            return known, mult

    return None, 1.0


def company_multiplier(company_name: str) -> float:
    return resolve_company(company_name)[1]


def has_company_data(company_name: str) -> bool:
    return company_multiplier(company_name) != 1.0


def get_company_tier(company_name: str) -> str:
    mult = company_multiplier(company_name)
    for threshold, tier in COMPANY_TIERS:
        if mult >= threshold:
            return tier
    return "below"


# --------------------------
# Confidence
# --------------------------

ConfidenceCondition = Callable[[JobDescriptor, float, Confidence], bool]

# Evaluated in order against a running grade that starts at "medium".
CONFIDENCE_RULES: List[Tuple[str, ConfidenceCondition, Confidence]] = [
    (
        "complete_fields",
        lambda job, company_mult, grade: bool(job.level and job.job_category and job.size),
        "high",
    ),
    (
        "missing_level_and_category",
        lambda job, company_mult, grade: not job.level and not job.job_category,
        "low",
    ),
    (
        "known_company",
        lambda job, company_mult, grade: grade == "medium" and company_mult != 1.0,
        "high",
    ),
]


def grade_confidence(job: JobDescriptor, company_mult: float) -> Tuple[Confidence, List[str]]:
    grade: Confidence = "medium"
    fired: List[str] = []
    for name, condition, result in CONFIDENCE_RULES:
        if condition(job, company_mult, grade):
            grade = result
            fired.append(name)
    return grade, fired


# --------------------------
# Estimate
# --------------------------

def explain_estimate(job: JobDescriptor, currency: str = DEFAULT_CURRENCY) -> EstimateBreakdown:
    level = job.level if job.level in LEVEL_SALARY_RANGES else DEFAULT_LEVEL
    base = LEVEL_SALARY_RANGES[level]

    category_mult = CATEGORY_MULTIPLIERS.get(job.job_category or "") or 1.0
    title_rule, title_mult = match_title_rule(job.title)
    size_mult = SIZE_MULTIPLIERS.get(job.size or "") or 1.0
    company_match, company_mult = resolve_company(job.company)

    total_mult = category_mult * title_mult * size_mult * company_mult

    min_monthly = round_to_thousand(base.min * total_mult)
    max_monthly = round_to_thousand(base.max * total_mult)

    confidence, fired = grade_confidence(job, company_mult)

    estimate = SalaryEstimate(
        min_monthly=min_monthly,
        max_monthly=max_monthly,
        min_annual=min_monthly * 12,
        max_annual=max_monthly * 12,
        currency=currency,
        confidence=confidence,
    )

    return EstimateBreakdown(
        level=level,
        category_mult=category_mult,
        title_mult=title_mult,
        title_rule=title_rule,
        size_mult=size_mult,
        company_mult=company_mult,
        company_match=company_match,
        total_mult=round(total_mult, 4),
        confidence_rules=fired,
        estimate=estimate,
    )


def estimate_salary(job: JobDescriptor, currency: str = DEFAULT_CURRENCY) -> SalaryEstimate:
    return explain_estimate(job, currency).estimate
