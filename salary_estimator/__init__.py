from salary_estimator.estimator import (
    estimate_salary,
    explain_estimate,
    get_company_tier,
    has_company_data,
)
from salary_estimator.formatting import format_annual_salary, format_salary_range, generate_glassdoor_url
from salary_estimator.models import JobDescriptor, SalaryEstimate
from salary_estimator.service import SalaryService

__all__ = [
    "JobDescriptor",
    "SalaryEstimate",
    "SalaryService",
    "estimate_salary",
    "explain_estimate",
    "format_annual_salary",
    "format_salary_range",
    "generate_glassdoor_url",
    "get_company_tier",
    "has_company_data",
]
