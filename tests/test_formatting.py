from salary_estimator.estimator import estimate_salary
from salary_estimator.formatting import format_annual_salary, format_salary_range, generate_glassdoor_url
from salary_estimator.models import JobDescriptor, SalaryEstimate


def _estimate(lo: int, hi: int) -> SalaryEstimate:
    return SalaryEstimate(
        min_monthly=lo,
        max_monthly=hi,
        min_annual=lo * 12,
        max_annual=hi * 12,
        currency="₪",
        confidence="medium",
    )


def test_format_google_estimate():
    job = JobDescriptor(
        title="Senior Software Engineer",
        company="Google",
        level="Engineer",
        size="l",
        job_category="software",
    )
    est = estimate_salary(job)
    assert format_salary_range(est) == "₪46K - ₪89K/mo"
    assert format_annual_salary(est) == "₪552K - ₪1.1M/yr"


def test_format_small_and_half_values():
    assert format_salary_range(_estimate(500, 1500)) == "₪500 - ₪2K/mo"
    assert format_annual_salary(_estimate(50, 80)) == "₪600 - ₪960/yr"


def test_glassdoor_url():
    job = JobDescriptor(title="Data Engineer", company="Wix R&D")
    assert generate_glassdoor_url(job) == (
        "https://www.glassdoor.com/Search/results.htm"
        "?keyword=Data%20Engineer%20Wix%20R%26D&locT=N&locId=120"
    )


def test_millions_round_half_up():
    # 187,500/mo → 2,250,000/yr
    est = _estimate(187500, 187500)
    assert format_annual_salary(est) == "₪2.3M - ₪2.3M/yr"
    assert format_annual_salary(_estimate(166667, 250000)) == "₪2.0M - ₪3.0M/yr"
