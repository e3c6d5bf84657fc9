# salary_estimator/tables.py
"""
Static lookup tables for the Israeli tech market (monthly ILS).

Everything here is read-only. COMPANY_MULTIPLIERS is order-sensitive:
substring resolution returns the first entry that matches.
"""
from typing import Dict, List, Tuple

from salary_estimator.models import SalaryRange

DEFAULT_CURRENCY = "₪"
DEFAULT_LEVEL = "Engineer"

LEVEL_SALARY_RANGES: Dict[str, SalaryRange] = {
    "Intern": SalaryRange(5000, 10000),
    "Engineer": SalaryRange(18000, 35000),
    "Manager": SalaryRange(35000, 55000),
    "Executive": SalaryRange(50000, 90000),
}

CATEGORY_MULTIPLIERS: Dict[str, float] = {
    "software": 1.15,
    "frontend": 1.1,
    "data-science": 1.2,
    "devops": 1.15,
    "security": 1.2,
    "product": 1.1,
    "design": 0.95,
    "qa": 0.9,
    "hr": 0.85,
    "marketing": 0.9,
    "sales": 0.95,
    "finance": 1.0,
    "legal": 1.0,
    "support": 0.8,
    "admin": 0.75,
    "business": 1.0,
    "hardware": 1.1,
    "procurement-operations": 0.85,
    "project-management": 0.95,
}

JOB_CATEGORIES: List[str] = sorted(CATEGORY_MULTIPLIERS)

# Checked top to bottom, first hit wins ("Senior Director" is a director).
TITLE_RULES: List[Tuple[Tuple[str, ...], float]] = [
    (("head of", "vp"), 1.8),
    (("director",), 1.6),
    (("staff", "principal"), 1.5),
    (("lead", "tech lead"), 1.4),
    (("senior", "sr."), 1.3),
    (("junior", "jr."), 0.75),
]

SIZE_MULTIPLIERS: Dict[str, float] = {
    "xs": 0.85,  # 1-10 employees
    "s": 0.9,    # 11-50
    "m": 1.0,    # 51-200
    "l": 1.1,    # 201-1000
    "xl": 1.15,  # 1001+
}

# Tiers: top 1.4-1.6, high 1.2-1.4, mid 1.05-1.15, consulting 0.9-1.0
COMPANY_MULTIPLIERS: Dict[str, float] = {
    # top tier
    "google": 1.55,
    "meta": 1.5,
    "facebook": 1.5,
    "apple": 1.5,
    "amazon": 1.4,
    "microsoft": 1.45,
    "nvidia": 1.55,
    "netflix": 1.5,
    "openai": 1.6,
    "anthropic": 1.55,

    # high tier
    "wiz": 1.45,
    "monday.com": 1.35,
    "monday": 1.35,
    "snyk": 1.35,
    "datadog": 1.4,
    "cloudflare": 1.35,
    "stripe": 1.45,
    "salesforce": 1.3,
    "adobe": 1.3,
    "intel": 1.25,
    "oracle": 1.2,
    "ibm": 1.15,
    "cisco": 1.2,
    "vmware": 1.2,
    "broadcom": 1.25,
    "qualcomm": 1.3,
    "mobileye": 1.35,
    "tower semiconductor": 1.2,
    "tower": 1.2,
    "mellanox": 1.3,
    "fiverr": 1.25,
    "wix": 1.25,
    "similarweb": 1.2,
    "ironource": 1.25,
    "unity": 1.25,
    "playtika": 1.2,
    "pagaya": 1.3,
    "payoneer": 1.2,
    "check point": 1.25,
    "checkpoint": 1.25,
    "palo alto networks": 1.35,
    "palo alto": 1.35,
    "cyberark": 1.25,
    "varonis": 1.2,
    "sentinelone": 1.3,
    "crowdstrike": 1.35,
    "zscaler": 1.3,
    "orca security": 1.35,
    "orca": 1.35,
    "cato networks": 1.25,
    "cato": 1.25,
    "armis": 1.3,
    "axonius": 1.3,
    "rapyd": 1.25,
    "tipalti": 1.2,
    "jfrog": 1.25,
    "appsflyer": 1.2,
    "gong": 1.35,
    "outbrain": 1.15,
    "taboola": 1.15,
    "walkme": 1.2,
    "lightricks": 1.25,
    "hibob": 1.2,
    "bob": 1.2,
    "papaya global": 1.25,
    "papaya": 1.25,
    "deel": 1.3,
    "rippling": 1.35,
    "riskified": 1.2,
    "forter": 1.2,
    "yotpo": 1.15,
    "kaltura": 1.1,
    "liveperson": 1.1,
    "nice": 1.2,
    "amdocs": 1.15,
    "elbit": 1.15,
    "elbit systems": 1.15,
    "rafael": 1.2,
    "iai": 1.15,
    "israel aerospace": 1.15,

    # mid tier
    "infinidat": 1.15,
    "cellebrite": 1.15,
    "audiocodes": 1.1,
    "radware": 1.1,
    "allot": 1.05,
    "gilat": 1.05,
    "sapiens": 1.1,
    "magic software": 1.05,
    "matrix": 1.0,
    "ness": 1.0,

    # consulting & services
    "accenture": 1.0,
    "deloitte": 0.95,
    "kpmg": 0.95,
    "pwc": 0.95,
    "ernst & young": 0.95,
    "ey": 0.95,
    "mckinsey": 1.15,
    "bcg": 1.1,
    "bain": 1.1,
}

# (threshold, tier), checked top to bottom
COMPANY_TIERS: List[Tuple[float, str]] = [
    (1.4, "top"),
    (1.2, "high"),
    (1.05, "mid"),
    (0.95, "standard"),
]
