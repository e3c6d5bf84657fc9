# salary_estimator/utils.py
import math
from typing import Any


def safe_str(x: Any) -> str:
    return x.strip() if isinstance(x, str) else ""


def normalize_key(text: str) -> str:
    """Trim and lowercase; None-safe."""
    if not text:
        return ""
    return text.strip().lower()


def cache_key(company: str, title: str) -> str:
    return f"{(company or '').lower()}-{(title or '').lower()}"


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def round_to_thousand(amount: float) -> int:
    """Nearest 1000, halves rounded up (Python's round() is banker's)."""
    return round_half_up(amount / 1000) * 1000

