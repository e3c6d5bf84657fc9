from __future__ import annotations

import yaml
from pydantic import BaseModel, Field

from salary_estimator.api import DEFAULT_TIMEOUT_SECONDS
from salary_estimator.cache import DEFAULT_TTL_SECONDS
from salary_estimator.tables import DEFAULT_CURRENCY


class Api(BaseModel):
    enabled: bool = True
    base_url: str = "http://localhost:3001"
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


class Cache(BaseModel):
    ttl_seconds: float = DEFAULT_TTL_SECONDS


class Jobs(BaseModel):
    path: str = "data/jobs.csv"


class Output(BaseModel):
    currency: str = DEFAULT_CURRENCY
    explain: bool = False


class Config(BaseModel):
    version: int = 1
    api: Api = Field(default_factory=Api)
    cache: Cache = Field(default_factory=Cache)
    jobs: Jobs = Field(default_factory=Jobs)
    output: Output = Field(default_factory=Output)


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    cfg = Config(**raw)

    if cfg.cache.ttl_seconds <= 0:
        raise ValueError(f"cache.ttl_seconds must be positive (got {cfg.cache.ttl_seconds})")
    if cfg.api.timeout_seconds <= 0:
        raise ValueError(f"api.timeout_seconds must be positive (got {cfg.api.timeout_seconds})")
    if cfg.api.enabled and not cfg.api.base_url.strip():
        raise ValueError("api.base_url is required when the API is enabled")

    return cfg
