from pydantic import BaseModel, ConfigDict, Field, field_validator

from dataclasses import dataclass
from typing import Literal, Optional

Confidence = Literal["low", "medium", "high"]


class JobDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    company: str = ""
    category: str = ""
    level: Optional[str] = None        # Intern | Engineer | Manager | Executive
    size: Optional[str] = None         # xs | s | m | l | xl
    job_category: Optional[str] = None
    city: str = ""
    url: str = ""
    updated: str = ""


class SalaryEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_monthly: int
    max_monthly: int
    min_annual: int
    max_annual: int
    currency: str
    confidence: Confidence


class RemoteSalary(BaseModel):
    """
    A record returned by the salary lookup service.
    source == "database" means crowd-sourced reports backed the numbers;
    anything else is a fallback the service computed itself.
    """
    min: float = Field(allow_inf_nan=False)
    max: float = Field(allow_inf_nan=False)
    confidence: Confidence = "medium"
    source: str = "heuristic"

    @property
    def is_database(self) -> bool:
        return self.source == "database"


class SalaryReport(BaseModel):
    company_name: str
    job_title: str
    base_salary: int = Field(ge=5000, le=200000)  # monthly, ILS
    experience_years: Optional[int] = Field(default=None, ge=0)
    location: str = "Tel Aviv"
    total_compensation: Optional[int] = Field(default=None, ge=0)

    @field_validator("company_name", "job_title")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


@dataclass(frozen=True)
class SalaryRange:
    min: int
    max: int
