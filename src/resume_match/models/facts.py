"""Pydantic models for requirement extraction output."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

DEFAULT_COMPANY_NAME = "the company"
DEFAULT_ROLE_NAME = "Software Developer"


class Seniority(str, Enum):
    SENIOR = "Senior"
    MID_LEVEL = "Mid-level"
    JUNIOR = "Junior"


class JobFacts(BaseModel):
    matched_technologies: list[str] = []  # vocabulary order, no duplicates
    seniority: Seniority = Seniority.JUNIOR
    functional_stack: list[str] = []
    company_name: str = DEFAULT_COMPANY_NAME  # narrative mode only
    role_name: str = DEFAULT_ROLE_NAME  # narrative mode only
