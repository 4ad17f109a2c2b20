"""Requirement extractor: job description text in, structured facts out."""

from __future__ import annotations

from collections.abc import Iterable

from resume_match.models.facts import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_ROLE_NAME,
    JobFacts,
    Seniority,
)
from resume_match.parsers.vocabulary import (
    DEFAULT_SENIORITY,
    FUNCTIONAL_STACKS,
    KNOWN_COMPANIES,
    KNOWN_ROLES,
    SENIORITY_RULES,
    TECHNOLOGIES,
    Term,
)


def extract_requirements(job_text: str) -> JobFacts:
    """Extract technologies, seniority, stack and company/role from job text.

    Total over all strings: empty or unrelated text yields default facts.
    """
    lowered = job_text.lower()
    company_name, role_name = resolve_company_and_role(job_text)
    return JobFacts(
        matched_technologies=match_terms(TECHNOLOGIES, lowered),
        seniority=determine_seniority(lowered),
        functional_stack=match_terms(FUNCTIONAL_STACKS, lowered),
        company_name=company_name,
        role_name=role_name,
    )


def match_terms(terms: Iterable[Term], lowered_text: str) -> list[str]:
    """Return labels of matching terms in table order."""
    return [term.label for term in terms if term.matches(lowered_text)]


def determine_seniority(lowered_text: str) -> Seniority:
    for level, needles in SENIORITY_RULES:
        if any(needle in lowered_text for needle in needles):
            return level
    return DEFAULT_SENIORITY


def resolve_company_and_role(raw_text: str) -> tuple[str, str]:
    """Look up known company and role phrases in the raw (cased) text."""
    company = next((name for name in KNOWN_COMPANIES if name in raw_text), DEFAULT_COMPANY_NAME)
    role = next((title for title in KNOWN_ROLES if title in raw_text), DEFAULT_ROLE_NAME)
    return company, role
