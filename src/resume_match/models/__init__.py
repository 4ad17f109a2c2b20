"""Data models for the resume matching engine."""

from resume_match.models.facts import JobFacts, Seniority
from resume_match.models.narrative import (
    AlignmentItem,
    ImprovementItem,
    NarrativeAnalysis,
    ReportItem,
)

__all__ = [
    "AlignmentItem",
    "ImprovementItem",
    "JobFacts",
    "NarrativeAnalysis",
    "ReportItem",
    "Seniority",
]
