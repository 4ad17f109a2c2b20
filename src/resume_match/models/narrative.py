"""Pydantic models for narrative-mode analysis."""

from __future__ import annotations

from pydantic import BaseModel

from resume_match.models.facts import JobFacts


class ReportItem(BaseModel):
    title: str
    requirement: str  # quoted job phrase or paraphrase
    experience: str  # templated sentence, never read from the resume


class AlignmentItem(ReportItem):
    pass


class ImprovementItem(ReportItem):
    pass


class NarrativeAnalysis(BaseModel):
    facts: JobFacts
    strong_alignments: list[AlignmentItem]
    improvements: list[ImprovementItem]
    score: int  # 0-100
