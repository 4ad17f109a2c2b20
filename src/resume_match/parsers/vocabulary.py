"""Keyword vocabularies used by the requirement extractor.

Each table is a sequence of ``(label, needles)`` pairs. A label matches when
any of its needles occurs as a case-insensitive substring of the job text.
Matching is substring-based, not word-boundary-based, so a longer word that
contains a needle also matches (e.g. "reactive" satisfies React).
"""

from __future__ import annotations

from dataclasses import dataclass

from resume_match.models.facts import Seniority


@dataclass(frozen=True)
class Term:
    """A vocabulary entry: a display label and the substrings that signal it."""

    label: str
    needles: tuple[str, ...]

    def matches(self, lowered_text: str) -> bool:
        return any(needle in lowered_text for needle in self.needles)


TECHNOLOGIES: tuple[Term, ...] = (
    Term("JavaScript", ("javascript",)),
    Term("React", ("react",)),
    Term("Node.js", ("node.js", "nodejs")),
    Term("Python", ("python",)),
    Term("AWS", ("aws",)),
    Term("Docker", ("docker",)),
    Term("Kubernetes", ("kubernetes",)),
    Term("Microservices", ("microservices",)),
    Term("CI/CD", ("ci/cd",)),
    Term("TypeScript", ("typescript",)),
)

# Evaluated in order; the first rule that matches wins.
SENIORITY_RULES: tuple[tuple[Seniority, tuple[str, ...]], ...] = (
    (Seniority.SENIOR, ("senior", "lead", "5+ years")),
    (Seniority.MID_LEVEL, ("mid", "3+ years")),
)
DEFAULT_SENIORITY = Seniority.JUNIOR

FUNCTIONAL_STACKS: tuple[Term, ...] = (
    Term("Frontend", ("frontend", "react")),
    Term("Backend", ("backend", "node.js")),
    Term("Full-stack", ("full", "fullstack")),
    Term("Cloud", ("cloud", "aws")),
    Term("DevOps", ("devops",)),
)

# Tested case-sensitively against the raw text, in priority order.
KNOWN_COMPANIES: tuple[str, ...] = (
    "TechCorp",
    "Lovable",
    "Supabase",
    "Vercel",
    "Stripe",
    "Shopify",
)

KNOWN_ROLES: tuple[str, ...] = (
    "Senior Software Engineer",
    "Full Stack Developer",
    "Frontend Developer",
    "Backend Developer",
    "AI Engineer",
    "Product Engineer",
    "Software Engineer",
    "Software Developer",
)
