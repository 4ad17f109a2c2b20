"""Narrative alignment / improvement report with a ratio-based score.

A fixed battery of independent checks runs against the lower-cased job
text. Each triggered check contributes one templated item to either the
alignment list or the improvement list. The experience sentences are
templates; resume content is never read.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from fractions import Fraction

from resume_match.models.narrative import (
    AlignmentItem,
    ImprovementItem,
    NarrativeAnalysis,
    ReportItem,
)
from resume_match.parsers.requirement_extractor import extract_requirements

DEFAULT_TRAILER = "---"
DEFAULT_SCORE = 70

SUMMARY_SENTENCE = (
    "Strong technical foundation and relevant experience, but missing some specific "
    "keywords and industry background that would make this an ideal match."
)
NO_ALIGNMENTS_LINE = "No specific alignment points identified from the job description."
NO_IMPROVEMENTS_LINE = "No specific gaps identified from the job description."

RECOMMENDATIONS: tuple[str, ...] = (
    "**Add Technical Keywords**: Mirror the exact tool and platform names used in the posting",
    "**Quantify Achievements**: Add specific metrics about delivery speed, user scale and impact",
    "**Highlight Relevant Projects**: Lead with the projects closest to the role's core responsibilities",
    "**Consider Certifications**: Pursue a certification that backs up the most requested platform",
    "**Soft Skills**: Better highlight communication and cross-team collaboration",
)


@dataclass(frozen=True)
class NarrativeCheck:
    """A job-text condition and the item it contributes when triggered."""

    needles: tuple[str, ...]
    title: str
    requirement: str
    experience: str
    # regexes for short words that substring matching would over- or under-match
    patterns: tuple[str, ...] = ()

    def triggered(self, lowered_text: str) -> bool:
        if any(needle in lowered_text for needle in self.needles):
            return True
        return any(re.search(pattern, lowered_text) for pattern in self.patterns)


ALIGNMENT_CHECKS: tuple[NarrativeCheck, ...] = (
    NarrativeCheck(
        needles=("artificial intelligence", "machine learning"),
        patterns=(r"\bai\b",),
        title="AI & Machine Learning",
        requirement="Experience building with AI/ML technologies",
        experience=(
            "At Brightwave Analytics, shipped an LLM-assisted document triage feature "
            "that cut manual review time by 40%."
        ),
    ),
    NarrativeCheck(
        needles=("lifecycle", "project", "lead"),
        title="Project Leadership",
        requirement="Own projects across the full development lifecycle",
        experience=(
            "At Northbeam Software, led a four-person squad from discovery to launch "
            "of a customer self-service portal, delivering two weeks ahead of schedule."
        ),
    ),
    NarrativeCheck(
        needles=("cloud", "aws", "azure"),
        title="Cloud Platforms",
        requirement="Hands-on experience with cloud platforms (AWS, Azure)",
        experience=(
            "At Northbeam Software, migrated three legacy services to AWS and Azure "
            "managed offerings, reducing hosting costs by 25%."
        ),
    ),
    NarrativeCheck(
        needles=("react", "javascript"),
        title="React & JavaScript",
        requirement="Strong proficiency in React and modern JavaScript",
        experience=(
            "At Brightwave Analytics, rebuilt the reporting dashboard in React, "
            "improving page load times by 35%."
        ),
    ),
    NarrativeCheck(
        needles=("collaborat", "cross-functional", "stakeholder"),
        title="Cross-functional Collaboration",
        requirement="Work closely with product, design and engineering stakeholders",
        experience=(
            "At Northbeam Software, ran weekly planning with product and design "
            "that shortened the feedback loop on new features from weeks to days."
        ),
    ),
)

IMPROVEMENT_CHECKS: tuple[NarrativeCheck, ...] = (
    NarrativeCheck(
        needles=("low-code", "no-code", "low code", "no code", "supabase", "bubble", "webflow"),
        title="Low-code / No-code Platforms",
        requirement="Familiarity with low-code and no-code platforms such as Supabase",
        experience=(
            "Add a short project showing a backend or internal tool assembled on a "
            "hosted low-code platform, with the time saved versus a custom build."
        ),
    ),
    NarrativeCheck(
        needles=("figma", "design", "ui/ux", "user interface"),
        title="Design & UI Tooling",
        requirement="Comfort working from Figma designs and contributing to UI decisions",
        experience=(
            "Mention any design handoff work, for example implementing Figma "
            "component libraries or prototyping interface changes with designers."
        ),
    ),
    NarrativeCheck(
        needles=("html", "css", "frontend", "front-end"),
        title="Frontend Fundamentals",
        requirement="Solid HTML, CSS and frontend engineering skills",
        experience=(
            "Call out responsive layout, accessibility or CSS architecture work "
            "explicitly rather than folding it into general web development."
        ),
    ),
)


def _item_kwargs(check: NarrativeCheck) -> dict[str, str]:
    return {"title": check.title, "requirement": check.requirement, "experience": check.experience}


def find_alignments(lowered_text: str) -> list[AlignmentItem]:
    return [
        AlignmentItem(**_item_kwargs(check))
        for check in ALIGNMENT_CHECKS
        if check.triggered(lowered_text)
    ]


def find_improvements(lowered_text: str) -> list[ImprovementItem]:
    return [
        ImprovementItem(**_item_kwargs(check))
        for check in IMPROVEMENT_CHECKS
        if check.triggered(lowered_text)
    ]


def narrative_score(alignment_count: int, improvement_count: int) -> int:
    """Share of alignment items as a 0-100 score, rounded half up.

    Exact rational arithmetic keeps .5 cases (e.g. 5 of 8 = 62.5) from
    drifting under float error. Returns 70 when there are no items.
    """
    total = alignment_count + improvement_count
    if total == 0:
        return DEFAULT_SCORE
    return math.floor(Fraction(100 * alignment_count, total) + Fraction(1, 2))


def analyze_narrative(job_text: str) -> NarrativeAnalysis:
    """Run every narrative check against the job text."""
    lowered = job_text.lower()
    alignments = find_alignments(lowered)
    improvements = find_improvements(lowered)
    return NarrativeAnalysis(
        facts=extract_requirements(job_text),
        strong_alignments=alignments,
        improvements=improvements,
        score=narrative_score(len(alignments), len(improvements)),
    )


def render_intro(analysis: NarrativeAnalysis) -> str:
    facts = analysis.facts
    return (
        f"Based on the job description for {facts.role_name} at {facts.company_name}, "
        "here's the analysis:"
    )


def render_item(number: int, item: ReportItem, trailer: str) -> str:
    return "\n".join([
        f"{number}. **{item.title}**",
        f'   Requirement: "{item.requirement}"',
        "",
        f"   Experience: {item.experience}",
        trailer,
    ])


def render_item_section(
    heading: str,
    items: list[AlignmentItem] | list[ImprovementItem],
    empty_line: str,
    trailer: str,
) -> str:
    if not items:
        return f"{heading}\n\n{empty_line}"
    body = "\n\n".join(render_item(i, item, trailer) for i, item in enumerate(items, 1))
    return f"{heading}\n\n{body}"


def render_score_section(score: int) -> str:
    return f"## 📊 Resume Match Score\n\n**Score: {score}/100**\n\n{SUMMARY_SENTENCE}"


def render_recommendations(trailer: str) -> str:
    body = "\n".join(
        f"{i}. {text}\n{trailer}" for i, text in enumerate(RECOMMENDATIONS, 1)
    )
    return f"## ✅ Recommendations\n\n{body}"


def render_narrative_report(
    analysis: NarrativeAnalysis,
    trailer: str = DEFAULT_TRAILER,
) -> str:
    """Render the narrative report; ``trailer`` follows every list item."""
    sections = [
        render_intro(analysis),
        render_item_section(
            "## 🔍 Strong Alignment", analysis.strong_alignments, NO_ALIGNMENTS_LINE, trailer
        ),
        render_item_section(
            "## ⚠️ Areas for Improvement", analysis.improvements, NO_IMPROVEMENTS_LINE, trailer
        ),
        render_score_section(analysis.score),
        render_recommendations(trailer),
    ]
    return "\n\n".join(sections)
