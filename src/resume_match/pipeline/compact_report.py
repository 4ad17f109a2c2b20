"""Compact keyword-coverage report with an additive, capped score.

The report is assembled from independent section renderers joined by a
blank line. Conditional lines render as empty strings so the section layout
stays fixed whatever the facts are.
"""

from __future__ import annotations

from resume_match.models.facts import JobFacts

BASE_SCORE = 60
POINTS_PER_TECHNOLOGY = 5
MAX_SCORE = 95

GENERAL_STACK_LABEL = "General Development"
NO_TECHNOLOGY_WARNING = "⚠️ No specific technologies identified from job description"

DISCLAIMER = (
    "*Analysis based on job description content and resume structure. "
    "For best results, ensure your resume directly addresses the key requirements "
    "mentioned in the job posting.*"
)


def compact_score(technology_count: int) -> int:
    """Score 60 plus 5 per matched technology, capped at 95."""
    return min(MAX_SCORE, BASE_SCORE + technology_count * POINTS_PER_TECHNOLOGY)


def render_title() -> str:
    return "# Resume Analysis Report"


def render_profile(facts: JobFacts, resume_name: str) -> str:
    stack = ", ".join(facts.functional_stack) or GENERAL_STACK_LABEL
    return "\n".join([
        f"## 📄 **Resume:** {resume_name}",
        f"## 🎯 **Position Level:** {facts.seniority.value}",
        f"## 🛠️ **Tech Stack:** {stack}",
    ])


def render_keywords(facts: JobFacts) -> str:
    if facts.matched_technologies:
        checklist = "\n".join(f"✅ {tech}" for tech in facts.matched_technologies)
    else:
        checklist = NO_TECHNOLOGY_WARNING
    return f"## 🔍 **Keyword Analysis**\n\n**Identified Key Technologies:**\n{checklist}"


def render_score(score: int) -> str:
    return f"## 📊 **Match Score: {score}/100**"


def render_strong_points(facts: JobFacts) -> str:
    coverage = (
        "- Good coverage of required technologies"
        if len(facts.matched_technologies) > 2
        else ""
    )
    return "\n".join([
        "### ✅ **Strong Points**",
        "- Resume format and structure appear professional",
        "- Relevant experience for the target role",
        coverage,
    ])


def render_improvements(facts: JobFacts) -> str:
    specific = (
        "- Consider highlighting more specific technical skills mentioned in the job description"
        if len(facts.matched_technologies) < 3
        else ""
    )
    return "\n".join([
        "### ⚠️ **Areas for Improvement**",
        specific,
        "- Quantify achievements with specific metrics",
        "- Add more details about project impact and scale",
        "- Consider adding relevant certifications",
    ])


def render_recommendations(facts: JobFacts) -> str:
    keywords = ", ".join(facts.matched_technologies)
    stack = " and ".join(facts.functional_stack) or "relevant technical"
    level = facts.seniority.value.lower()
    return "\n".join([
        "### 🎯 **Recommendations**",
        f"1. **Keyword Optimization**: Ensure resume includes: {keywords}",
        f"2. **Experience Highlighting**: Emphasize {level}-level responsibilities",
        f"3. **Technical Skills**: Showcase {stack} experience",
        "4. **Quantify Results**: Add metrics showing impact of your work",
        "5. **Tailor Content**: Align resume content more closely with job requirements",
    ])


def render_next_steps() -> str:
    return "\n".join([
        "### 📈 **Next Steps**",
        "- Review and incorporate missing keywords naturally",
        "- Expand on relevant project experience",
        "- Consider adding a skills section if not present",
        "- Ensure consistent formatting throughout",
    ])


def render_compact_report(facts: JobFacts, resume_name: str) -> str:
    """Render the full compact report for the given facts."""
    score = compact_score(len(facts.matched_technologies))
    sections = [
        render_title(),
        render_profile(facts, resume_name),
        render_keywords(facts),
        render_score(score),
        render_strong_points(facts),
        render_improvements(facts),
        render_recommendations(facts),
        render_next_steps(),
        DISCLAIMER,
    ]
    return "\n\n".join(sections)
