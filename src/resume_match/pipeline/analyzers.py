"""Report-producing strategies and the rule that picks one.

An analyzer turns resolved job text plus a resume identifier into report
text, returned with a metadata dict that describes that one call only.
The heuristic analyzer is the built-in path; the LLM analyzer takes over
whenever a credential is supplied.
"""

from __future__ import annotations

import logging
from typing import Protocol

from resume_match.clients.llm_client import LLMClient
from resume_match.config import REPORT_MODES, AppConfig
from resume_match.errors import ProviderError
from resume_match.parsers.requirement_extractor import extract_requirements
from resume_match.pipeline.compact_report import render_compact_report
from resume_match.pipeline.llm_analyst import LLMAnalyzer
from resume_match.pipeline.narrative_report import (
    DEFAULT_TRAILER,
    analyze_narrative,
    render_narrative_report,
)

logger = logging.getLogger(__name__)


class Analyzer(Protocol):
    name: str

    async def analyze(self, job_text: str, resume_name: str) -> tuple[str, dict]: ...


class HeuristicAnalyzer:
    """Keyword-driven report generation; deterministic and never fails."""

    def __init__(self, mode: str = "compact", trailer: str = DEFAULT_TRAILER):
        if mode not in REPORT_MODES:
            raise ValueError(f"Unknown report mode: {mode!r}")
        self.mode = mode
        self.trailer = trailer
        self.name = f"heuristic-{mode}"

    def render(self, job_text: str, resume_name: str) -> str:
        if self.mode == "narrative":
            return render_narrative_report(analyze_narrative(job_text), trailer=self.trailer)
        return render_compact_report(extract_requirements(job_text), resume_name)

    async def analyze(self, job_text: str, resume_name: str) -> tuple[str, dict]:
        return self.render(job_text, resume_name), {}


class FallbackAnalyzer:
    """Degrades to a fallback analyzer when the primary provider fails.

    Only ``ProviderError`` triggers the fallback; a rejected credential is
    surfaced to the caller. The returned metadata carries ``degraded`` and,
    after a fallback, only the fallback's own usage.
    """

    def __init__(self, primary: Analyzer, fallback: Analyzer):
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}|{fallback.name}"

    async def analyze(self, job_text: str, resume_name: str) -> tuple[str, dict]:
        try:
            report, metadata = await self.primary.analyze(job_text, resume_name)
        except ProviderError:
            logger.warning(
                "Provider analysis failed, falling back to %s", self.fallback.name, exc_info=True
            )
            report, metadata = await self.fallback.analyze(job_text, resume_name)
            return report, {**metadata, "degraded": True}
        return report, {**metadata, "degraded": False}


def select_analyzer(
    config: AppConfig,
    mode: str | None = None,
    api_key: str | None = None,
    allow_fallback: bool = False,
) -> Analyzer:
    """Pick the provider-backed analyzer when a credential is present."""
    heuristic = HeuristicAnalyzer(
        mode=mode or config.report.default_mode,
        trailer=config.report.trailer_token,
    )
    if not api_key:
        return heuristic

    llm = LLMClient(
        api_key=api_key,
        timeout=config.llm.timeout,
        max_retries=config.llm.max_retries,
    )
    provider = LLMAnalyzer(
        llm,
        model=config.llm.model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )
    if allow_fallback:
        return FallbackAnalyzer(provider, heuristic)
    return provider
