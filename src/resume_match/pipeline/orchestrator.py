"""Main pipeline: resolve job text, then hand it to the selected analyzer."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from resume_match.clients.job_source import JobSource
from resume_match.pipeline.analyzers import Analyzer

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Report text plus what produced it."""

    report: str
    analyzer: str
    job_text: str
    elapsed_seconds: float = 0.0
    metadata: dict = field(default_factory=dict)


class MatchPipeline:
    """Runs retrieval and analysis for a single resume/job pair.

    Holds no per-run state, so one instance can serve concurrent runs.
    """

    def __init__(self, source: JobSource, analyzer: Analyzer):
        self.source = source
        self.analyzer = analyzer

    async def run(
        self,
        job_identifier: str,
        resume_name: str,
        *,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> AnalysisResult:
        """Fetch the job text and produce a report.

        Args:
            job_identifier: Path, URL or literal text, depending on the source.
            resume_name: Opaque resume label shown in the report.
            on_phase: Optional callback(phase_name, detail) for progress.

        Raises:
            RetrievalError: the job text could not be obtained; no analysis runs.
            AuthenticationError, ProviderError: the provider-backed analyzer failed.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = "") -> None:
            if on_phase:
                on_phase(phase, detail)

        _notify("fetch", f"Retrieving job description ({self.source.name})")
        job_text = await self.source.fetch(job_identifier)
        logger.info("Job description resolved: %d chars", len(job_text))

        _notify("analyze", f"Analyzing with {self.analyzer.name}")
        report, metadata = await self.analyzer.analyze(job_text, resume_name)

        elapsed = time.monotonic() - start
        _notify("done", f"Done in {elapsed:.1f}s")

        return AnalysisResult(
            report=report,
            analyzer=self.analyzer.name,
            job_text=job_text,
            elapsed_seconds=elapsed,
            metadata=metadata,
        )
