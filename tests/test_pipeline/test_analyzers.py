"""Tests for analyzer strategies and their selection."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from resume_match.clients.llm_client import LLMResponse
from resume_match.config import AppConfig, ReportConfig
from resume_match.errors import AuthenticationError, ProviderError
from resume_match.pipeline.analyzers import (
    FallbackAnalyzer,
    HeuristicAnalyzer,
    select_analyzer,
)
from resume_match.pipeline.llm_analyst import SYSTEM_PROMPT, LLMAnalyzer


class TestHeuristicAnalyzer:
    async def test_compact_mode(self, senior_jd_text):
        analyzer = HeuristicAnalyzer(mode="compact")
        report, metadata = await analyzer.analyze(senior_jd_text, "resume.pdf")
        assert report.startswith("# Resume Analysis Report")
        assert "**Match Score: 90/100**" in report
        assert metadata == {}
        assert analyzer.name == "heuristic-compact"

    async def test_narrative_mode(self, ai_design_jd_text):
        analyzer = HeuristicAnalyzer(mode="narrative", trailer="<END>")
        report, _ = await analyzer.analyze(ai_design_jd_text, "resume.pdf")
        assert report.startswith("Based on the job description for Software Developer at Supabase")
        assert "<END>" in report

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError, match="Unknown report mode"):
            HeuristicAnalyzer(mode="verbose")

    async def test_deterministic(self, senior_jd_text):
        analyzer = HeuristicAnalyzer(mode="narrative")
        first = await analyzer.analyze(senior_jd_text, "a.pdf")
        second = await analyzer.analyze(senior_jd_text, "a.pdf")
        assert first == second


class TestLLMAnalyzer:
    async def test_passes_job_text_and_resume_name(self, mock_llm_client):
        analyzer = LLMAnalyzer(mock_llm_client, model="claude-test")
        report, _ = await analyzer.analyze("Python developer", "jane.pdf")

        assert report == "## Provider report"
        kwargs = mock_llm_client.generate.call_args.kwargs
        assert "Python developer" in kwargs["prompt"]
        assert "jane.pdf" in kwargs["prompt"]
        assert kwargs["system"] == SYSTEM_PROMPT
        assert kwargs["model"] == "claude-test"

    async def test_provider_errors_propagate(self, mock_llm_client):
        mock_llm_client.generate.side_effect = AuthenticationError("bad key")
        analyzer = LLMAnalyzer(mock_llm_client)
        with pytest.raises(AuthenticationError):
            await analyzer.analyze("text", "cv.pdf")

    async def test_usage_includes_cost(self, mock_llm_client):
        _, usage = await LLMAnalyzer(mock_llm_client).analyze("React", "cv.pdf")
        assert usage["input_tokens"] == 100
        assert usage["output_tokens"] == 50
        assert usage["calls"] == 1
        assert usage["estimated_cost_usd"] > 0

    async def test_usage_is_per_call(self, mock_llm_client):
        mock_llm_client.generate.side_effect = [
            LLMResponse(text="first", input_tokens=10, output_tokens=1),
            LLMResponse(text="second", input_tokens=20, output_tokens=2),
        ]
        analyzer = LLMAnalyzer(mock_llm_client)
        (_, first), (_, second) = await asyncio.gather(
            analyzer.analyze("a", "cv.pdf"), analyzer.analyze("b", "cv.pdf")
        )
        assert sorted([first["input_tokens"], second["input_tokens"]]) == [10, 20]
        assert first["calls"] == second["calls"] == 1


class TestFallbackAnalyzer:
    async def test_primary_result_used_when_it_succeeds(self, mock_llm_client):
        analyzer = FallbackAnalyzer(LLMAnalyzer(mock_llm_client), HeuristicAnalyzer())
        report, metadata = await analyzer.analyze("React", "cv.pdf")
        assert report == "## Provider report"
        assert metadata["degraded"] is False
        assert metadata["input_tokens"] == 100

    async def test_degrades_on_provider_error(self, mock_llm_client):
        mock_llm_client.generate.side_effect = ProviderError("service down")
        analyzer = FallbackAnalyzer(LLMAnalyzer(mock_llm_client), HeuristicAnalyzer())
        report, metadata = await analyzer.analyze("React", "cv.pdf")
        assert report.startswith("# Resume Analysis Report")
        assert metadata == {"degraded": True}

    async def test_authentication_error_not_masked(self, mock_llm_client):
        mock_llm_client.generate.side_effect = AuthenticationError("bad key")
        analyzer = FallbackAnalyzer(LLMAnalyzer(mock_llm_client), HeuristicAnalyzer())
        with pytest.raises(AuthenticationError):
            await analyzer.analyze("React", "cv.pdf")

    async def test_concurrent_runs_keep_their_own_outcome(self):
        async def flaky_primary(job_text, resume_name):
            await asyncio.sleep(0)
            if job_text == "fail":
                raise ProviderError("service down")
            return "## Provider report", {"input_tokens": 5}

        primary = AsyncMock()
        primary.name = "llm"
        primary.analyze.side_effect = flaky_primary
        analyzer = FallbackAnalyzer(primary, HeuristicAnalyzer())

        (ok_report, ok_meta), (fail_report, fail_meta) = await asyncio.gather(
            analyzer.analyze("ok", "cv.pdf"), analyzer.analyze("fail", "cv.pdf")
        )
        assert ok_report == "## Provider report"
        assert ok_meta == {"input_tokens": 5, "degraded": False}
        assert fail_report.startswith("# Resume Analysis Report")
        assert fail_meta == {"degraded": True}

    def test_name_combines_both(self, mock_llm_client):
        analyzer = FallbackAnalyzer(LLMAnalyzer(mock_llm_client), HeuristicAnalyzer())
        assert analyzer.name == "llm|heuristic-compact"


class TestSelectAnalyzer:
    def test_no_credential_uses_heuristic_default_mode(self):
        analyzer = select_analyzer(AppConfig())
        assert isinstance(analyzer, HeuristicAnalyzer)
        assert analyzer.mode == "compact"

    def test_mode_override(self):
        analyzer = select_analyzer(AppConfig(), mode="narrative")
        assert analyzer.mode == "narrative"

    def test_config_default_mode_and_trailer(self):
        config = AppConfig(report=ReportConfig(default_mode="narrative", trailer_token="##"))
        analyzer = select_analyzer(config)
        assert analyzer.mode == "narrative"
        assert analyzer.trailer == "##"

    def test_empty_credential_uses_heuristic(self):
        assert isinstance(select_analyzer(AppConfig(), api_key=""), HeuristicAnalyzer)

    def test_credential_selects_provider(self):
        with patch("resume_match.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            analyzer = select_analyzer(AppConfig(), mode="narrative", api_key="sk-test")
        assert isinstance(analyzer, LLMAnalyzer)
        assert analyzer.model == AppConfig().llm.model
        mock_cls.assert_called_once_with(api_key="sk-test", timeout=120)

    def test_credential_with_fallback(self):
        with patch("resume_match.clients.llm_client.anthropic.AsyncAnthropic"):
            analyzer = select_analyzer(AppConfig(), api_key="sk-test", allow_fallback=True)
        assert isinstance(analyzer, FallbackAnalyzer)
        assert isinstance(analyzer.primary, LLMAnalyzer)
        assert isinstance(analyzer.fallback, HeuristicAnalyzer)
