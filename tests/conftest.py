"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from resume_match.clients.llm_client import LLMClient, LLMResponse
from resume_match.models.facts import JobFacts, Seniority


@pytest.fixture
def senior_jd_text() -> str:
    return """Senior Software Engineer at TechCorp

Requirements:
- 5+ years of software development experience
- Expert knowledge of React and TypeScript
- Production experience on AWS
- Docker and Kubernetes in day-to-day work
- Owning CI/CD pipelines
"""


@pytest.fixture
def ai_design_jd_text() -> str:
    return """We are hiring at Supabase.

You will build AI features for our dashboard and work from Figma mockups.
Experience with Supabase or a similar hosted backend is a plus.
"""


@pytest.fixture
def empty_facts() -> JobFacts:
    return JobFacts()


@pytest.fixture
def rich_facts() -> JobFacts:
    return JobFacts(
        matched_technologies=["React", "AWS", "Docker"],
        seniority=Seniority.SENIOR,
        functional_stack=["Frontend", "Cloud"],
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="## Provider report", input_tokens=100, output_tokens=50)
    )
    return client
