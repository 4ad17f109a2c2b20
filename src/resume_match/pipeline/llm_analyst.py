"""Claude-backed analysis provider producing the same report contract."""

from __future__ import annotations

import logging

from resume_match.clients.llm_client import DEFAULT_MODEL, LLMClient
from resume_match.usage.cost_calculator import usage_metadata

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a senior technical recruiter reviewing how well a candidate's resume fits a job posting.
You receive the job posting text and the resume's file name. You cannot see the resume itself,
so judge fit from what the posting asks for and phrase advice as guidance to the candidate.

Respond in Markdown with exactly these sections, in this order:
1. A one-sentence intro naming the role and company ("Based on the job description for ...").
2. "## 🔍 Strong Alignment": numbered items, each with a bold title, a quoted requirement line and an experience line.
3. "## ⚠️ Areas for Improvement": numbered items in the same shape.
4. "## 📊 Resume Match Score": a line "**Score: N/100**" with N an integer from 0 to 100, then one summary sentence.
5. "## ✅ Recommendations": five numbered, concrete recommendations.

Do not invent facts about the posting. Do not add any other sections."""


class LLMAnalyzer:
    """Delegates the whole report to Claude; supersedes the heuristic path."""

    name = "llm"

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def analyze(self, job_text: str, resume_name: str) -> tuple[str, dict]:
        """Ask the provider for a report. Raises AuthenticationError / ProviderError."""
        prompt = f"""Resume file: {resume_name}

Job posting:
---
{job_text}
---

Write the analysis now."""

        logger.info("Requesting provider analysis with %s", self.model)
        response = await self.llm.generate(
            prompt=prompt,
            system=SYSTEM_PROMPT,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        usage = usage_metadata([(self.model, response.input_tokens, response.output_tokens)])
        return response.text.strip(), usage
