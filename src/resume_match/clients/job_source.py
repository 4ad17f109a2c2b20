"""Job description text providers.

Every source exposes ``async fetch(identifier) -> str`` and raises
``RetrievalError`` when the identifier cannot be resolved to text. The
analysis core treats whatever string comes back as valid input.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from resume_match.errors import RetrievalError
from resume_match.parsers.jd_parser import load_jd_file, parse_jd
from resume_match.utils.url_validator import validate_url

logger = logging.getLogger(__name__)


class JobSource(Protocol):
    name: str

    async def fetch(self, identifier: str) -> str: ...


class TextJobSource:
    """Treats the identifier itself as the job description text."""

    name = "text"

    async def fetch(self, identifier: str) -> str:
        return parse_jd(identifier)


class FileJobSource:
    """Reads job description text from a local UTF-8 file."""

    name = "file"

    async def fetch(self, identifier: str) -> str:
        path = Path(identifier)
        if not path.is_file():
            raise RetrievalError(f"Job description file not found: {path}")
        try:
            return load_jd_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise RetrievalError(f"Cannot read job description file {path}: {exc}") from exc


class URLJobSource:
    """Renders a job posting with headless Chromium and returns its visible text."""

    name = "url"

    def __init__(
        self,
        timeout_ms: int = 30000,
        settle_ms: int = 2000,
        block_private_hosts: bool = True,
    ):
        self.timeout_ms = timeout_ms
        self.settle_ms = settle_ms
        self.block_private_hosts = block_private_hosts

    async def fetch(self, identifier: str) -> str:
        if self.block_private_hosts:
            validate_url(identifier)

        from playwright.async_api import Error as PlaywrightError
        from playwright.async_api import async_playwright

        logger.info("Fetching job posting: %s", identifier)
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True)
                try:
                    page = await browser.new_page()
                    await page.goto(identifier, wait_until="networkidle", timeout=self.timeout_ms)
                    # SPA job boards keep rendering after network idle
                    await page.wait_for_timeout(self.settle_ms)
                    visible_text = await page.evaluate("() => document.body.innerText")
                finally:
                    await browser.close()
        except PlaywrightError as exc:
            logger.error("Job posting fetch failed", exc_info=True)
            raise RetrievalError(f"Failed to fetch job description from {identifier}: {exc}") from exc

        text = parse_jd(visible_text or "")
        if not text:
            raise RetrievalError(f"No readable text found at {identifier}")
        return text


DEMO_SENIOR_POSTING = """\
Senior Software Engineer Position

Requirements:
- 5+ years of software development experience
- Proficiency in JavaScript, React, Node.js
- Experience with cloud platforms (AWS, Azure, GCP)
- Strong understanding of microservices architecture
- Experience with Docker and Kubernetes
- Knowledge of CI/CD pipelines
- Excellent communication and leadership skills
- Bachelor's degree in Computer Science or related field

Responsibilities:
- Lead development of scalable web applications
- Mentor junior developers
- Architect and design system solutions
- Collaborate with cross-functional teams
- Code review and quality assurance
- Performance optimization and troubleshooting"""

DEMO_FRONTEND_POSTING = """\
Frontend Developer Position

Requirements:
- 3+ years of frontend development experience
- Expert knowledge of React, JavaScript, TypeScript
- Proficiency in HTML5, CSS3, and responsive design
- Experience with state management (Redux, Context API)
- Familiarity with testing frameworks (Jest, Cypress)
- Knowledge of build tools (Webpack, Vite)
- Understanding of web performance optimization
- Experience with version control (Git)

Responsibilities:
- Develop user-friendly web interfaces
- Implement responsive designs
- Optimize application performance
- Collaborate with designers and backend developers
- Write clean, maintainable code
- Participate in code reviews"""

DEMO_GENERAL_POSTING = """\
Software Developer Position

Requirements:
- 2+ years of programming experience
- Knowledge of modern programming languages
- Understanding of web development principles
- Experience with databases and APIs
- Problem-solving and analytical skills
- Good communication abilities
- Willingness to learn new technologies

Responsibilities:
- Develop and maintain software applications
- Debug and troubleshoot issues
- Participate in team meetings and planning
- Write technical documentation
- Follow coding best practices"""


class DemoJobSource:
    """Offline stand-in for URL fetching that picks a canned posting by URL keywords."""

    name = "demo"

    async def fetch(self, identifier: str) -> str:
        if not identifier:
            raise RetrievalError("Failed to fetch job description: empty URL")
        if "senior" in identifier or "lead" in identifier:
            return DEMO_SENIOR_POSTING
        if "frontend" in identifier or "react" in identifier:
            return DEMO_FRONTEND_POSTING
        return DEMO_GENERAL_POSTING
