"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

REPORT_MODES = ("compact", "narrative")


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    max_retries: int = 3
    timeout: int = 120
    max_tokens: int = 4096
    temperature: float = 0.0

    def __post_init__(self) -> None:
        if not 1 <= self.max_retries <= 10:
            raise ValueError(f"max_retries must be between 1 and 10, got {self.max_retries}")
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"timeout must be between 1 and 600 seconds, got {self.timeout}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"temperature must be between 0 and 1, got {self.temperature}")


@dataclass(frozen=True)
class FetchConfig:
    timeout_ms: int = 30000
    settle_ms: int = 2000
    block_private_hosts: bool = True

    def __post_init__(self) -> None:
        if not 1000 <= self.timeout_ms <= 120000:
            raise ValueError(f"timeout_ms must be between 1000 and 120000, got {self.timeout_ms}")
        if self.settle_ms < 0:
            raise ValueError(f"settle_ms must not be negative, got {self.settle_ms}")


@dataclass(frozen=True)
class ReportConfig:
    default_mode: str = "compact"
    trailer_token: str = "---"

    def __post_init__(self) -> None:
        if self.default_mode not in REPORT_MODES:
            raise ValueError(
                f"default_mode must be one of {', '.join(REPORT_MODES)}, got {self.default_mode!r}"
            )


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        fetch=FetchConfig(**raw.get("fetch", {})),
        report=ReportConfig(**raw.get("report", {})),
    )
