"""Normalization of job description text from files and rendered pages."""

from __future__ import annotations

import re
from pathlib import Path

_INVISIBLE_CHARS = re.compile(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]")
_BULLETS = re.compile(r"^[●•◦◆■▪★○]\s*", flags=re.MULTILINE)


def parse_jd(text: str) -> str:
    """Clean and normalize job description text.

    Removes invisible unicode artifacts, turns decorative bullets into
    ``-`` bullets, collapses runs of spaces and tabs and limits blank lines
    to one.
    """
    text = _INVISIBLE_CHARS.sub("", text)
    text = text.replace("\u00a0", " ")
    lines = [re.sub(r"[ \t]+", " ", line).strip() for line in text.splitlines()]
    text = _BULLETS.sub("- ", "\n".join(lines))
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def load_jd_file(file_path: str | Path) -> str:
    """Load JD from a UTF-8 text file."""
    return parse_jd(Path(file_path).read_text(encoding="utf-8"))
