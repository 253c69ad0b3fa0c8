"""Shared utility functions for MockMate."""

import logging
import re
from datetime import date

_FENCE_RE = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    """Remove every markdown code-fence marker from an LLM response."""
    return _FENCE_RE.sub("", text).strip()


def format_created_at(day: date | None = None) -> str:
    """Format a date as day/month/year (``dd/mm/yyyy``)."""
    return (day or date.today()).strftime("%d/%m/%Y")


def configure_logging(level: str = "INFO") -> None:
    """Apply the process-wide logging format and level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
