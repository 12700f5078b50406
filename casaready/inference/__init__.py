# This project was developed with assistance from AI tools.
"""Inference module -- LLM client and the AI report writer."""

from .client import get_completion
from .report_writer import AIReportError, AIReportWriter

__all__ = [
    "AIReportError",
    "AIReportWriter",
    "get_completion",
]
