"""Diagnostic system for backtrackparse errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import BacktrackParseError, GrammarConstructionError, NoParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BacktrackParseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "GrammarConstructionError",
    "NoParseError",
    "OutputFormat",
    "SourceSpan",
]
