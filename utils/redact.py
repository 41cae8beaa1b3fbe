#!/usr/bin/env python3
"""
Secret Redaction Utilities
Sanitize log output so GitHub credentials never leak into CI logs
"""

import re

# Patterns for sensitive information
SENSITIVE_PATTERNS = [
    (r"(?i)(bearer\s+)([a-zA-Z0-9\-._~+/]+=*)", r"\1[REDACTED_BEARER_TOKEN]"),
    (r"(?i)(token\s+)(gh[psoru]_[a-zA-Z0-9]{16,})", r"\1[REDACTED_GITHUB_TOKEN]"),
    # GitHub tokens (ghp_, gho_, ghs_, ghr_, ghu_)
    (r"gh[psoru]_[a-zA-Z0-9]{16,}", "[REDACTED_GITHUB_TOKEN]"),
    # Fine-grained personal access tokens
    (r"github_pat_[a-zA-Z0-9_]{22,}", "[REDACTED_GITHUB_TOKEN]"),
    # URLs with secrets
    (
        r"(https?://[^/\s]*?)([?&](access_token|token|key|secret|password)=)([^&\s]+)",
        r"\1\2[REDACTED_PARAM]",
    ),
]


def redact_secrets(text: str) -> str:
    """
    Redact sensitive information from text

    Args:
        text: Text to redact

    Returns:
        Text with sensitive information replaced
    """
    if not isinstance(text, str):
        text = str(text)

    redacted_text = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        redacted_text = re.sub(pattern, replacement, redacted_text)

    return redacted_text


class RedactingFormatter:
    """
    Logging formatter that automatically redacts sensitive information
    """

    def __init__(self, base_formatter):
        self.base_formatter = base_formatter

    def format(self, record):
        formatted = self.base_formatter.format(record)
        return redact_secrets(formatted)
