from __future__ import annotations

import re

# Ordered: an OAuth client secret assignment swallows the rest of the line,
# since Google secrets may contain separators the generic patterns stop at.
_SECRET_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"(?i)(client[_-]?secret)\s*[:=]\s*(.+)"),
    re.compile(r"(?i)(api[_-]?key|token|password)\s*[:=]\s*([^\s,;]+)"),
    re.compile(r"(?i)\b(bearer)\s+([a-z0-9\-\._~\+\/]+=*)"),
    re.compile(r"(GOCSPX)-([A-Za-z0-9_\-]+)"),
]


def redact(text: str) -> str:
    """Mask credential values in text bound for logs, keeping the names."""
    redacted = text
    for pat in _SECRET_PATTERNS:
        redacted = pat.sub(lambda m: f"{m.group(1)} [REDACTED]", redacted)
    return redacted
