"""Structured logging setup - PII redaction so synthetic identities never land in logs."""

from __future__ import annotations

import logging
import re
import sys

# Synthetic, but shaped like real PII: log only IDs and counts.
PII_REDACT_KEYS = frozenset(
    {
        "customer_name",
        "customernameeng",
        "customernameben",
        "name",
        "dob",
        "dateofbirth",
        "date_of_birth",
        "nationality",
        "address",
        "account_number",
        "accountnumber",
    }
)
PII_KEY_PATTERN = re.compile(
    r"(\b" + "|".join(re.escape(k) for k in PII_REDACT_KEYS) + r")[\s=:]+[^\s,\)\]]+",
    re.IGNORECASE,
)


def _redact_message(msg: str) -> str:
    """Replace PII key=value or key: value in message with [REDACTED]."""
    if not isinstance(msg, str):
        return str(msg)
    return PII_KEY_PATTERN.sub(r"\1=[REDACTED]", msg)


class PIIRedactionFilter(logging.Filter):
    """Filter that redacts PII from log records (message and args)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = _redact_message(record.msg)
        if getattr(record, "args", None) and isinstance(record.args, tuple | dict):
            if isinstance(record.args, tuple):
                record.args = tuple(
                    a if isinstance(a, int | float) else _redact_message(str(a))
                    for a in record.args
                )
            else:
                record.args = {
                    k: "[REDACTED]" if k.lower() in PII_REDACT_KEYS else v
                    for k, v in record.args.items()
                }
        return True


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logger on stderr (stdout carries generated JSON), PII redaction filter."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
        stream=sys.stderr,
        force=True,
    )
    # on the handler so records propagated from child loggers are redacted too
    for handler in logging.getLogger().handlers:
        handler.addFilter(PIIRedactionFilter())
    logging.getLogger("faker").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for module `name` (PII redaction applied by the root handlers)."""
    return logging.getLogger(name)
