import logging
from typing import Any

PII_FIELDS = ("email", "phone", "full_name", "password", "token", "api_key")
REDACTED = "[REDACTED]"


def redact_pii(data: Any) -> Any:
    """
    Copy of `data` with every value under a PII-looking key replaced.
    Keys match case-insensitively by substring, so "user_email" is redacted too.
    """
    if isinstance(data, list):
        return [redact_pii(item) for item in data]
    if not isinstance(data, dict):
        return data

    redacted = {}
    for key, value in data.items():
        if any(field in str(key).lower() for field in PII_FIELDS):
            redacted[key] = REDACTED
        else:
            redacted[key] = redact_pii(value)
    return redacted


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
