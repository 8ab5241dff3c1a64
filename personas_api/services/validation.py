# personas_api/services/validation.py

"""
Create-time rule set for personas.

Rules are plain data evaluated in declaration order against a candidate
payload. Only the first violation is reported, which is what the HTTP
layer returns as the error ``description``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

IDENTITY_NUMBER_REQUIRED = "El campo CedulaIdentidad no debe estar vacio, favor verifique"
FIRST_NAME_REQUIRED = "El campo Nombre no debe estar vacio, favor verifique."


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


@dataclass(frozen=True)
class NotEmptyRule:
    """A field that must be present and not blank."""

    field: str
    message: str

    def check(self, candidate: Any) -> Optional[str]:
        """Return the rule's message if ``candidate`` violates it, else None."""
        if _is_blank(getattr(candidate, self.field, None)):
            return self.message
        return None


CREATE_RULES: Tuple[NotEmptyRule, ...] = (
    NotEmptyRule("identity_number", IDENTITY_NUMBER_REQUIRED),
    NotEmptyRule("first_name", FIRST_NAME_REQUIRED),
)


def first_violation(candidate: Any, rules: Iterable[NotEmptyRule] = CREATE_RULES) -> Optional[str]:
    """
    Evaluate ``rules`` in order and return the first failing message.
    """
    for rule in rules:
        message = rule.check(candidate)
        if message is not None:
            return message
    return None


__all__ = [
    "IDENTITY_NUMBER_REQUIRED",
    "FIRST_NAME_REQUIRED",
    "NotEmptyRule",
    "CREATE_RULES",
    "first_violation",
]
