"""
Field-level checks for player records.

Every ``validate_*`` helper returns the normalized value or raises ``ValueError``;
``validate_create`` / ``validate_update`` run the helpers over a payload and
collect all violations into one ``ValidationError`` so clients see every
problem at once, in a fixed order.
"""
from __future__ import annotations

import re
from typing import Any, Callable

from .errors import StructuralError, ValidationError
from .models import Gender, Role

MIN_AGE = 17
MAX_AGE = 59

MIN_PASSWORD_LENGTH = 7
MAX_PASSWORD_LENGTH = 15

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_ID_RE = re.compile(r"^[0-9]+$")
_DIGIT_RE = re.compile(r"[0-9]")

# ids are sqlite INTEGER primary keys (signed 64-bit)
MAX_PLAYER_ID = 2**63 - 1


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("not an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INT_RE.match(value.strip()):
        return int(value.strip())
    raise ValueError("not an integer")


def validate_age(value: Any) -> int:
    age = _as_int(value)
    if age < MIN_AGE or age > MAX_AGE:
        raise ValueError(f"age must be between {MIN_AGE} and {MAX_AGE}")
    return age


def validate_password(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("password must be a string")
    if not MIN_PASSWORD_LENGTH <= len(value) <= MAX_PASSWORD_LENGTH:
        raise ValueError(f"password must be {MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH} characters")
    if not _DIGIT_RE.search(value):
        raise ValueError("password must contain a digit")
    return value


def validate_gender(value: Any) -> str:
    g = Gender.parse(value)
    if g is None:
        raise ValueError("gender must be 'male' or 'female'")
    return g.value


def validate_role(value: Any) -> str:
    r = Role.parse(value)
    if r is None:
        raise ValueError("role must be one of supervisor, admin, user")
    return r.value


def _non_empty(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("must be a non-empty string")
    return value


validate_login = _non_empty
validate_screen_name = _non_empty


# (wire name, model attribute, check, error code), in reporting order
FIELD_CHECKS: list[tuple[str, str, Callable[[Any], Any], str]] = [
    ("login", "login", validate_login, "InvalidLogin"),
    ("age", "age", validate_age, "InvalidAge"),
    ("password", "password", validate_password, "InvalidPassword"),
    ("gender", "gender", validate_gender, "InvalidGender"),
    ("role", "role", validate_role, "InvalidRole"),
    ("screenName", "screen_name", validate_screen_name, "InvalidScreenName"),
]

IMMUTABLE_FIELDS = ("login",)


def _run_checks(fields: dict[str, Any], *, require_all: bool, skip: tuple[str, ...] = ()) -> tuple[dict[str, Any], list[str]]:
    clean: dict[str, Any] = {}
    errors: list[str] = []
    for wire, attr, check, code in FIELD_CHECKS:
        if wire in skip:
            continue
        if wire not in fields:
            if require_all:
                errors.append(code)
            continue
        try:
            clean[attr] = check(fields[wire])
        except ValueError:
            errors.append(code)
    return clean, errors


def validate_create(fields: dict[str, Any]) -> dict[str, Any]:
    """Full field set required. Unknown keys are ignored."""
    clean, errors = _run_checks(fields, require_all=True)
    if errors:
        raise ValidationError(errors)
    return clean


def validate_update(fields: dict[str, Any]) -> dict[str, Any]:
    """
    Only supplied keys are checked. Supplying an immutable field at all,
    even with its current value, fails the whole update.
    """
    errors = ["ImmutableFieldViolation" for f in IMMUTABLE_FIELDS if f in fields]
    clean, field_errors = _run_checks(fields, require_all=False, skip=IMMUTABLE_FIELDS)
    errors.extend(field_errors)
    if errors:
        raise ValidationError(errors)
    return clean


def parse_player_id(raw: Any) -> int:
    """Ids are positive 64-bit integers; digit-only strings are accepted too."""
    if isinstance(raw, bool) or raw is None:
        raise StructuralError("Malformed player id", ["MalformedId"])
    if isinstance(raw, int):
        pid = raw
    elif isinstance(raw, str) and _ID_RE.match(raw.strip()):
        pid = int(raw.strip())
    else:
        raise StructuralError("Malformed player id", ["MalformedId"])
    if pid <= 0 or pid > MAX_PLAYER_ID:
        raise StructuralError("Malformed player id", ["MalformedId"])
    return pid
