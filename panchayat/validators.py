"""Configurable voter validation."""

from collections.abc import Callable, Mapping
from numbers import Real
from typing import Any

from panchayat.models import ValidationResult, ValidationRules, Voter

DEFAULT_RULES = ValidationRules()

Validator = Callable[[Voter | Mapping[str, Any] | None], ValidationResult]


def create_vote_validator(rules: ValidationRules | Mapping[str, Any] = DEFAULT_RULES) -> Validator:
    """Build a validator for voter records from a set of rules.

    The returned function marks a voter invalid when their age is below
    ``rules.min_age`` or when any of ``rules.required_fields`` is missing.
    Only a missing field produces a reason; when several are missing the
    reason names the last one. Being under age makes the voter invalid
    without a reason.

    Example:
        >>> validate = create_vote_validator({"min_age": 18, "required_fields": ["id", "name", "age"]})
        >>> validate({"id": "V1", "age": 30})
        ValidationResult(valid=False, reason='Field: name not present.')
    """
    if not isinstance(rules, ValidationRules):
        rules = ValidationRules.from_dict(rules)

    def validate(voter: Voter | Mapping[str, Any] | None) -> ValidationResult:
        if isinstance(voter, Voter):
            voter = voter.to_dict()
        elif not isinstance(voter, Mapping):
            # nothing to read fields from, so every required field is missing
            voter = {}

        valid = True
        reason = ""

        age = voter.get("age")
        if isinstance(age, Real) and age < rules.min_age:
            valid = False

        for field_name in rules.required_fields:
            if field_name not in voter:
                valid = False
                reason = f"Field: {field_name} not present."

        return ValidationResult(valid=valid, reason=reason)

    return validate
