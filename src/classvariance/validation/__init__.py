from classvariance.validation.validator import (
    RuleFunc,
    ValidationError,
    count_by_severity,
    validate,
    validate_or_raise,
)

__all__ = [
    "RuleFunc",
    "ValidationError",
    "count_by_severity",
    "validate",
    "validate_or_raise",
]
