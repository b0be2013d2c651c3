"""classvariance model layer -- public type re-exports."""

from classvariance.model.config import CLASS_KEYS, CompoundRule, VariantConfig
from classvariance.model.diagnostic import Diagnostic, Severity

__all__ = [
    # config
    "CLASS_KEYS",
    "CompoundRule",
    "VariantConfig",
    # diagnostic
    "Severity",
    "Diagnostic",
]
