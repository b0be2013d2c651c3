"""classvariance - class variance resolution for CSS class names."""

from classvariance.classnames import combine_classes, to_class_string
from classvariance.model import CompoundRule, Diagnostic, Severity, VariantConfig
from classvariance.resolver import CVA, cva

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CVA",
    "cva",
    "CompoundRule",
    "VariantConfig",
    "Diagnostic",
    "Severity",
    "combine_classes",
    "to_class_string",
]
