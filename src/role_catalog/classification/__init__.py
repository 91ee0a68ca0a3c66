"""Role classification engine: ordered categories in, sorted groups out."""

from .classifier import classify, classify_designations
from .collation import collation_key
from .errors import ClassificationError, InvalidInput, MisconfiguredCategorySet
from .models import (
    Category,
    CategoryGroup,
    CategorySet,
    ClassificationResult,
    Designation,
    remainder,
)
from .predicates import DEFAULT_CATEGORIES

__all__ = [
    "classify",
    "classify_designations",
    "collation_key",
    "ClassificationError",
    "InvalidInput",
    "MisconfiguredCategorySet",
    "Category",
    "CategoryGroup",
    "CategorySet",
    "ClassificationResult",
    "Designation",
    "remainder",
    "DEFAULT_CATEGORIES",
]
