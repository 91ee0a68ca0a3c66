from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .collation import collation_key
from .errors import InvalidInput, MisconfiguredCategorySet
from .models import (
    Category,
    CategoryGroup,
    CategorySet,
    ClassificationResult,
    Designation,
)

logger = logging.getLogger(__name__)


def _coerce_names(names: Iterable[str] | None) -> Tuple[str, ...]:
    if names is None:
        raise InvalidInput("names must be a sequence of strings, got None")
    if isinstance(names, (str, bytes)):
        raise InvalidInput("names must be a sequence of strings, not a single string")

    snapshot = tuple(names)
    for name in snapshot:
        if not isinstance(name, str):
            raise InvalidInput(f"role names must be str, got {type(name).__name__}")
    return snapshot


def _coerce_categories(categories: CategorySet | Iterable[Category]) -> CategorySet:
    if isinstance(categories, CategorySet):
        return categories
    if categories is None:
        raise MisconfiguredCategorySet("No categories supplied")
    return CategorySet(categories)


def classify(
    names: Iterable[str],
    categories: CategorySet | Iterable[Category],
) -> ClassificationResult:
    """
    Group role names by category.

    Every category is tested against the full input independently, so a name
    may land in more than one group. Members of each group are sorted with
    :func:`collation_key`; duplicates are kept.

    :param names: Role display names; never mutated.
    :param categories: Ordered categories ending in a catch-all.
    :returns: One :class:`CategoryGroup` per category, in category order.
    :raises InvalidInput: ``names`` is ``None``, a bare string, or holds a
        non-string.
    :raises MisconfiguredCategorySet: the categories have no usable catch-all,
        or some name matched no category at all.
    """
    snapshot = _coerce_names(names)
    category_set = _coerce_categories(categories)

    hits: List[List[Category]] = [[] for _ in snapshot]
    groups: List[CategoryGroup] = []

    for category in category_set:
        selected: List[str] = []
        for idx, name in enumerate(snapshot):
            if category.matches(name):
                selected.append(name)
                hits[idx].append(category)
        selected.sort(key=collation_key)
        groups.append(CategoryGroup(label=category.label, members=tuple(selected)))

    unmatched = [name for name, matched in zip(snapshot, hits) if not matched]
    if unmatched:
        raise MisconfiguredCategorySet(
            f"{len(unmatched)} role(s) matched no category: {unmatched!r}"
        )

    # Overlap between specific categories is a predicate bug, not something to resolve here
    for name, matched in zip(snapshot, hits):
        specific = [category.label for category in matched if not category.catch_all]
        if len(specific) > 1:
            logger.warning("Role %r matches several categories: %s", name, specific)

    logger.debug(
        "classify: %d role(s) -> %s",
        len(snapshot),
        {group.label: len(group.members) for group in groups},
    )
    return ClassificationResult(groups=tuple(groups))


def classify_designations(
    designations: Iterable[Designation] | None,
    categories: CategorySet | Iterable[Category],
) -> ClassificationResult:
    """:func:`classify` over :class:`Designation` records instead of raw names."""
    if designations is None:
        raise InvalidInput("designations must be an iterable, got None")
    return classify([designation.name for designation in designations], categories)


__all__ = ["classify", "classify_designations"]
