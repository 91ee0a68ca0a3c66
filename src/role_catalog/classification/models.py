"""Dataclass models for role classification.

A :class:`CategorySet` is the declarative replacement for a chain of ad hoc
``isX(name)`` checks: an ordered, validated tuple of :class:`Category` entries
whose final member is a catch-all. :func:`~.classifier.classify` walks it and
produces a :class:`ClassificationResult`:

```
ClassificationResult(groups=(
    CategoryGroup(label="Pronouns", members=("he/him", "they/them")),
    CategoryGroup(label="Miscellaneous", members=("CS 121",)),
))
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

from .errors import MisconfiguredCategorySet

Predicate = Callable[[str], bool]

# Names that no sensible non-catch-all predicate accepts. The terminal
# category must take whichever of these the earlier categories leave behind.
_PROBE_NAMES: Tuple[str, ...] = ("", " ", "\x00", "unmatched designation 0")


@dataclass(frozen=True, slots=True)
class Designation:
    """A role a user may self-assign. Only the display name matters."""

    name: str


@dataclass(frozen=True, slots=True)
class Category:
    """A labelled group of roles defined by a membership predicate."""

    label: str
    predicate: Predicate = field(compare=False)
    sort_key: int = 0
    catch_all: bool = False

    def matches(self, name: str) -> bool:
        return bool(self.predicate(name))


def remainder(label: str, preceding: Iterable[Category], sort_key: int = 0) -> Category:
    """
    Build a catch-all category accepting every name ``preceding`` rejects.

    :param label: Display label of the catch-all.
    :param preceding: Categories checked before the catch-all.
    :param sort_key: Ordering key; keep it at or above the preceding keys.
    :returns: A :class:`Category` flagged as ``catch_all``.
    """
    earlier = tuple(preceding)

    def _unmatched(name: str) -> bool:
        return not any(category.matches(name) for category in earlier)

    return Category(label=label, predicate=_unmatched, sort_key=sort_key, catch_all=True)


class CategorySet:
    """
    Immutable, validated, ordered sequence of categories.

    Categories keep the order they are declared in. ``sort_key`` records that
    rank and must not decrease along the declaration. Construction raises
    :class:`MisconfiguredCategorySet` when the set is empty, has duplicate
    labels, is declared out of ``sort_key`` order, or lacks a terminal
    catch-all.
    """

    __slots__ = ("_categories",)

    def __init__(self, categories: Iterable[Category]) -> None:
        declared = tuple(categories)
        _validate(declared)
        self._categories: Tuple[Category, ...] = declared

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __getitem__(self, index: int) -> Category:
        return self._categories[index]

    def __repr__(self) -> str:
        return f"CategorySet({list(self.labels)!r})"

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(category.label for category in self._categories)

    @property
    def catch_all(self) -> Category:
        return self._categories[-1]


def _validate(categories: Tuple[Category, ...]) -> None:
    if not categories:
        raise MisconfiguredCategorySet("Category set is empty; a catch-all is required")

    seen: set[str] = set()
    for category in categories:
        if category.label in seen:
            raise MisconfiguredCategorySet(f"Duplicate category label {category.label!r}")
        seen.add(category.label)

    for before, after in zip(categories, categories[1:]):
        if after.sort_key < before.sort_key:
            raise MisconfiguredCategorySet(
                f"Category {after.label!r} (sort_key {after.sort_key}) is declared after "
                f"{before.label!r} (sort_key {before.sort_key})"
            )

    *leading, last = categories
    if not last.catch_all:
        raise MisconfiguredCategorySet(
            f"Last category {last.label!r} is not a catch-all; unmatched roles would be dropped"
        )

    misplaced = [category.label for category in leading if category.catch_all]
    if misplaced:
        raise MisconfiguredCategorySet(
            f"Catch-all categories must come last, found {misplaced!r} earlier"
        )

    for probe in _PROBE_NAMES:
        if any(category.matches(probe) for category in leading):
            continue
        if not last.matches(probe):
            raise MisconfiguredCategorySet(
                f"Catch-all {last.label!r} rejects {probe!r}, which no other category accepts"
            )


@dataclass(frozen=True, slots=True)
class CategoryGroup:
    """One category's sorted members."""

    label: str
    members: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Per-category grouping of role names, in category order."""

    groups: Tuple[CategoryGroup, ...] = ()

    def __iter__(self) -> Iterator[CategoryGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(group.label for group in self.groups)

    def members(self, label: str) -> Tuple[str, ...]:
        """Return the members of ``label``; raises ``KeyError`` if unknown."""
        for group in self.groups:
            if group.label == label:
                return group.members
        raise KeyError(label)

    def to_dict(self) -> Dict[str, List[str]]:
        return {group.label: list(group.members) for group in self.groups}


__all__ = [
    "Predicate",
    "Designation",
    "Category",
    "CategorySet",
    "CategoryGroup",
    "ClassificationResult",
    "remainder",
]
