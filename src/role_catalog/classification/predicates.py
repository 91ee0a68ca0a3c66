"""
Category predicates for self-assignable roles.

Every predicate takes a role's display name and returns ``bool``. They are
pure and total: no I/O, no state, no exceptions for any ``str`` input.
Letters match case-insensitively; course codes must match the whole
``SUBJECT NNN`` pattern so that e.g. ``"Mathletes"`` is not a math course.
"""

from __future__ import annotations

import re
from typing import FrozenSet, Iterable

from .models import Category, CategorySet, remainder

# --------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------- #


def _course_pattern(subjects: Iterable[str]) -> re.Pattern[str]:
    """Anchored ``SUBJECT NNN[x]`` pattern, e.g. ``CS 121`` or ``Math 235h``."""
    alternatives = "|".join(re.escape(subject) for subject in subjects)
    return re.compile(rf"^(?:{alternatives}) \d{{3}}[a-z]?$", re.IGNORECASE | re.ASCII)


def _folded(names: Iterable[str]) -> FrozenSet[str]:
    return frozenset(name.casefold() for name in names)


def _key(name: str) -> str:
    return name.strip().casefold()


# --------------------------------------------------------------------- #
#  Vocabulary
# --------------------------------------------------------------------- #

_PRONOUN_WORDS = _folded(
    [
        "she", "her", "hers",
        "he", "him", "his",
        "they", "them", "theirs",
        "xe", "xem", "xyr",
        "ze", "zir", "hir",
        "it", "its",
        "any", "all",
    ]
)
_PRONOUN_MENTION_RE = re.compile(r"\bpronouns?\b", re.IGNORECASE)

_GRAD_CLASS_RE = re.compile(r"^class of (?:19|20)\d{2}$", re.IGNORECASE | re.ASCII)
_GRAD_YEAR_RE = re.compile(r"^(?:19|20)\d{2}$", re.ASCII)
_GRAD_STATUSES = _folded(
    [
        "Alumni",
        "Alumnus",
        "Graduate Student",
        "Grad Student",
        "Undergraduate",
        "Prospective Student",
        "Transfer Student",
    ]
)

_RESIDENTIAL_AREAS = _folded(
    [
        "Central",
        "Northeast",
        "Orchard Hill",
        "Southwest",
        "Sylvan",
        "Honors College",
        "CHC",
        "North Apartments",
        "Off Campus",
        "Off-Campus",
        "Commuter",
    ]
)

_CS_COURSE_RE = _course_pattern(["CS", "CompSci", "CICS"])
_MATH_COURSE_RE = _course_pattern(["Math", "Stats", "Stat"])
_INTERDISCIPLINARY_COURSE_RE = _course_pattern(
    ["INFO", "ECE", "Ling", "Phil", "Physics", "Econ"]
)
_INTERDISCIPLINARY_PROGRAMS = _folded(
    ["Informatics", "Data Science", "Cognitive Science"]
)

# --------------------------------------------------------------------- #
#  Predicates
# --------------------------------------------------------------------- #


def is_pronoun(name: str) -> bool:
    """``she/her``, ``he/they``, ``xe/xem/xyr`` or anything naming pronouns."""
    if _PRONOUN_MENTION_RE.search(name):
        return True
    parts = _key(name).split("/")
    return 2 <= len(parts) <= 3 and all(part in _PRONOUN_WORDS for part in parts)


def is_graduation_status(name: str) -> bool:
    key = name.strip()
    if _GRAD_CLASS_RE.match(key) or _GRAD_YEAR_RE.match(key):
        return True
    return key.casefold() in _GRAD_STATUSES


def is_residential(name: str) -> bool:
    return _key(name) in _RESIDENTIAL_AREAS


def is_cs_class(name: str) -> bool:
    return bool(_CS_COURSE_RE.match(name.strip()))


def is_math_class(name: str) -> bool:
    return bool(_MATH_COURSE_RE.match(name.strip()))


def is_interdisciplinary(name: str) -> bool:
    if _INTERDISCIPLINARY_COURSE_RE.match(name.strip()):
        return True
    return _key(name) in _INTERDISCIPLINARY_PROGRAMS


# --------------------------------------------------------------------- #
#  Default category set
# --------------------------------------------------------------------- #

PRONOUNS = Category("Pronouns", is_pronoun, sort_key=0)
GRADUATION = Category("Graduating Class or Graduation Status", is_graduation_status, sort_key=1)
RESIDENTIAL = Category("Residential Areas", is_residential, sort_key=2)
CS_COURSES = Category("Computer Science Courses", is_cs_class, sort_key=3)
MATH_COURSES = Category("Math Courses", is_math_class, sort_key=4)
INTERDISCIPLINARY = Category("Interdisciplinary", is_interdisciplinary, sort_key=5)

_SPECIFIC = (PRONOUNS, GRADUATION, RESIDENTIAL, CS_COURSES, MATH_COURSES, INTERDISCIPLINARY)

MISCELLANEOUS = remainder("Miscellaneous", _SPECIFIC, sort_key=6)


def is_misc(name: str) -> bool:
    return MISCELLANEOUS.matches(name)


DEFAULT_CATEGORIES = CategorySet([*_SPECIFIC, MISCELLANEOUS])


__all__ = [
    "is_pronoun",
    "is_graduation_status",
    "is_residential",
    "is_cs_class",
    "is_math_class",
    "is_interdisciplinary",
    "is_misc",
    "PRONOUNS",
    "GRADUATION",
    "RESIDENTIAL",
    "CS_COURSES",
    "MATH_COURSES",
    "INTERDISCIPLINARY",
    "MISCELLANEOUS",
    "DEFAULT_CATEGORIES",
]
