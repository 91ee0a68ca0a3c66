"""Locale-independent ordering for role names."""

from __future__ import annotations

from typing import Tuple

from pyuca import Collator

# Root (DUCET) collation: whitespace, punctuation, symbols, digits, letters
_COLLATOR = Collator()


def collation_key(name: str) -> Tuple[Tuple[int, ...], str]:
    """
    Return a Unicode Collation Algorithm sort key for ``name``.

    Uses the root collation that ICU and JavaScript's ``localeCompare`` fall
    back to: punctuation and symbols (emoji included) sort before digits,
    digits before letters, accents and case only break ties, and lowercase
    comes before uppercase. Raw code points settle the rest, so two names
    only compare equal when they are identical.

    .. code-block:: python

        sorted(["b", "B", "~x", "a1", "a_"], key=collation_key)
        # ['~x', 'a_', 'a1', 'b', 'B']
    """
    return (_COLLATOR.sort_key(name), name)


__all__ = ["collation_key"]
