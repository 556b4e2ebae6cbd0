"""Placeholder name normalisation."""

from __future__ import annotations


def _numeric_suffix_start(name: str) -> int:
    """Return the index where trailing ``_<digits>`` groups begin."""

    suffix_start = len(name)
    while suffix_start > 0:
        number_start = suffix_start
        while number_start > 0 and name[number_start - 1].isdigit():
            number_start -= 1
        if 0 < number_start < suffix_start and name[number_start - 1] == "_":
            suffix_start = number_start - 1
        else:
            break
    return suffix_start


def upper_underscore_to_lower_camel(name: str) -> str:
    """Convert ``UPPER_UNDERSCORE`` words into ``lowerCamel`` form."""

    words = name.split("_")
    head, tail = words[0], words[1:]
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in tail)


def to_lower_camel_case_with_numeric_suffixes(name: str) -> str:
    """Normalise a placeholder token, keeping ``_<digits>`` suffixes intact.

    ``USER_NAME`` becomes ``userName`` and ``START_LINK_1_2`` becomes
    ``startLink_1_2``.
    """

    suffix_start = _numeric_suffix_start(name)
    return upper_underscore_to_lower_camel(name[:suffix_start]) + name[suffix_start:]
