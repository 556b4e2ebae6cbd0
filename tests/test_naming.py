from __future__ import annotations

import pytest

from pobundle.naming import to_lower_camel_case_with_numeric_suffixes


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("n", "n"),
        ("NAME", "name"),
        ("USER_NAME", "userName"),
        ("PH_1", "ph_1"),
        ("START_LINK_1_2", "startLink_1_2"),
        ("LINK2", "link2"),
        ("1", "1"),
        ("", ""),
    ],
)
def test_to_lower_camel_case_with_numeric_suffixes(token, expected):
    assert to_lower_camel_case_with_numeric_suffixes(token) == expected
