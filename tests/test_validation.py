# -*- coding: Utf-8 -*-

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any

from autoviv.validation import is_numeric_key, parse_numeric_key

import pytest


class TestParseNumericKey:
    @pytest.mark.parametrize(
        ["key", "expected_number"],
        [
            pytest.param(0, 0),
            pytest.param(10, 10),
            pytest.param(-3, -3),
            pytest.param(2.5, 2.5),
            pytest.param(Fraction(3, 2), 1.5),
            pytest.param(Decimal("4"), 4),
            pytest.param("10", 10),
            pytest.param(" 42 ", 42),
            pytest.param("-7", -7),
            pytest.param("3.5", 3.5),
            pytest.param("1e3", 1000.0),
        ],
        ids=repr,
    )
    def test____parse_numeric_key____valid_number(self, key: Any, expected_number: int | float) -> None:
        # Arrange

        # Act
        number = parse_numeric_key(key)

        # Assert
        assert number == expected_number
        assert type(number) is type(expected_number)
        assert is_numeric_key(key)

    @pytest.mark.parametrize(
        "key",
        [
            pytest.param(True),
            pytest.param(False),
            pytest.param(None),
            pytest.param(""),
            pytest.param("foo"),
            pytest.param("10abc"),
            pytest.param("nan"),
            pytest.param("inf"),
            pytest.param("-Infinity"),
            pytest.param(float("nan")),
            pytest.param(float("inf")),
            pytest.param(("tuple",)),
            pytest.param(object()),
        ],
        ids=repr,
    )
    def test____parse_numeric_key____not_a_number(self, key: Any) -> None:
        # Arrange

        # Act
        number = parse_numeric_key(key)

        # Assert
        assert number is None
        assert not is_numeric_key(key)
