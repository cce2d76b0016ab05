"""Tests for the scalar value types: Real, Token and Quote."""

from __future__ import annotations

import math

import pytest

from vdmrt import Quote, Real, Token, mk_token, quote, set_of


class TestReal:
    def test_add(self) -> None:
        assert Real(0.15) + Real(0.15) == Real(0.3)

    def test_floor(self) -> None:
        assert Real(1.23).floor() == 1
        assert Real(-1.23).floor() == -2

    def test_arithmetic(self) -> None:
        assert Real(3.0) - Real(1.0) == Real(2.0)
        assert Real(3.0) * 2 == Real(6.0)
        assert Real(3.0) / Real(2.0) == Real(1.5)
        assert -Real(1.5) == Real(-1.5)
        assert 1 + Real(0.5) == Real(1.5)

    def test_abs_and_pow(self) -> None:
        assert Real(-1.5).abs() == Real(1.5)
        assert Real(2.0).pow(Real(3.0)) == Real(8.0)

    def test_ordering(self) -> None:
        assert Real(1.0) < Real(2.0)
        assert Real(2.0) >= Real(2.0)
        assert sorted([Real(3.0), Real(-1.0), Real(0.0)]) == [
            Real(-1.0), Real(0.0), Real(3.0)
        ]

    def test_not_equal_to_plain_numbers(self) -> None:
        assert Real(1.0) != 1.0

    def test_bits(self) -> None:
        assert Real(1.0).bits() == 0x3FF0_0000_0000_0000

    def test_signed_zero_hashes_equally(self) -> None:
        assert Real(0.0) == Real(-0.0)
        assert hash(Real(0.0)) == hash(Real(-0.0))

    def test_set_membership(self) -> None:
        s = set_of(Real(0.1), Real(0.1), Real(0.2))
        assert s.cardinality() == 2
        assert Real(0.2) in s

    def test_conversions(self) -> None:
        assert float(Real(2.5)) == 2.5
        assert int(Real(2.5)) == 2
        assert math.ceil(Real(2.5)) == 3
        assert Real(3).value == 3.0

    def test_str(self) -> None:
        assert str(Real(2.0)) == "2"
        assert str(Real(2.5)) == "2.5"
        assert repr(Real(2.0)) == "2.0"

    def test_immutable(self) -> None:
        r = Real(1.0)
        with pytest.raises(AttributeError):
            r.value = 2.0  # type: ignore[misc]


class TestToken:
    def test_equality(self) -> None:
        assert Token("RED") == Token("RED")

    def test_inequality(self) -> None:
        assert Token("RED") != Token("BLUE")

    def test_str(self) -> None:
        assert str(Token("RED")) == "mk_token(RED)"

    def test_wraps_any_value_by_text(self) -> None:
        assert mk_token(5) == Token("5")
        assert str(mk_token(5)) == "mk_token(5)"


class TestQuote:
    def test_equality_and_str(self) -> None:
        assert quote("RED") == Quote("RED")
        assert quote("RED") != Quote("BLUE")
        assert str(Quote("RED")) == "<RED>"

    def test_usable_as_member(self) -> None:
        assert set_of(quote("A"), quote("A"), quote("B")).cardinality() == 2
