"""Unit tests for search condition data classes."""

from __future__ import annotations

import dataclasses

import pytest

from mysql_fulltext.search.conditions import Condition, Operator


class TestOperator:
    def test_boolean_mode_symbols(self) -> None:
        assert Operator.MUST_INCLUDE.value == "+"
        assert Operator.EXCLUDE.value == "-"
        assert Operator.PREFER_WITHOUT.value == "~"
        assert Operator.CAN_INCLUDE.value == ""

    def test_lookup_by_symbol(self) -> None:
        assert Operator("~") is Operator.PREFER_WITHOUT


class TestCondition:
    def test_str_prefixes_operator(self) -> None:
        assert str(Condition(Operator.MUST_INCLUDE, "cat")) == "+cat"
        assert str(Condition(Operator.CAN_INCLUDE, "cat")) == "cat"

    def test_frozen(self) -> None:
        condition = Condition(Operator.EXCLUDE, "dog")
        with pytest.raises(dataclasses.FrozenInstanceError):
            condition.term = "cat"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Condition(Operator.EXCLUDE, "dog") == Condition(Operator.EXCLUDE, "dog")
        assert Condition(Operator.EXCLUDE, "dog") != Condition(Operator.PREFER_WITHOUT, "dog")
