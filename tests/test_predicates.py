"""Tests for with_validations.predicates."""

import pytest

from with_validations import between, is_boolean, is_optional, is_type, matches, one_of


class TestIsBoolean:
    @pytest.mark.parametrize("value", [True, False])
    def test_booleans(self, value):
        assert is_boolean(value) is True

    @pytest.mark.parametrize("value", ["true", "false", 1, 0, None, [], "", 1.0])
    def test_surrogates(self, value):
        assert is_boolean(value) is False


class TestFactories:
    def test_one_of(self):
        check = one_of("short", "average", "long")
        assert check("short")
        assert not check("tiny")
        assert not check(None)

    def test_one_of_is_type_exact(self):
        assert not one_of(1)(True)
        assert one_of(True)(True)

    def test_is_type(self):
        check = is_type(int)
        assert check(8)
        assert not check("8")
        assert not check(True)

    def test_is_type_with_bool(self):
        assert is_type(int, bool)(True)
        assert is_type(bool)(False)

    def test_between(self):
        check = between(0, 10)
        assert check(0)
        assert check(10)
        assert not check(11)
        assert not check("5")

    def test_between_exclusive(self):
        check = between(0, 10, inclusive=False)
        assert check(5)
        assert not check(0)
        assert not check(10)

    def test_matches(self):
        check = matches(r"^[a-z_]+$")
        assert check("with_pinyin")
        assert not check("WithPinyin")
        assert not check(3)

    def test_is_optional(self):
        check = is_optional(is_type(int))
        assert check(None)
        assert check(4)
        assert not check("4")
