"""Tests for options-map helpers."""

from with_validations import extract_options, remove_keys, retain_keys


class TestRemoveKeys:
    def test_removes_in_place(self):
        d = {"a": 1, "b": 2, "c": 3}
        result = remove_keys(d, "a", "c")
        assert result is d
        assert d == {"b": 2}

    def test_missing_keys_ignored(self):
        d = {"a": 1}
        assert remove_keys(d, "x", "y") == {"a": 1}

    def test_no_keys(self):
        d = {"a": 1}
        assert remove_keys(d) == {"a": 1}


class TestRetainKeys:
    def test_returns_copy(self):
        d = {"a": 1, "b": 2, "c": 3}
        result = retain_keys(d, "a", "b")
        assert result == {"a": 1, "b": 2}
        assert result is not d
        assert d == {"a": 1, "b": 2, "c": 3}

    def test_order_follows_source(self):
        d = {"a": 1, "b": 2, "c": 3}
        assert list(retain_keys(d, "c", "a")) == ["a", "c"]

    def test_missing_keys_skipped(self):
        assert retain_keys({"a": 1}, "a", "z") == {"a": 1}
        assert retain_keys({"a": 1}) == {}


class TestExtractOptions:
    def test_extract(self):
        options = {"a": "a", "b": "b", "c": "c", "d": "d", "e": "e"}
        assert extract_options(["b", "c", "d", "z"], options) == {"b": "b", "c": "c", "d": "d"}

    def test_no_validation(self):
        options = {"compact": "not a boolean", "other": 1}
        assert extract_options(["compact"], options) == {"compact": "not a boolean"}

    def test_source_untouched(self):
        options = {"a": 1, "b": 2}
        extract_options(["a"], options)
        assert options == {"a": 1, "b": 2}

    def test_single_string_key(self):
        options = {"compact": 1, "c": 2, "o": 3}
        assert extract_options("compact", options) == {"compact": 1}

    def test_single_non_iterable_key(self):
        assert extract_options(7, {7: "seven", 8: "eight"}) == {7: "seven"}

    def test_keys_view(self):
        defaults = {"delimiter": ",", "quotechar": '"'}
        options = {"delimiter": ";", "compact": True}
        assert extract_options(defaults.keys(), options) == {"delimiter": ";"}
