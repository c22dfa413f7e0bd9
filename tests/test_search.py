"""
Tests for barkit/search.py — substring filtering.
"""

from barkit.search import filter_containing, indices_containing


_HAYSTACK = ["abc", "de", "ab", "a", "f"]


class TestFilterContaining:
    def test_single_letter_needle(self):
        assert filter_containing(_HAYSTACK, "a") == ["abc", "ab", "a"]

    def test_multi_letter_needle(self):
        assert filter_containing(_HAYSTACK, "ab") == ["abc", "ab"]

    def test_no_matches(self):
        assert filter_containing(_HAYSTACK, "z") == []

    def test_empty_needle_matches_everything(self):
        assert filter_containing(_HAYSTACK, "") == _HAYSTACK

    def test_empty_haystack(self):
        assert filter_containing([], "a") == []

    def test_case_sensitive(self):
        assert filter_containing(["Apple", "apple", "APPLE"], "app") == ["apple"]

    def test_must_be_contiguous(self):
        assert filter_containing(["a-b-c", "abc"], "abc") == ["abc"]

    def test_duplicates_kept_in_order(self):
        assert filter_containing(["xa", "b", "xa", "ya"], "a") == ["xa", "xa", "ya"]

    def test_code_point_exact(self):
        # precomposed é (U+00E9) vs e + combining acute (U+0065 U+0301)
        haystack = ["caf\u00e9", "cafe\u0301"]
        assert filter_containing(haystack, "\u00e9") == ["caf\u00e9"]

    def test_accepts_tuple_and_generator(self):
        assert filter_containing(tuple(_HAYSTACK), "d") == ["de"]
        assert filter_containing((s for s in _HAYSTACK), "f") == ["f"]

    def test_result_independent_of_later_mutation(self):
        haystack = ["abc", "de", "ab"]
        out = filter_containing(haystack, "a")
        haystack[0] = "zzz"
        haystack.clear()
        assert out == ["abc", "ab"]

    def test_returns_new_list(self):
        haystack = ["a", "ab"]
        out = filter_containing(haystack, "a")
        assert out == haystack
        assert out is not haystack


class TestIndicesContaining:
    def test_positions(self):
        assert indices_containing(_HAYSTACK, "a") == [0, 2, 3]

    def test_agrees_with_filter(self):
        idx = indices_containing(_HAYSTACK, "b")
        assert [_HAYSTACK[i] for i in idx] == filter_containing(_HAYSTACK, "b")

    def test_empty_needle(self):
        assert indices_containing(_HAYSTACK, "") == [0, 1, 2, 3, 4]
