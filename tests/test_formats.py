"""
Tests for seqdist.formats — adapters from Python values to MeasurableSequence.
"""

import pytest

from seqdist.core import MeasurableSequence
from seqdist.formats import GraphemeString, TokenSequence, as_measurable, graphemes


NFD_CORUNA = "Coru" + "n\u0303" + "a"


class TestGraphemes:

    def test_ascii(self):
        assert graphemes("dog") == ["d", "o", "g"]

    def test_empty(self):
        assert graphemes("") == []

    def test_combining_mark_joins_base(self):
        assert len(NFD_CORUNA) == 7
        assert len(graphemes(NFD_CORUNA)) == 6
        assert graphemes(NFD_CORUNA)[4] == "n\u0303"

    def test_crlf_is_one_cluster(self):
        assert graphemes("a\r\nb") == ["a", "\r\n", "b"]

    def test_flag_emoji_is_one_cluster(self):
        assert len(graphemes("\U0001F1EA\U0001F1F8")) == 1


class TestGraphemeString:

    def test_length_counts_graphemes(self):
        assert GraphemeString("Coruña").length() == 6
        assert GraphemeString(NFD_CORUNA).length() == 6
        assert len(GraphemeString(NFD_CORUNA)) == 6

    def test_canonically_equivalent_graphemes_equal(self):
        composed = GraphemeString("Coruña")
        decomposed = GraphemeString(NFD_CORUNA)
        assert composed.elements_equal(decomposed, 4, 4)

    def test_positional_comparison(self):
        a = GraphemeString("puppy")
        b = GraphemeString("lucky")
        assert a.elements_equal(b, 1, 1)      # u == u
        assert not a.elements_equal(b, 0, 0)  # p != l
        assert a.elements_equal(b, 4, 4)      # y == y

    def test_key_is_applied(self):
        a = GraphemeString("Madrid", key=str.casefold)
        b = GraphemeString("MADRID", key=str.casefold)
        assert all(a.elements_equal(b, i, i) for i in range(6))
        assert not GraphemeString("M").elements_equal(GraphemeString("m"), 0, 0)

    def test_other_type_compares_false(self):
        a = GraphemeString("abc")
        assert not a.elements_equal(TokenSequence("abc"), 0, 0)

    def test_str_and_repr(self):
        s = GraphemeString("A Coruña")
        assert str(s) == "A Coruña"
        assert repr(s) == "GraphemeString('A Coruña')"


class TestTokenSequence:

    def test_length(self):
        assert TokenSequence(["a", "b", "c"]).length() == 3
        assert TokenSequence([]).length() == 0

    def test_equality(self):
        a = TokenSequence(["the", "fox"])
        b = TokenSequence(["a", "fox"])
        assert not a.elements_equal(b, 0, 0)
        assert a.elements_equal(b, 1, 1)

    def test_key(self):
        a = TokenSequence(["The", "FOX"], key=str.lower)
        b = TokenSequence(["the", "fox"], key=str.lower)
        assert a.elements_equal(b, 0, 0)
        assert a.elements_equal(b, 1, 1)

    def test_other_type_compares_false(self):
        assert not TokenSequence("a").elements_equal(GraphemeString("a"), 0, 0)

    def test_repr(self):
        assert repr(TokenSequence([1, 2])) == "TokenSequence([1, 2])"
        assert repr(TokenSequence(range(10))) == "TokenSequence([0, ..., 9] len=10)"


class TestAsMeasurable:

    def test_str(self):
        assert isinstance(as_measurable("abc"), GraphemeString)

    @pytest.mark.parametrize("value", [[1, 2], (1, 2), b"ab", bytearray(b"ab")])
    def test_sequences(self, value):
        seq = as_measurable(value)
        assert isinstance(seq, TokenSequence)
        assert seq.length() == 2

    def test_passthrough(self):
        seq = GraphemeString("abc")
        assert as_measurable(seq) is seq

    def test_custom_subclass_passthrough(self):
        class Empty(MeasurableSequence):
            def length(self):
                return 0

            def elements_equal(self, other, index_in_self, index_in_other):
                return False

        seq = Empty()
        assert as_measurable(seq) is seq

    @pytest.mark.parametrize("value", [42, 3.5, None, {"a": 1}, {1, 2}])
    def test_unsupported(self, value):
        with pytest.raises(TypeError, match=type(value).__name__):
            as_measurable(value)
