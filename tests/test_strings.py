from hypothesis import given
from hypothesis import strategies as st

from dsakit.strings import char_frequency, is_anagram, is_palindrome, is_subsequence

text_st = st.text(alphabet="abcdefgh", max_size=30)


def test_char_frequency_source_example():
    assert char_frequency("geeksforgeeks") == {
        "e": 4,
        "f": 1,
        "g": 2,
        "k": 2,
        "o": 1,
        "r": 1,
        "s": 2,
    }


@given(text_st)
def test_char_frequency_invariants(text):
    freq = char_frequency(text)
    assert sum(freq.values()) == len(text)
    assert list(freq) == sorted(set(text))
    assert all(count > 0 for count in freq.values())


def test_char_frequency_empty():
    assert char_frequency("") == {}


def test_is_palindrome_source_example():
    assert is_palindrome("ABBA") is True
    assert is_palindrome("ABCA") is False


@given(text_st)
def test_mirrored_text_is_palindrome(text):
    assert is_palindrome(text + text[::-1]) is True
    assert is_palindrome(text + "z" + text[::-1]) is True


def test_is_subsequence_source_example():
    assert is_subsequence("ABCDE", "ACDE") is True
    assert is_subsequence("ABCDE", "AED") is False


@given(text_st, st.data())
def test_deleting_characters_gives_subsequence(text, data):
    keep = data.draw(st.lists(st.booleans(), min_size=len(text), max_size=len(text)))
    sub = "".join(ch for ch, k in zip(text, keep) if k)
    assert is_subsequence(text, sub) is True


@given(text_st)
def test_longer_string_is_not_subsequence(text):
    assert is_subsequence(text, text + "z") is False


def test_is_anagram_source_example():
    assert is_anagram("aabca", "acaba") is True
    assert is_anagram("aabca", "acabb") is False


@given(text_st, st.randoms())
def test_shuffle_is_anagram(text, rnd):
    chars = list(text)
    rnd.shuffle(chars)
    assert is_anagram(text, "".join(chars)) is True


@given(text_st)
def test_different_lengths_are_not_anagrams(text):
    assert is_anagram(text, text + "a") is False