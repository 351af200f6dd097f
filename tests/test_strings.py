import pytest

from algosuite.strings import (
    check_inclusion,
    compressed_string,
    edit_distance,
    find_min_difference,
    is_match,
    lcs_length,
    longest_common_prefix,
    longest_palindrome_subseq,
    maximum_swap,
    min_add_to_make_valid,
    min_delete_distance,
    min_extra_char,
    minimum_steps,
    rotate_string,
    uncommon_from_sentences,
)


def _expand(encoded):
    return "".join(ch * int(count) for count, ch in zip(encoded[::2], encoded[1::2]))


def test_min_extra_char_example():
    assert min_extra_char("leetscode", ["leet", "code", "leetcode"]) == 1


def test_min_extra_char_bounds():
    assert min_extra_char("abcdef", []) == len("abcdef")
    assert min_extra_char("helloworld", ["hello", "world"]) == min_extra_char("", [])
    assert min_extra_char("xyz", ["xyz"]) == min_extra_char("", ["q"])


def test_minimum_steps_sorted_needs_none():
    assert minimum_steps("000111") == minimum_steps("")


def test_minimum_steps_reverse_complement_symmetry():
    for s in ("101", "1100", "100101", "0110010"):
        mirrored = s[::-1].translate(str.maketrans("01", "10"))
        assert minimum_steps(s) == minimum_steps(mirrored)


def test_minimum_steps_grows_with_disorder():
    assert minimum_steps("1100") > minimum_steps("1010") > minimum_steps("0011")


def test_compressed_string_examples():
    assert compressed_string("abcde") == "1a1b1c1d1e"
    assert compressed_string("aaaaaaaaaaaaaabb") == "9a5a2b"


def test_compressed_string_round_trip():
    for word in ("a", "zzzzzzzzzzzzzzzzzzzz", "abbcccdddd", "aabbaa"):
        encoded = compressed_string(word)
        assert _expand(encoded) == word
        assert all(count in "123456789" for count in encoded[::2])


@pytest.mark.parametrize(
    "s, p, expected",
    [
        ("aa", "a", False),
        ("aa", "*", True),
        ("cb", "?a", False),
        ("adceb", "*a*b", True),
        ("acdcb", "a*c?b", False),
        ("", "***", True),
        ("", "?", False),
    ],
)
def test_is_match(s, p, expected):
    assert is_match(s, p) is expected


def test_lcs_length_properties():
    assert lcs_length("abcde", "ace") == len("ace")
    assert lcs_length("abc", "abc") == len("abc")
    assert lcs_length("abcxyz", "zyxcba") == lcs_length("zyxcba", "abcxyz")
    assert lcs_length("abc", "") == lcs_length("", "")


def test_longest_palindrome_subseq():
    assert longest_palindrome_subseq("racecar") == len("racecar")
    assert longest_palindrome_subseq("bbbab") == len("bbbb")
    assert longest_palindrome_subseq("abcd") <= len("abcd")


def test_find_min_difference():
    assert find_min_difference(["23:59", "00:00"]) == 1
    assert find_min_difference(["00:00", "23:59", "00:00"]) == 0
    assert find_min_difference(["12:00", "12:30"]) == find_min_difference(["01:00", "01:30"])


def test_find_min_difference_errors():
    with pytest.raises(ValueError):
        find_min_difference([])
    with pytest.raises(ValueError):
        find_min_difference(["ab:cd"])


def test_check_inclusion():
    assert check_inclusion("ab", "eidbaooo") is True
    assert check_inclusion("ab", "eidboaoo") is False
    assert check_inclusion("abc", "ab") is False
    assert check_inclusion("", "anything") is True


def test_min_delete_distance():
    assert min_delete_distance("sea", "eat") == 2
    assert min_delete_distance("same", "same") == min_delete_distance("", "")
    word1, word2 = "leetcode", "etco"
    assert min_delete_distance(word1, word2) == len(word1) + len(word2) - 2 * lcs_length(word1, word2)


def test_edit_distance_examples():
    assert edit_distance("horse", "ros") == 3
    assert edit_distance("intention", "execution") == 5


def test_edit_distance_properties():
    assert edit_distance("kitten", "") == len("kitten")
    assert edit_distance("", "sitting") == len("sitting")
    assert edit_distance("kitten", "sitting") == edit_distance("sitting", "kitten")
    assert edit_distance("flaw", "lawn") <= max(len("flaw"), len("lawn"))
    a, b, c = "sunday", "saturday", "monday"
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_rotate_string():
    assert rotate_string("abcde", "cdeab") is True
    assert rotate_string("abcde", "abced") is False
    assert rotate_string("abc", "abcabc") is False


def test_uncommon_from_sentences():
    assert sorted(uncommon_from_sentences("this apple is sweet", "this apple is sour")) == [
        "sour",
        "sweet",
    ]
    assert uncommon_from_sentences("apple apple", "banana") == ["banana"]


def test_min_add_to_make_valid():
    assert min_add_to_make_valid("(((") == len("(((")
    assert min_add_to_make_valid(")))(((") == len(")))(((")
    assert min_add_to_make_valid("()()") == min_add_to_make_valid("")
    assert min_add_to_make_valid("())") < min_add_to_make_valid("()))")


def test_min_add_to_make_valid_rejects_other_characters():
    with pytest.raises(ValueError):
        min_add_to_make_valid("(a)")


def test_longest_common_prefix():
    assert longest_common_prefix([1, 10, 100], [1000]) == len("100")
    assert longest_common_prefix([1, 2, 3], [4, 4, 4]) == longest_common_prefix([], [5])
    assert longest_common_prefix([12345], [12345]) == len("12345")


def test_maximum_swap():
    assert maximum_swap(2736) == 7236
    assert maximum_swap(9973) == 9973


def test_maximum_swap_invariants():
    for num in (1993, 98368, 115, 10, 0):
        result = maximum_swap(num)
        assert result >= num
        assert sorted(str(result)) == sorted(str(num))


def test_maximum_swap_rejects_negative():
    with pytest.raises(ValueError):
        maximum_swap(-12)