from collections import Counter

from pw_audit.pw_tokens import (
    Entry,
    consolidate_tokens,
    extract_tokens,
    is_common_english_word,
    merge_into_smaller,
    rank_entries,
    truncate_histogram,
)


def test_extract_tokens():
    assert extract_tokens("P@ssw0rd2024!", 4) == ["password"]
    assert extract_tokens("abc", 4) == []
    assert extract_tokens("soleil-soleil", 4) == ["soleil", "soleil"]
    assert extract_tokens("soleil-soleil", 7) == []
    assert extract_tokens("ABCD1", 4) == ["abcdi"]


def test_rank_entries_breaks_ties_by_key():
    ranked = rank_entries({"b": 2, "a": 2, "c": 5})
    assert ranked == [Entry("c", 5), Entry("a", 2), Entry("b", 2)]


def test_merge_into_smaller():
    entries = rank_entries({"password": 5, "passwords": 2, "mypassword": 1, "soleil": 3})
    merged = merge_into_smaller(entries)
    assert merged == [Entry("password", 8), Entry("soleil", 3)]


def test_merge_into_smaller_chain():
    entries = [Entry("abcdef", 3), Entry("abcde", 2), Entry("abcd", 1)]
    assert merge_into_smaller(entries) == [Entry("abcd", 6)]


def test_truncate_histogram():
    assert truncate_histogram({"marie": 3, "maria": 2, "soleil": 1}, 4) == {"mari": 5, "soleil": 1}
    assert truncate_histogram({"marie": 3, "maria": 2}, 5) == {"marie": 3, "maria": 2}


def test_consolidate_both_strategies_agree():
    assert consolidate_tokens(Counter({"abcd": 2, "abcdi": 1}), 4) == {"abcd": 3}


def test_consolidate_prefers_suffix_stripped_when_stronger():
    assert consolidate_tokens(Counter({"marie": 3, "maria": 2}), 4) == {"mari": 5}


def test_consolidate_keeps_plain_on_tie():
    assert consolidate_tokens(Counter({"marie": 3, "maria": 2}), 5) == {"marie": 3, "maria": 2}


def test_consolidate_preserves_mass():
    histograms = [
        {"password": 5, "passwords": 2, "mypassword": 1, "soleil": 3},
        {"marie": 3, "maria": 2, "mariel": 4},
        {"summer": 1, "summers": 1, "winter": 2, "winteri": 7},
        {},
    ]
    for histogram in histograms:
        result = consolidate_tokens(Counter(histogram), 4)
        assert sum(result.values()) == sum(histogram.values())


def test_consolidated_keys_do_not_contain_each_other():
    result = consolidate_tokens(Counter({"password": 5, "passwords": 2, "mypassword": 1, "soleil": 3}), 4)
    keys = list(result)
    for a in keys:
        for b in keys:
            if a != b:
                assert a not in b


def test_is_common_english_word():
    assert is_common_english_word("password")
    assert not is_common_english_word("xqzvbnk")
