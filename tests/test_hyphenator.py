import io

import pytest

from hyphenator import Hyphenator
from pattern_loader import load_patterns

WORDS = ["", "a", "hyphenation", "Hyphenation", "abcdefghij", "ab'cd", "x1y2z3", "schiffahrt", "İji"]


def test_fixture_hy2ph_forbids_the_break():
    hyphenator = load_patterns(io.StringIO("1 1 hy2ph"))
    assert hyphenator.start_safe == 1
    assert hyphenator.end_safe == 1
    rule = hyphenator.trie.find("hyph")
    assert rule.priorities == (0, 0, 2)
    assert hyphenator.hyphenate("hyphen") == [None] * 6


def test_fixture_hy3ph_breaks_after_hy():
    hyphenator = load_patterns(io.StringIO("1 1 hy3ph"))
    rules = hyphenator.hyphenate("hyphen")
    assert len(rules) == 6
    assert hyphenator.positions("hyphen") == [2]
    assert rules[2].key == "hyph"
    assert hyphenator.hyphenate_word("hyphen") == ["hy", "phen"]


def test_hyphenation(hyphenator):
    assert hyphenator.positions("hyphenation") == [2, 6]
    assert hyphenator.hyphenate_word("hyphenation") == ["hy", "phen", "ation"]
    assert hyphenator.hyphenate_word("Hyphenation") == ["Hy", "phen", "ation"]
    assert hyphenator.splits("hyphenation") == [("hy-", "phenation"), ("hyphen-", "ation")]


def test_empty_word(hyphenator):
    assert hyphenator.hyphenate("") == []
    assert hyphenator.hyphenate_word("") == [""]
    assert hyphenator.splits("") == []


@pytest.mark.parametrize("word", WORDS)
def test_one_slot_per_letter(hyphenator, every_letter, word):
    assert len(hyphenator.hyphenate(word)) == len(word)
    assert len(every_letter.hyphenate(word)) == len(word)


@pytest.mark.parametrize("word", WORDS)
def test_deterministic(hyphenator, word):
    assert hyphenator.hyphenate(word) == hyphenator.hyphenate(word)


def test_safe_zones(every_letter):
    assert every_letter.positions("abcde") == [1, 2, 3, 4]

    every_letter.start_safe, every_letter.end_safe = 2, 3
    assert every_letter.positions("abcde") == [2]
    assert every_letter.positions("abcd") == []
    assert every_letter.positions("abcdefghij") == [2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize("start_safe, end_safe", [(0, 0), (1, 1), (2, 3), (4, 1), (6, 6)])
def test_nothing_inside_safe_zones(every_letter, start_safe, end_safe):
    every_letter.start_safe, every_letter.end_safe = start_safe, end_safe
    for word in ["abcdefghij", "jihgfedcba", "abc"]:
        for i in every_letter.positions(word):
            assert i >= start_safe
            assert i <= len(word) - end_safe
            assert 0 <= i < len(word)


def test_zero_safe_zones_allow_breaking_at_the_start(every_letter):
    every_letter.start_safe, every_letter.end_safe = 0, 0
    assert every_letter.positions("abc") == [0, 1, 2]


def test_upper_case_is_not_punctuation(every_letter):
    assert every_letter.positions("ABCDE") == every_letter.positions("abcde") == [1, 2, 3, 4]


def test_no_break_next_to_punctuation(every_letter):
    assert every_letter.positions("ab'cde") == [4, 5]
    assert every_letter.positions("abc1de") == [1, 5]


def test_every_punctuation_mark_is_protected(every_letter):
    assert every_letter.positions("ab'cdefg'hi") == [4, 5, 6, 10]


def test_wider_zone_around_punctuation(every_letter):
    every_letter.start_safe, every_letter.end_safe = 2, 2
    # the apostrophe protects slots 3 to 7
    assert every_letter.positions("abcde'fghij") == [2, 8, 9]


def test_non_standard_break(schiffahrt):
    rules = schiffahrt.hyphenate("schiffahrt")
    assert [i for i, rule in enumerate(rules) if rule] == [5]
    rule = rules[5]
    assert rule.del_pre == 1
    assert rule.skip_post == 1
    assert rule.insert_pre == "ff"
    assert rule.insert_post == "f"
    assert schiffahrt.splits("Schiffahrt") == [("Schiff-", "fahrt")]
    assert schiffahrt.hyphenate_word("Schiffahrt") == ["Schiff", "fahrt"]


def test_hyphenate_text(hyphenator, schiffahrt):
    assert hyphenator.hyphenate_text("the hyphenation\tof words") == "the hy-phen-ation\tof words"
    assert schiffahrt.hyphenate_text("die Schiffahrt", hyphen="=") == "die Schiff=fahrt"
    assert hyphenator.hyphenate_text("") == ""


def test_skipped_letters_never_start_a_break():
    hyphenator = load_patterns(io.StringIO("1 1 schif1fahrt/ff=f,5,2 1a"))
    # 1a allows a break before the 'a' right after the letter the splice skips
    assert hyphenator.positions("schiffahrt") == [5, 6]
    assert hyphenator.hyphenate_word("schiffahrt") == ["schiff", "fahrt"]


def test_default_hyphenator_breaks_nothing():
    hyphenator = Hyphenator()
    assert hyphenator.hyphenate("hyphenation") == [None] * 11
    assert "0 patterns" in repr(hyphenator)
