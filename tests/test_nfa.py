import pytest

from thompson_nfa.nfa import (
    StateKind,
    compile_regex,
    format_nfa,
    iter_states,
    match,
    postfix_to_nfa,
    regex_to_postfix,
)


def test_postfix_inserts_concatenation():
    assert regex_to_postfix("ab") == "ab."


def test_postfix_alternation():
    assert regex_to_postfix("a|b") == "ab|"


def test_postfix_grouping_and_star():
    assert regex_to_postfix("(a|b)*c") == "ab|*c."


def test_postfix_keeps_all_operands_and_drops_parentheses():
    result = regex_to_postfix("(ab|c)+d?")
    assert "(" not in result and ")" not in result
    assert [c for c in result if c.isalnum()] == list("abcd")


@pytest.mark.parametrize("regex", ["(ab", "ab)", "a(b"])
def test_unbalanced_parentheses_raise(regex):
    with pytest.raises(ValueError):
        regex_to_postfix(regex)


def test_empty_expression_raises():
    with pytest.raises(ValueError):
        compile_regex("")


@pytest.mark.parametrize("postfix", [".", "a.", "|", "*"])
def test_missing_operand_raises(postfix):
    with pytest.raises(ValueError):
        postfix_to_nfa(postfix)


@pytest.mark.parametrize(
    "regex, text, expected",
    [
        ("a", "a", True),
        ("a", "b", False),
        ("a", "aa", False),
        ("ab", "ab", True),
        ("ab", "a", False),
        ("a|b", "b", True),
        ("a|b", "ab", False),
        ("a*", "", True),
        ("a*", "aaaa", True),
        ("a+", "", False),
        ("a+", "aaa", True),
        ("a?b", "b", True),
        ("a?b", "ab", True),
        ("a?b", "aab", False),
        ("(a|b)*abb", "babaabb", True),
        ("(a|b)*abb", "abab", False),
        ("ab|c", "ab", True),
        ("ab|c", "c", True),
        ("ab|c", "ac", False),
        ("(ab)+", "ababab", True),
        ("(ab)+", "aba", False),
        ("a*b*", "aabbb", True),
        ("a*b*", "ba", False),
    ],
)
def test_match(regex, text, expected):
    assert match(compile_regex(regex), text) is expected


def test_nfa_is_reusable_across_matches():
    start = compile_regex("(a|b)*c")
    assert match(start, "abc")
    assert not match(start, "ab")
    assert match(start, "c")


def test_literal_nfa_structure():
    start = compile_regex("a")
    states = list(iter_states(start))
    assert states[0] is start
    assert start.kind is StateKind.NORMAL and start.char == "a"
    assert states[1].kind is StateKind.MATCH
    assert len(states) == 2


def test_star_builds_loop_through_split():
    start = compile_regex("a*")
    assert start.kind is StateKind.SPLIT
    assert start.out1.out1 is start
    assert start.out2.kind is StateKind.MATCH


def test_iter_states_visits_each_state_once():
    states = list(iter_states(compile_regex("(a|b)*(ab)+c?")))
    assert len(states) == len(set(map(id, states)))
    assert sum(s.kind is StateKind.MATCH for s in states) == 1


def test_iter_states_of_none_is_empty():
    assert list(iter_states(None)) == []


def test_format_nfa_one_line_per_state():
    start = compile_regex("a(b|c)*")
    text = format_nfa(start)
    lines = text.splitlines()
    assert len(lines) == len(list(iter_states(start)))
    assert lines[0].startswith("State 0: 'a' -> ")
    assert sum(line.endswith("MATCH") for line in lines) == 1
    assert sum("SPLIT ->" in line for line in lines) == 2


def test_postfix_concatenation_connects_fragments():
    start = postfix_to_nfa("ab.")
    assert start.kind is StateKind.NORMAL and start.char == "a"
    second = start.out1
    assert second.kind is StateKind.NORMAL and second.char == "b"
    assert second.out1.kind is StateKind.MATCH
    assert start.out2 is None


def test_postfix_alternation_builds_split():
    start = postfix_to_nfa("ab|")
    assert start.kind is StateKind.SPLIT
    assert start.out1.char == "a"
    assert start.out2.char == "b"
    assert start.out1.out1 is start.out2.out1
    assert start.out1.out1.kind is StateKind.MATCH