# thompson_nfa

A small regular-expression engine. A pattern is first turned into postfix
form, with concatenation made explicit as `.`, and then into a
nondeterministic finite automaton using Thompson's construction. The
automaton is simulated over the input string with all active states tracked
at the same time.

## Supported syntax

- ASCII letters and digits match themselves
- `ab` is concatenation, which is implicit
- `a|b` is alternation
- `a*` matches zero or more, `a+` one or more and `a?` zero or one
- `( ... )` groups

A match must cover the entire input string.

## Library use

Everything lives in `thompson_nfa.nfa`:

```python
from thompson_nfa.nfa import compile_regex, match, regex_to_postfix, format_nfa

regex_to_postfix("a(b|c)*")      # 'abc|*.'
start = compile_regex("a(b|c)*")
match(start, "abcb")             # True
match(start, "ba")               # False
print(format_nfa(start))         # one line per state of the automaton
```

- `regex_to_postfix(regex)` converts an infix pattern to postfix. It raises
  `ValueError` on unbalanced parentheses.
- `postfix_to_nfa(postfix)` builds an automaton from a postfix expression and
  returns its start `State`. It raises `ValueError` when an operator lacks an
  operand or the expression is empty.
- `compile_regex(regex)` does both steps.
- `match(start, text)` returns whether the automaton accepts the whole text.
- `iter_states(start)` yields each reachable state exactly once, depth first.
- `format_nfa(start)` describes the automaton, numbering states in the order
  `iter_states` visits them.

A `State` has a `kind` (`StateKind.NORMAL`, `StateKind.SPLIT` or
`StateKind.MATCH`), the `char` a normal state consumes, and the exits `out1`
and `out2`. `Fragment` is the partial automaton used during construction.

## Command line

```
thompson-nfa
```

This starts an interactive prompt. Each line holds a pattern and an input
string, separated by whitespace:

```
regex > a(b|c)* abcb
Input String Matched
regex > a(b|c)* ba
Input String not matched
regex > .exit
```

Type `.exit`, or end the input, to leave with exit status 0. A pattern that
cannot be compiled prints an error and the prompt continues. A line that does
not hold exactly two words prints a usage hint, and the program ends with exit
status 1.

## Running the tests

```
pip install -e .[test]
pytest
```