"""Thompson NFA construction and simulation for a small regular-expression language.

Supported syntax: ASCII letters and digits as literals, parentheses for
grouping, ``|`` for alternation, implicit concatenation, and the postfix
operators ``*``, ``+`` and ``?``. A match must consume the whole input.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

_PRECEDENCE = {"*": 3, "+": 3, "?": 3, ".": 2, "|": 1}
_CONCAT = "."
_UNARY_OPERATORS = "*+?"


class StateKind(enum.Enum):
    """The role a state plays in the automaton."""

    NORMAL = "normal"
    SPLIT = "split"
    MATCH = "match"


@dataclass(eq=False)
class State:
    """One NFA state; NORMAL states consume ``char`` and move to ``out1``."""

    kind: StateKind = StateKind.NORMAL
    char: str = ""
    out1: State | None = field(default=None, repr=False)
    out2: State | None = field(default=None, repr=False)


@dataclass
class Fragment:
    """A partially built NFA: a start state and its dangling exits."""

    start: State
    outs: list[tuple[State, str]] = field(default_factory=list)

    def patch(self, target: State) -> None:
        """Connect every dangling exit to ``target``."""
        for state, attr in self.outs:
            setattr(state, attr, target)


def _is_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _insert_concatenation(regex: str) -> str:
    pieces = []
    for c1, c2 in zip(regex, regex[1:]):
        pieces.append(c1)
        if (_is_alnum(c1) or c1 in ")*+?") and (_is_alnum(c2) or c2 == "("):
            pieces.append(_CONCAT)
    if regex:
        pieces.append(regex[-1])
    return "".join(pieces)


def regex_to_postfix(regex: str) -> str:
    """Convert an infix regular expression to postfix with explicit ``.`` concatenation."""
    output: list[str] = []
    stack: list[str] = []
    for c in _insert_concatenation(regex):
        if _is_alnum(c):
            output.append(c)
        elif c == "(":
            stack.append(c)
        elif c == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError(f"unbalanced ')' in {regex!r}")
            stack.pop()
        else:
            precedence = _PRECEDENCE.get(c, 0)
            while stack and precedence <= _PRECEDENCE.get(stack[-1], 0):
                output.append(stack.pop())
            stack.append(c)
    if "(" in stack:
        raise ValueError(f"unbalanced '(' in {regex!r}")
    output.extend(reversed(stack))
    return "".join(output)


def postfix_to_nfa(postfix: str) -> State:
    """Build a Thompson NFA from a postfix expression and return its start state."""
    stack: list[Fragment] = []

    def pop(operator: str) -> Fragment:
        if not stack:
            raise ValueError(f"missing operand for {operator!r} in {postfix!r}")
        return stack.pop()

    for c in postfix:
        if c == _CONCAT:
            second = pop(c)
            first = pop(c)
            first.patch(second.start)
            stack.append(Fragment(first.start, second.outs))
        elif c == "|":
            second = pop(c)
            first = pop(c)
            split = State(StateKind.SPLIT, out1=first.start, out2=second.start)
            stack.append(Fragment(split, first.outs + second.outs))
        elif c == "?":
            frag = pop(c)
            split = State(StateKind.SPLIT, out1=frag.start)
            stack.append(Fragment(split, frag.outs + [(split, "out2")]))
        elif c == "*":
            frag = pop(c)
            split = State(StateKind.SPLIT, out1=frag.start)
            frag.patch(split)
            stack.append(Fragment(split, [(split, "out2")]))
        elif c == "+":
            frag = pop(c)
            split = State(StateKind.SPLIT, out1=frag.start)
            frag.patch(split)
            stack.append(Fragment(frag.start, [(split, "out2")]))
        else:
            state = State(StateKind.NORMAL, char=c)
            stack.append(Fragment(state, [(state, "out1")]))

    if not stack:
        raise ValueError("empty expression")
    frag = stack.pop()
    frag.patch(State(StateKind.MATCH))
    return frag.start


def compile_regex(regex: str) -> State:
    """Compile an infix regular expression into an NFA start state."""
    return postfix_to_nfa(regex_to_postfix(regex))


def _closure(states: Iterable[State | None]) -> list[State]:
    """Follow SPLIT states and return the reachable NORMAL and MATCH states."""
    seen: set[State] = set()
    result: list[State] = []
    pending = [s for s in states if s is not None]
    pending.reverse()
    while pending:
        state = pending.pop()
        if state in seen:
            continue
        seen.add(state)
        if state.kind is StateKind.SPLIT:
            for nxt in (state.out2, state.out1):
                if nxt is not None:
                    pending.append(nxt)
        else:
            result.append(state)
    return result


def match(start: State, text: str) -> bool:
    """Return True if the NFA starting at ``start`` accepts the whole of ``text``."""
    current = _closure([start])
    for c in text:
        current = _closure(
            s.out1 for s in current if s.kind is StateKind.NORMAL and s.char == c
        )
    return any(s.kind is StateKind.MATCH for s in current)


def iter_states(start: State | None) -> Iterator[State]:
    """Yield every state reachable from ``start`` once, depth first, ``out1`` before ``out2``."""
    seen: set[State] = set()
    pending = [start] if start is not None else []
    while pending:
        state = pending.pop()
        if state in seen:
            continue
        seen.add(state)
        yield state
        for nxt in (state.out2, state.out1):
            if nxt is not None and nxt not in seen:
                pending.append(nxt)


def format_nfa(start: State) -> str:
    """Describe the automaton one state per line, numbering states in visit order."""
    ids = {state: index for index, state in enumerate(iter_states(start))}

    def ref(state: State | None) -> str:
        return "None" if state is None else str(ids[state])

    lines = []
    for state, index in ids.items():
        if state.kind is StateKind.MATCH:
            lines.append(f"State {index}: MATCH")
        elif state.kind is StateKind.SPLIT:
            lines.append(f"State {index}: SPLIT -> {ref(state.out1)}, {ref(state.out2)}")
        else:
            lines.append(f"State {index}: '{state.char}' -> {ref(state.out1)}")
    return "\n".join(lines)