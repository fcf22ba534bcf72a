from __future__ import annotations

from typing import List, Tuple

from .errors import UnmatchedCloseError, UnmatchedOpenError, make_load_error
from .instructions import COMMANDS, HALT, SIMPLE, Instruction, LoopEnd, LoopStart, Program, symbol_of


def filter_source(text: str) -> str:
    """Drop everything that is not a command character."""
    return "".join(ch for ch in text if ch in COMMANDS)


def load(text: str) -> Program:
    """
    Turn program text into a resolved instruction sequence.

    Anything outside the command alphabet is a comment. Brackets are matched
    with a stack so that every LoopStart holds the index of its LoopEnd and
    the other way round; execution never has to search for a bracket.

    Raises:
        UnmatchedCloseError: a ']' with no open loop.
        UnmatchedOpenError: a '[' still open at the end of the text.
    """
    # (offset in text, command char); offsets are only needed for error reports
    code: List[Tuple[int, str]] = [(off, ch) for off, ch in enumerate(text) if ch in COMMANDS]
    slots: List[Instruction] = [HALT] * len(code)
    stack: List[int] = []

    for i, (offset, ch) in enumerate(code):
        if ch == '[':
            stack.append(i)
            slots[i] = LoopStart(0)
        elif ch == ']':
            if not stack:
                raise make_load_error(
                    UnmatchedCloseError,
                    message="unmatched ']'",
                    source=text,
                    offset=offset,
                    index=i,
                )
            b = stack.pop()
            assert isinstance(slots[b], LoopStart)
            slots[b] = LoopStart(i)
            slots[i] = LoopEnd(b)
        else:
            slots[i] = SIMPLE[ch]

    if stack:
        b = stack[-1]
        raise make_load_error(
            UnmatchedOpenError,
            message="unmatched '['",
            source=text,
            offset=code[b][0],
            index=b,
        )

    return tuple(slots)


def to_source(program: Program) -> str:
    """Render a loaded program back to its command characters."""
    return "".join(symbol_of(instr) for instr in program)
