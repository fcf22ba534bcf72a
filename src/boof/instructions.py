from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Type, Union

# ---------------- Instruction set ----------------
@dataclass(frozen=True)
class MoveRight:
    pass  # '>'

@dataclass(frozen=True)
class MoveLeft:
    pass  # '<'

@dataclass(frozen=True)
class Increment:
    pass  # '+'

@dataclass(frozen=True)
class Decrement:
    pass  # '-'

@dataclass(frozen=True)
class Output:
    pass  # '.'

@dataclass(frozen=True)
class Input:
    pass  # ','

@dataclass(frozen=True)
class LoopStart:
    target: int  # index of the matching LoopEnd

@dataclass(frozen=True)
class LoopEnd:
    target: int  # index of the matching LoopStart

@dataclass(frozen=True)
class Halt:
    pass  # '!'

Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, Output, Input, LoopStart, LoopEnd, Halt]
Program = Tuple[Instruction, ...]

COMMANDS = frozenset("<>[].,-+!")

# Instructions without operands are interchangeable, so share one of each.
MOVE_RIGHT = MoveRight()
MOVE_LEFT = MoveLeft()
INCREMENT = Increment()
DECREMENT = Decrement()
OUTPUT = Output()
INPUT = Input()
HALT = Halt()

SIMPLE: Dict[str, Instruction] = {
    '>': MOVE_RIGHT,
    '<': MOVE_LEFT,
    '+': INCREMENT,
    '-': DECREMENT,
    '.': OUTPUT,
    ',': INPUT,
    '!': HALT,
}

SYMBOLS: Dict[Type, str] = {type(instr): ch for ch, instr in SIMPLE.items()}
SYMBOLS[LoopStart] = '['
SYMBOLS[LoopEnd] = ']'


def symbol_of(instr: Instruction) -> str:
    """Command character an instruction was loaded from."""
    return SYMBOLS[type(instr)]
