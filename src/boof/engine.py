from __future__ import annotations

import sys
from typing import BinaryIO, Iterable, Optional

import numpy as np

from .debug import SNAPSHOT_CELLS, traced
from .errors import InputExhaustedError, PointerOutOfBoundsError, make_runtime_error
from .instructions import (
    Decrement,
    Halt,
    Increment,
    Input,
    Instruction,
    LoopEnd,
    LoopStart,
    MoveLeft,
    MoveRight,
    Output,
)
from .state import MachineState

TAPE_SIZE = 30000
DEBUG_DELAY = 0.1  # seconds between debug steps


class Engine:
    """
    Executes a loaded program against a byte tape.

    Memory Layout:
    - One tape of ``tape_size`` unsigned 8-bit cells, zero-initialized
    - A single data pointer starting at cell 0

    Step Order:
    - Fetch program[pc], then advance pc, then apply the instruction
    - Jump targets are therefore relative to the advanced counter
    - The machine halts on '!' or when pc runs past the end of the program

    In debug mode each step is wrapped by ``boof.debug.traced`` (snapshot
    before, pause after) and Output prints a readable line instead of the
    raw byte. Both go to the same output stream.
    """

    def __init__(
        self,
        program: Iterable[Instruction],
        *,
        debug: bool = False,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
        tape_size: int = TAPE_SIZE,
        debug_delay: float = DEBUG_DELAY,
        snapshot_cells: int = SNAPSHOT_CELLS,
    ):
        self.program = tuple(program)
        self.debug = debug
        self.stdin = sys.stdin.buffer if stdin is None else stdin
        self.out = sys.stdout.buffer if stdout is None else stdout
        self.tape = np.zeros(tape_size, dtype=np.uint8)
        self.state = MachineState()
        self.state.halted = not self.program

        self._put = self._put_debug if debug else self._put_raw
        if debug:
            self.step = traced(self, self.step, delay=debug_delay, cells=snapshot_cells)

    # ===== Execution =====

    def run(self) -> int:
        """Step until halted. Returns the number of steps executed."""
        try:
            while not self.state.halted:
                self.step()
        finally:
            self.out.flush()
        return self.state.steps

    def step(self) -> None:
        state = self.state
        if state.halted:
            return

        instr = self.program[state.pc]
        state.pc += 1
        state.steps += 1

        if isinstance(instr, MoveRight):
            if state.pointer + 1 >= len(self.tape):
                raise self._out_of_bounds(f"moved past cell {len(self.tape) - 1}")
            state.pointer += 1
        elif isinstance(instr, MoveLeft):
            if state.pointer == 0:
                raise self._out_of_bounds("moved below cell 0")
            state.pointer -= 1
        elif isinstance(instr, Increment):
            self.tape[state.pointer] = (int(self.tape[state.pointer]) + 1) & 0xFF
        elif isinstance(instr, Decrement):
            self.tape[state.pointer] = (int(self.tape[state.pointer]) - 1) & 0xFF
        elif isinstance(instr, Output):
            self._put(int(self.tape[state.pointer]))
        elif isinstance(instr, Input):
            data = self.stdin.read(1)
            if not data:
                raise make_runtime_error(
                    InputExhaustedError,
                    message="no byte to read",
                    pc=state.pc - 1,
                    pointer=state.pointer,
                )
            self.tape[state.pointer] = data[0]
        elif isinstance(instr, LoopStart):
            if self.tape[state.pointer] == 0:
                state.pc = instr.target + 1
        elif isinstance(instr, LoopEnd):
            state.pc = instr.target
        elif isinstance(instr, Halt):
            state.halted = True

        if state.pc >= len(self.program):
            state.halted = True

    def reset(self) -> None:
        """Zero the tape and rewind to the first instruction."""
        self.tape[:] = 0
        self.state.reset()
        self.state.halted = not self.program

    # ===== Output =====

    def _put_raw(self, value: int) -> None:
        self.out.write(bytes((value,)))

    def _put_debug(self, value: int) -> None:
        self.emit_line(f".: {chr(value)} (0x{value:x})")

    def emit_line(self, text: str) -> None:
        """Flush pending program output, then write one line of text."""
        self.out.flush()
        self.out.write(text.encode('utf-8') + b'\n')
        self.out.flush()

    def _out_of_bounds(self, detail: str) -> PointerOutOfBoundsError:
        return make_runtime_error(
            PointerOutOfBoundsError,
            message=f"data pointer out of bounds: {detail}",
            pc=self.state.pc - 1,
            pointer=self.state.pointer,
        )
