from __future__ import annotations

import functools
import time
from typing import Callable

SNAPSHOT_CELLS = 30
SEPARATOR = '-' * 16


def format_snapshot(tape, pointer: int, pc: int, instr, *, cells: int = SNAPSHOT_CELLS) -> str:
    """
    Machine state as printed before each debug step.

    Example:
        [00, 0a, 64, ...]
        d: 1, p: 12
        Increment()
        ----------------
    """
    cells_hex = ", ".join(f"{int(b):02x}" for b in tape[:cells])
    return "\n".join([
        f"[{cells_hex}]",
        f"d: {pointer}, p: {pc}",
        repr(instr),
        SEPARATOR,
    ])


def traced(engine, step: Callable[[], None], *, delay: float, cells: int = SNAPSHOT_CELLS) -> Callable[[], None]:
    # Wraps Engine.step: snapshot before, pause after. Neither touches machine state.
    @functools.wraps(step)
    def wrapper() -> None:
        state = engine.state
        if state.halted:
            return
        instr = engine.program[state.pc]
        engine.emit_line(format_snapshot(engine.tape, state.pointer, state.pc, instr, cells=cells))
        step()
        if not state.halted and delay > 0:
            time.sleep(delay)

    return wrapper
