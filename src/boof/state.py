from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MachineState:
    pc: int = 0  # index of the next instruction
    pointer: int = 0  # index of the current cell
    halted: bool = False
    steps: int = 0

    def reset(self) -> None:
        self.pc = 0
        self.pointer = 0
        self.halted = False
        self.steps = 0
