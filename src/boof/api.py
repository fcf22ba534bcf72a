from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .debug import SNAPSHOT_CELLS
from .engine import DEBUG_DELAY, TAPE_SIZE, Engine
from .errors import MissingProgramError, ProgramFileError, make_config_error
from .loader import load


@dataclass(frozen=True)
class RunOptions:
    debug: bool = False
    tape_size: int = TAPE_SIZE
    debug_delay: float = DEBUG_DELAY
    snapshot_cells: int = SNAPSHOT_CELLS


@dataclass(frozen=True)
class RunResult:
    steps: int
    program_length: int
    pointer: int
    pc: int


def run_string(
    source: Optional[str],
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> RunResult:
    if source is None:
        raise make_config_error(MissingProgramError, message="must provide an input file")
    opts = RunOptions() if options is None else options

    program = load(source)
    engine = Engine(
        program,
        debug=opts.debug,
        stdin=stdin,
        stdout=stdout,
        tape_size=opts.tape_size,
        debug_delay=opts.debug_delay,
        snapshot_cells=opts.snapshot_cells,
    )
    steps = engine.run()
    return RunResult(steps=steps, program_length=len(program), pointer=engine.state.pointer, pc=engine.state.pc)


def read_program(path: Optional[str | Path], *, encoding: str = "utf-8") -> str:
    if path is None:
        raise make_config_error(MissingProgramError, message="must provide an input file")
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise make_config_error(ProgramFileError, message=f"cannot read {p}: {e}") from e


def run_file(
    path: Optional[str | Path],
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_string(read_program(path, encoding=encoding), options=options, stdin=stdin, stdout=stdout)
