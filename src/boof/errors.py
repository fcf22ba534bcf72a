from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _locate(source: str, offset: int) -> Tuple[int, int]:
    # 1-based (line, column) of a character offset
    line = source.count('\n', 0, offset) + 1
    column = offset - (source.rfind('\n', 0, offset) + 1) + 1
    return line, column


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'load':
        if 'unmatched' in msg and ']' in msg:
            return 'Every "]" needs an earlier "[" to close. Check for a stray "]" or a deleted "[".'
        if 'unmatched' in msg and '[' in msg:
            return 'Every "[" needs a later "]". Comment text must not contain command characters.'
        return None
    if kind == 'runtime':
        if 'no byte to read' in msg:
            return 'The program asked for more input than was supplied. Pipe more bytes into stdin.'
        if 'out of bounds' in msg:
            return 'The data pointer left the tape. Check the balance of ">" and "<" moves.'
        return None
    return None


@dataclass
class BoofError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BoofLoadError(BoofError):
    index: int
    line: int
    column: int
    context: str


class UnmatchedCloseError(BoofLoadError):
    pass


class UnmatchedOpenError(BoofLoadError):
    pass


@dataclass
class BoofRuntimeError(BoofError):
    pc: int
    pointer: int


class InputExhaustedError(BoofRuntimeError):
    pass


class PointerOutOfBoundsError(BoofRuntimeError):
    pass


class BoofConfigError(BoofError):
    pass


class MissingProgramError(BoofConfigError):
    pass


class ProgramFileError(BoofConfigError):
    pass


def make_load_error(cls, *, message: str, source: str, offset: int, index: int) -> BoofLoadError:
    line, column = _locate(source, offset)
    ctx = _build_context(source.split('\n'), line)
    hint = _hint_for(message, kind='load')
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"LoadError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        index=index,
        line=line,
        column=column,
        context=ctx,
    )


def make_runtime_error(cls, *, message: str, pc: int, pointer: int) -> BoofRuntimeError:
    hint = _hint_for(message, kind='runtime')
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"RuntimeError: {message} (p: {pc}, d: {pointer}){hint_block}",
        pc=pc,
        pointer=pointer,
    )


def make_config_error(cls, *, message: str) -> BoofConfigError:
    return cls(message=f"ConfigError: {message}")
