
from .api import RunOptions, RunResult, run_file, run_string
from .engine import Engine
from .errors import (
    BoofConfigError,
    BoofError,
    BoofLoadError,
    BoofRuntimeError,
    InputExhaustedError,
    MissingProgramError,
    PointerOutOfBoundsError,
    ProgramFileError,
    UnmatchedCloseError,
    UnmatchedOpenError,
)
from .loader import filter_source, load, to_source

__all__ = [
    'Engine',
    'load',
    'filter_source',
    'to_source',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
    'BoofError',
    'BoofLoadError',
    'UnmatchedCloseError',
    'UnmatchedOpenError',
    'BoofRuntimeError',
    'InputExhaustedError',
    'PointerOutOfBoundsError',
    'BoofConfigError',
    'MissingProgramError',
    'ProgramFileError',
]
