from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from .api import read_program
from .engine import DEBUG_DELAY, Engine
from .errors import BoofConfigError, BoofLoadError, BoofRuntimeError
from .loader import load

EXIT_OK = 0
EXIT_CONFIG = 2  # same status argparse uses for usage errors
EXIT_LOAD = 3
EXIT_RUNTIME = 4


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="boof",
        description="Run a boof program (brainfuck commands plus '!' to halt).",
    )
    parser.add_argument("program", nargs="?", help="Path to the program file")
    parser.add_argument("-d", "--debug", action="store_true", help="Trace every step and print output as text")
    parser.add_argument("--delay", type=float, default=DEBUG_DELAY, help="Pause between debug steps in seconds (default 0.1)")
    parser.add_argument("--stats", action="store_true", help="Print load/run timings and step count to stderr")
    args = parser.parse_args(argv)

    try:
        source = read_program(args.program)

        start = time.time()
        program = load(source)
        end = time.time()
        load_ms = (end - start) * 1000

        engine = Engine(program, debug=args.debug, debug_delay=max(0.0, args.delay))
        start = time.time()
        steps = engine.run()
        end = time.time()
    except BoofConfigError as e:
        print(e, file=sys.stderr)
        return EXIT_CONFIG
    except BoofLoadError as e:
        print(e, file=sys.stderr)
        return EXIT_LOAD
    except BoofRuntimeError as e:
        print(e, file=sys.stderr)
        return EXIT_RUNTIME

    if args.stats:
        print(f"Loading took {load_ms:.2f} ms ({len(program)} instructions)", file=sys.stderr)
        print(f"Execution took {(end - start) * 1000:.2f} ms ({steps} steps)", file=sys.stderr)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
