#!/usr/bin/env python3
"""
Test the boof command line: output, exit statuses, messages.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import subprocess

from boof.cli import EXIT_CONFIG, EXIT_LOAD, EXIT_OK, EXIT_RUNTIME

ROOT = os.path.join(os.path.dirname(__file__), '..')
EXAMPLES = os.path.join(ROOT, 'examples')


def run_cli(*args, input_data=b""):
    env = dict(os.environ)
    env['PYTHONPATH'] = os.path.join(ROOT, 'src') + os.pathsep + env.get('PYTHONPATH', '')
    return subprocess.run(
        [sys.executable, '-m', 'boof', *args],
        input=input_data,
        capture_output=True,
        env=env,
        timeout=30,
    )


def write_program(tmp_path, code):
    path = tmp_path / "prog.b"
    path.write_text(code)
    return str(path)


def test_hello():
    result = run_cli(os.path.join(EXAMPLES, 'hello.b'))
    assert result.returncode == EXIT_OK
    assert result.stdout == b"hello, computer!\n"


def test_echo_runs_out_of_input():
    result = run_cli(os.path.join(EXAMPLES, 'echo.b'), input_data=b"ok")
    assert result.returncode == EXIT_RUNTIME
    assert result.stdout == b"ok"
    assert b"no byte to read" in result.stderr


def test_no_file():
    result = run_cli()
    assert result.returncode == EXIT_CONFIG
    assert b"must provide an input file" in result.stderr
    assert result.stdout == b""


def test_file_not_found(tmp_path):
    result = run_cli(str(tmp_path / "missing.b"))
    assert result.returncode == EXIT_CONFIG
    assert b"ConfigError" in result.stderr


def test_unmatched_bracket(tmp_path):
    result = run_cli(write_program(tmp_path, "+.\n]"))
    assert result.returncode == EXIT_LOAD
    assert result.stdout == b""
    assert b"unmatched ']'" in result.stderr


def test_pointer_out_of_bounds(tmp_path):
    result = run_cli(write_program(tmp_path, "<"))
    assert result.returncode == EXIT_RUNTIME
    assert b"out of bounds" in result.stderr


def test_exit_statuses_are_distinct():
    assert len({EXIT_OK, EXIT_CONFIG, EXIT_LOAD, EXIT_RUNTIME}) == 4


def test_debug_flag(tmp_path):
    result = run_cli('-d', '--delay', '0', write_program(tmp_path, "+" * 72 + "."))
    assert result.returncode == EXIT_OK
    assert b".: H (0x48)" in result.stdout
    assert b"d: 0, p: 72" in result.stdout


def test_stats_go_to_stderr(tmp_path):
    result = run_cli('--stats', write_program(tmp_path, "+++[-]"))
    assert result.returncode == EXIT_OK
    assert result.stdout == b""
    assert b"Loading took" in result.stderr
    assert b"(13 steps)" in result.stderr


def test_main_in_process(tmp_path, capsys):
    from boof.cli import main

    assert main([write_program(tmp_path, "")]) == EXIT_OK
    assert main([]) == EXIT_CONFIG
    assert "must provide an input file" in capsys.readouterr().err
