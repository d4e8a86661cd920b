"""
# JTS: runner.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Execution of transpiled programs by an external TypeScript runner.
"""

import os
import shutil
import subprocess
import tempfile
from typing import Callable, NamedTuple, Optional

from jts.constants import (
    JTS_FILE_EXTENSION,
    RUNNER_COMMANDS,
    RUNNER_INSTALL_HELP,
    TRANSPILED_FILE_EXTENSION,
    TRANSPILED_FILE_PREFIX,
)
from jts.exceptions import RunnerLaunchException, RunnerNotFoundException
from jts.runtime import build_runtime_file_name, build_runtime_prelude, render_runtime_module


class Runner(NamedTuple):
    executable: str
    arguments: tuple[str, ...]

    def build_command(self, program_file_name: str) -> list[str]:
        return [self.executable, *self.arguments, program_file_name]


def find_runner(which: Optional[Callable[[str], Optional[str]]] = None) -> 'Runner':
    """
    Find the first available TypeScript runner.

    Candidates are tried in the order of RUNNER_COMMANDS.
    """
    if which is None:
        which = shutil.which

    for command_name, arguments in RUNNER_COMMANDS:
        executable = which(command_name)
        if executable is not None:
            return Runner(executable, arguments)

    raise RunnerNotFoundException(RUNNER_INSTALL_HELP)


def build_program_file_name(jts_file_name: str) -> str:
    base_name = os.path.basename(jts_file_name)
    if base_name.endswith(JTS_FILE_EXTENSION):
        base_name = base_name[:-len(JTS_FILE_EXTENSION)]

    return f'{TRANSPILED_FILE_PREFIX}{base_name}{TRANSPILED_FILE_EXTENSION}'


def write_program_files(directory: str, typescript: str, jts_file_name: str) -> str:
    """
    Write the runtime shim and the program (prefixed with the shim import) into a directory.

    Returns the path of the program file.
    """
    runtime_path = os.path.join(directory, build_runtime_file_name())
    with open(runtime_path, 'w', encoding='utf-8') as runtime_file:
        runtime_file.write(render_runtime_module())

    program_path = os.path.join(directory, build_program_file_name(jts_file_name))
    with open(program_path, 'w', encoding='utf-8') as program_file:
        program_file.write(build_runtime_prelude() + typescript)

    return program_path


def run_typescript(typescript: str, jts_file_name: str, runner: Optional['Runner'] = None,
                   verbose_mode_enabled: bool = False) -> int:
    """
    Run transpiled TypeScript and return the runner's exit status.

    Standard streams are inherited, so the runner's own diagnostics pass through untouched.
    The working directory is that of the JTS file.
    Temporary files are removed whatever the outcome.
    """
    if runner is None:
        runner = find_runner()

    working_directory = os.path.dirname(os.path.abspath(jts_file_name))

    with tempfile.TemporaryDirectory(prefix=TRANSPILED_FILE_PREFIX) as temporary_directory:
        program_path = write_program_files(temporary_directory, typescript, jts_file_name)
        command = runner.build_command(program_path)

        if verbose_mode_enabled:
            print(f'Running: {subprocess.list2cmdline(command)}\n\n\n\n')

        try:
            completed_process = subprocess.run(command, cwd=working_directory)
        except OSError as os_error:
            raise RunnerLaunchException(f'cannot launch `{runner.executable}`: {os_error}') from os_error

    return completed_process.returncode
