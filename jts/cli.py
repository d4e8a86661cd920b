"""
# JTS: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional

from jts._version import __version__
from jts.constants import GENERIC_ERROR_EXIT_CODE, JTS_FILE_EXTENSION
from jts.core import transform
from jts.exceptions import RunnerLaunchException, RunnerNotFoundException, UnterminatedLiteralException
from jts.runner import run_typescript

DESCRIPTION = '''
    Run JTS (TypeScript written with Japanese keywords).
'''
JTS_FILE_NAME_HELP = '''
    name of JTS file to be run
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every replacement applied, and the runner command)
'''
PRINT_MODE_HELP = '''
    print the converted TypeScript instead of running it
'''
EPILOG = '''
examples:
  jts index.jts
  jts examples/hello.jts
'''


def is_jts_file(file_name: str) -> bool:
    return file_name.endswith(JTS_FILE_EXTENSION)


def build_argument_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(
        prog='jts',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-p', '--print',
        dest='print_mode_enabled',
        action='store_true',
        help=PRINT_MODE_HELP,
    )
    argument_parser.add_argument(
        'jts_file_name',
        default=None,
        help=JTS_FILE_NAME_HELP,
        metavar='file.jts',
        nargs='?',
    )

    return argument_parser


def exit_with_error(message: str):
    print(f'error: {message}', file=sys.stderr)
    sys.exit(GENERIC_ERROR_EXIT_CODE)


def read_jts_file(jts_file_name: str) -> str:
    if not is_jts_file(jts_file_name):
        exit_with_error(f'argument `{jts_file_name}`: expected a `{JTS_FILE_EXTENSION}` file')

    try:
        with open(jts_file_name, 'r', encoding='utf-8') as jts_file:
            return jts_file.read()
    except FileNotFoundError:
        exit_with_error(f'argument `{jts_file_name}`: file not found')
    except IsADirectoryError:
        exit_with_error(f'argument `{jts_file_name}`: is a directory')


def main(arguments: Optional[list[str]] = None):
    argument_parser = build_argument_parser()
    parsed_arguments = argument_parser.parse_args(arguments)
    jts_file_name = parsed_arguments.jts_file_name
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled
    print_mode_enabled = parsed_arguments.print_mode_enabled

    if jts_file_name is None:
        argument_parser.print_help()
        sys.exit(0)

    jts = read_jts_file(jts_file_name)

    try:
        typescript = transform(jts, verbose_mode_enabled)
    except UnterminatedLiteralException as unterminated_literal_exception:
        exit_with_error(f'{jts_file_name}: {unterminated_literal_exception}')

    if print_mode_enabled:
        sys.stdout.write(typescript)
        sys.exit(0)

    try:
        exit_status = run_typescript(typescript, jts_file_name, verbose_mode_enabled=verbose_mode_enabled)
    except (RunnerNotFoundException, RunnerLaunchException) as runner_exception:
        exit_with_error(str(runner_exception))

    if exit_status != 0:
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    sys.exit(0)


if __name__ == '__main__':
    main()
