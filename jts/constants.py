"""
# JTS: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

JTS_FILE_EXTENSION = '.jts'
TRANSPILED_FILE_EXTENSION = '.ts'
TRANSPILED_FILE_PREFIX = 'jts_'
RUNTIME_MODULE_NAME = 'jts_runtime'

# Tried in order; the first executable found on PATH wins.
RUNNER_COMMANDS = (
    ('bun', ('run',)),
    ('tsx', ()),
    ('npx', ('tsx',)),
)

RUNNER_INSTALL_HELP = '''\
no TypeScript runner found.
Install either bun or tsx:

  npm install -g tsx
  or
  curl -fsSL https://bun.sh/install | bash
'''
