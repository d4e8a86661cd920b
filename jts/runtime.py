"""
# JTS: runtime.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Runtime shim for Japanese method names.

Rather than attaching aliases to the built-in Array and String prototypes,
the shim is a TypeScript module exporting two wrapper classes:
- `配列` wraps an array;
- `文章` wraps a string.
Each alias forwards its arguments to the built-in method of the same arity.
`先頭` and `末尾` give the first and last elements, or `undefined` for an empty array.
"""

from jts.constants import RUNTIME_MODULE_NAME, TRANSPILED_FILE_EXTENSION

ARRAY_WRAPPER_NAME = '配列'
STRING_WRAPPER_NAME = '文章'
WRAPPED_VALUE_NAME = '値'

ARRAY_METHOD_FROM_ALIAS = {
    '写像': 'map',
    '絞込': 'filter',
    '畳込': 'reduce',
    '探索': 'find',
    '全て': 'every',
    'いずれか': 'some',
    '含む': 'includes',
    '結合': 'join',
    '逆順': 'reverse',
    '整列': 'sort',
}
STRING_METHOD_FROM_ALIAS = {
    '分割': 'split',
    '含む': 'includes',
    '始まる': 'startsWith',
    '終わる': 'endsWith',
    '置換': 'replace',
    '全置換': 'replaceAll',
    '除去': 'trim',
    '大文字': 'toUpperCase',
    '小文字': 'toLowerCase',
}


def build_forwarding_method(alias: str, method: str, wrapped_type: str) -> str:
    return (
        f'  {alias}(...args: any[]): any {{\n'
        f'    return ({wrapped_type}.prototype.{method} as any).apply(this.{WRAPPED_VALUE_NAME}, args);\n'
        f'  }}\n'
    )


def render_array_wrapper() -> str:
    forwarding_methods = ''.join(
        build_forwarding_method(alias, method, 'Array')
        for alias, method in ARRAY_METHOD_FROM_ALIAS.items()
    )

    return (
        f'export class {ARRAY_WRAPPER_NAME}<T> {{\n'
        f'  constructor(public readonly {WRAPPED_VALUE_NAME}: T[]) {{}}\n'
        f'{forwarding_methods}'
        f'  先頭(): T | undefined {{\n'
        f'    return this.{WRAPPED_VALUE_NAME}[0];\n'
        f'  }}\n'
        f'  末尾(): T | undefined {{\n'
        f'    return this.{WRAPPED_VALUE_NAME}[this.{WRAPPED_VALUE_NAME}.length - 1];\n'
        f'  }}\n'
        f'}}\n'
    )


def render_string_wrapper() -> str:
    forwarding_methods = ''.join(
        build_forwarding_method(alias, method, 'String')
        for alias, method in STRING_METHOD_FROM_ALIAS.items()
    )

    return (
        f'export class {STRING_WRAPPER_NAME} {{\n'
        f'  constructor(public readonly {WRAPPED_VALUE_NAME}: string) {{}}\n'
        f'{forwarding_methods}'
        f'}}\n'
    )


def render_runtime_module() -> str:
    """
    Render the TypeScript source of the runtime shim.
    """
    return '// JTS runtime: Japanese method aliases\n\n' + render_array_wrapper() + '\n' + render_string_wrapper()


def build_runtime_file_name() -> str:
    return f'{RUNTIME_MODULE_NAME}{TRANSPILED_FILE_EXTENSION}'


def build_runtime_prelude() -> str:
    """
    Build the import line prepended to transpiled programs.

    It is prepended after keyword substitution, so it is never itself rewritten.
    """
    return (
        f'import {{ {ARRAY_WRAPPER_NAME}, {STRING_WRAPPER_NAME} }} '
        f"from './{build_runtime_file_name()}';\n"
    )
