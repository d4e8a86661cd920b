"""
# JTS: keywords.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Keyword rule tables.

Each table is an ordered tuple of (Japanese pattern, TypeScript substitute) pairs,
applied top to bottom as plain substring replacements.
A compound phrase must come before every phrase it contains,
otherwise the shorter phrase would consume part of it first.
Committing the tables as replacements checks this (see OrdinaryDictionaryReplacement).
"""

KEYWORD_RULES = (
    # Compound phrases
    ('そうでなければもし', 'else if'),
    ('そうでなければ', 'else'),
    ('の中の', 'of'),
    # Type names containing 真, 偽, or 無
    ('真偽値', 'boolean'),
    ('絶対無', 'never'),
    ('無効', 'void'),

    # Declarations and control flow
    ('関数', 'function'),
    ('定数', 'const'),
    ('変数', 'let'),
    ('もし', 'if'),
    ('繰り返し', 'for'),
    ('各々', 'for'),
    ('間', 'while'),
    ('戻す', 'return'),
    ('抜ける', 'break'),
    ('続ける', 'continue'),

    # Classes
    ('クラス', 'class'),
    ('拡張', 'extends'),
    ('実装', 'implements'),
    ('構築', 'constructor'),
    ('自分', 'this'),
    ('新規', 'new'),
    ('静的', 'static'),
    ('非公開', 'private'),
    ('公開', 'public'),
    ('保護', 'protected'),

    # Literals
    ('真', 'true'),
    ('偽', 'false'),
    ('未定義', 'undefined'),
    ('無', 'null'),

    # Asynchrony
    ('非同期', 'async'),
    ('待機', 'await'),

    # Exceptions
    ('試行', 'try'),
    ('捕捉', 'catch'),
    ('最後に', 'finally'),
    ('投げる', 'throw'),

    # Types and modules
    ('型', 'type'),
    ('接点', 'interface'),
    ('出力', 'export'),
    ('入力', 'import'),
    ('から', 'from'),
    ('として', 'as'),
    ('既定', 'default'),

    # Operators
    ('かつ', '&&'),
    ('または', '||'),
    ('ではない', '!'),
    ('である', '==='),
    ('でない', '!=='),

    # Built-ins
    ('表示', 'console.log'),
)

TYPE_RULES = (
    ('文字列', 'string'),
    ('数値', 'number'),
    ('何でも', 'any'),
    ('不明', 'unknown'),
    ('物体', 'object'),
)
