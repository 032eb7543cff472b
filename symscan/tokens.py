"""
Token definitions and fixed lexical tables for the symscan lexer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional


class Category(Enum):
    """Coarse token classes"""
    KEYWORD = "Keyword"
    OPERATOR = "Operator"
    IDENTIFIER = "Identifier"
    CONSTANT = "Constant"
    PUNCTUATION = "Punctuation"


@dataclass(frozen=True)
class Token:
    """Represents a lexical token"""
    category: Category
    lexeme: str
    line: int
    column: int
    value_type: Optional[str] = None  # only set for CONSTANT tokens

    def is_keyword(self, *lexemes: str) -> bool:
        return self.category is Category.KEYWORD and (not lexemes or self.lexeme in lexemes)

    def is_punctuation(self, *lexemes: str) -> bool:
        return self.category is Category.PUNCTUATION and (not lexemes or self.lexeme in lexemes)

    def is_operator(self, *lexemes: str) -> bool:
        return self.category is Category.OPERATOR and (not lexemes or self.lexeme in lexemes)

    def __repr__(self) -> str:
        suffix = f" <{self.value_type}>" if self.value_type else ""
        return f"Token({self.category.name}, {repr(self.lexeme)}, {self.line}:{self.column}{suffix})"


# Reserved words
KEYWORDS: FrozenSet[str] = frozenset({
    'public', 'private', 'protected', 'static', 'final', 'class', 'int',
    'double', 'void', 'String', 'new', 'this', 'return', 'if', 'else', 'for',
    'while', 'switch', 'case', 'break', 'continue', 'boolean', 'true', 'false',
})

# Keywords that can start a declaration
TYPE_KEYWORDS: FrozenSet[str] = frozenset({'int', 'double', 'boolean', 'void', 'String'})

# Modifiers that mark a declaration as a member rather than a local
MODIFIERS: FrozenSet[str] = frozenset({'public', 'private', 'protected', 'static'})

COMPOUND_OPERATORS: FrozenSet[str] = frozenset({
    '==', '<=', '>=', '!=', '++', '--', '+=', '-=', '*=', '/=', '&&', '||',
})

PUNCTUATION: FrozenSet[str] = frozenset('(){}[],;')

OPERATORS: FrozenSet[str] = frozenset('+-*/%<>!=.:')

WHITESPACE: FrozenSet[str] = frozenset(' \t\r\n')


def is_type_like(token: Token) -> bool:
    """True for keywords that may name the type of a following declaration.

    Built-in type keywords always qualify; any other keyword qualifies when
    its first character is not lowercase.
    """
    if token.category is not Category.KEYWORD:
        return False
    return token.lexeme in TYPE_KEYWORDS or not token.lexeme[0].islower()


def starts_type_name(lexeme: str) -> bool:
    """Keyword lexemes that leave a pending declared type behind them"""
    return lexeme in TYPE_KEYWORDS or lexeme[0].isupper()
