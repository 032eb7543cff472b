"""
Plain-text rendering of tokens and symbol table entries.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from symscan.symbols import SymbolInfo, SymbolTable
from symscan.tokens import Token


def format_token(token: Token) -> str:
    value_type = f" <{token.value_type}>" if token.value_type else ""
    lexeme = f'"{token.lexeme}"'
    return f"{token.line:3d}:{token.column:<3d}  {lexeme:<30} {token.category.value:<12}{value_type}".rstrip()


def format_symbol(info: SymbolInfo) -> str:
    return "%-20s %-12s %-12s %4d:%-3d  occurrences=%d" % (
        info.name,
        info.kind.value,
        info.declared_type or "-",
        info.first_line,
        info.first_column,
        info.occurrences,
    )


def render_tokens(tokens: Iterable[Token]) -> List[str]:
    lines = ["=== Tokens ==="]
    lines.extend(format_token(t) for t in tokens)
    return lines


def render_symbols(symbols: SymbolTable, class_name: Optional[str] = None) -> List[str]:
    """Render the symbol table in first-sighting order.

    When ``class_name`` is given, it is shown under the header.
    """
    lines = ["=== Symbol Table ==="]
    if class_name:
        lines.append(f"class: {class_name}")
    lines.extend(format_symbol(info) for info in symbols.values())
    return lines
