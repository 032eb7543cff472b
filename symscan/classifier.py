"""symscan.classifier

Heuristic identifier classification.

Two passes share the symbol table:
- ``first_pass`` runs online, once per identifier token, using only the
  context the scanner has already seen (``ScanState``) plus one character
  of lookahead.
- ``refine`` runs over the finished token list with a small lookahead and
  lookbehind window and corrects or fills in what the first pass guessed.

Neither pass parses anything. Both are best-effort and never fail.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from symscan.symbols import SymbolInfo, SymbolKind, SymbolTable
from symscan.tokens import MODIFIERS, Category, Token, is_type_like


@dataclass
class ScanState:
    """Context flags carried across token boundaries during one scan"""
    pending_declared_type: Optional[str] = None
    # Flat flag, not a stack: any ')' clears it, even a nested one.
    inside_parameter_list: bool = False
    just_saw_class_keyword: bool = False
    current_class_name: Optional[str] = None

    def clear_declaration(self) -> None:
        self.pending_declared_type = None
        self.just_saw_class_keyword = False


def first_pass(
    table: SymbolTable,
    token: Token,
    state: ScanState,
    next_char: Optional[str],
) -> SymbolInfo:
    """Record an identifier token and guess its role.

    ``next_char`` is the character immediately after the identifier (None
    at end of input). The pending declared type and the ``class`` flag are
    consumed by every identifier, whatever the outcome.
    """
    info, first_sighting = table.record(token)
    pending = state.pending_declared_type

    if first_sighting:
        if state.just_saw_class_keyword:
            info.kind = SymbolKind.CLASS
            state.current_class_name = token.lexeme
        elif pending is not None:
            if next_char == '(':
                info.kind = SymbolKind.METHOD
            elif state.inside_parameter_list:
                info.kind = SymbolKind.PARAMETER
            else:
                info.kind = SymbolKind.FIELD
            info.declared_type = pending
    elif pending is not None and info.declared_type is None and info.kind is not SymbolKind.CLASS:
        info.declared_type = pending

    state.clear_declaration()
    return info


class Classifier:
    """Refinement pass over a complete token list"""

    # Tokens inspected before a declaration when looking for a modifier.
    MODIFIER_WINDOW = 6

    # Kinds a plain declaration pattern must not downgrade.
    SETTLED_KINDS = frozenset({SymbolKind.CLASS, SymbolKind.METHOD, SymbolKind.PARAMETER})

    def __init__(self):
        self.current_class_name: Optional[str] = None

    def refine(self, tokens: Sequence[Token], table: SymbolTable) -> SymbolTable:
        """Correct symbol kinds in place and return the table"""
        for i, tok in enumerate(tokens):
            if is_type_like(tok) and i + 2 < len(tokens):
                self._refine_declaration(tokens, i, table)
            if tok.is_keyword('class') and i + 1 < len(tokens):
                self._refine_class(tokens[i + 1], table)
        return table

    def _refine_declaration(self, tokens: Sequence[Token], i: int, table: SymbolTable) -> None:
        type_tok = tokens[i]
        cand = tokens[i + 1]
        follow = tokens[i + 2]
        if cand.category is not Category.IDENTIFIER:
            return
        info = table.get(cand.lexeme)
        if info is None:
            return

        if follow.is_punctuation('('):
            if info.kind is not SymbolKind.CLASS:
                info.kind = SymbolKind.METHOD
                info.declared_type = type_tok.lexeme
        elif follow.is_operator('=') or follow.is_punctuation(';', ','):
            if info.kind in self.SETTLED_KINDS:
                return
            if self._has_modifier_before(tokens, i):
                info.kind = SymbolKind.FIELD
            else:
                info.kind = SymbolKind.LOCAL
            info.declared_type = type_tok.lexeme

    def _refine_class(self, cand: Token, table: SymbolTable) -> None:
        if cand.category is not Category.IDENTIFIER:
            return
        info = table.get(cand.lexeme)
        if info is not None:
            info.kind = SymbolKind.CLASS
            info.declared_type = None
        self.current_class_name = cand.lexeme

    def _has_modifier_before(self, tokens: Sequence[Token], i: int) -> bool:
        start = max(0, i - self.MODIFIER_WINDOW)
        return any(t.is_keyword(*MODIFIERS) for t in tokens[start:i])


def refine(tokens: Sequence[Token], table: SymbolTable) -> SymbolTable:
    return Classifier().refine(tokens, table)
