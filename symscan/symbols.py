"""symscan.symbols

Symbol table built from identifier tokens.

Entries are keyed by identifier text only. There is no scope tracking: a
field and an unrelated local sharing a name collapse into one entry, and
whichever heuristic touches it last decides its kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from symscan.tokens import Token


class SymbolKind(str, Enum):
    """Syntactic role attributed to an identifier"""
    CLASS = "class"
    METHOD = "method"
    FIELD = "field"
    PARAMETER = "parameter"
    LOCAL = "local"
    UNKNOWN = "unknown"


@dataclass
class SymbolInfo:
    name: str
    first_line: int
    first_column: int
    kind: SymbolKind = SymbolKind.UNKNOWN
    declared_type: Optional[str] = None
    occurrences: int = 1

    def bump(self) -> None:
        self.occurrences += 1


class SymbolTable:
    """Insertion-ordered mapping from identifier text to SymbolInfo"""

    def __init__(self):
        self._symbols: Dict[str, SymbolInfo] = {}

    def record(self, token: Token) -> Tuple[SymbolInfo, bool]:
        """Register a sighting of ``token``.

        Returns the entry and whether this was its first sighting.
        """
        info = self._symbols.get(token.lexeme)
        if info is None:
            info = SymbolInfo(token.lexeme, token.line, token.column)
            self._symbols[token.lexeme] = info
            return info, True
        info.bump()
        return info, False

    def get(self, name: str) -> Optional[SymbolInfo]:
        return self._symbols.get(name)

    def names(self) -> List[str]:
        return list(self._symbols)

    def items(self):
        return self._symbols.items()

    def values(self):
        return self._symbols.values()

    def __getitem__(self, name: str) -> SymbolInfo:
        return self._symbols[name]

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({list(self._symbols.values())!r})"
