"""
Character cursor used by the scanner.

Owns the source buffer and the position/line/column counters.
"""

from __future__ import annotations

from typing import Optional

# Returned by peek()/advance() once the buffer is exhausted.
EOF = None


class Cursor:
    """Character-level view over a source string"""

    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Look at a character without consuming it"""
        pos = self.position + offset
        if pos >= len(self.text):
            return EOF
        return self.text[pos]

    def advance(self) -> Optional[str]:
        """Consume and return current character"""
        if self.position >= len(self.text):
            return EOF

        char = self.text[self.position]
        self.position += 1

        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def text_since(self, start: int) -> str:
        """Source text consumed from ``start`` up to the current position"""
        return self.text[start:self.position]
