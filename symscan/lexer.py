"""
Lexical Analyzer (Scanner) for symscan

Converts source text into a stream of tokens and fills the symbol table
with first-pass guesses as identifiers go by.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from symscan.classifier import ScanState, first_pass, refine as refine_symbols
from symscan.cursor import EOF, Cursor
from symscan.log import get_logger
from symscan.symbols import SymbolTable
from symscan.tokens import (
    COMPOUND_OPERATORS,
    KEYWORDS,
    OPERATORS,
    PUNCTUATION,
    WHITESPACE,
    Category,
    Token,
    starts_type_name,
)

logger = get_logger(__name__)


class LexerDiagnostic(Exception):
    """Lexer diagnostic with line and column information"""
    def __init__(self, message: str, line: int, column: int):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} at {line}:{column}")


class MalformedLiteral(LexerDiagnostic):
    """Unterminated string or block comment, or a numeral with two decimal points.

    Never fatal: the scanner keeps whatever it captured and moves on.
    """


def _is_digit(char: Optional[str]) -> bool:
    return char is not None and '0' <= char <= '9'


def _is_identifier_start(char: Optional[str]) -> bool:
    return char is not None and (char.isalpha() or char in '_$')


def _is_identifier_part(char: Optional[str]) -> bool:
    return char is not None and (char.isalnum() or char in '_$')


class Scanner:
    """Lexical analyzer with online symbol classification.

    Instances own all their state; use one per source text.
    """

    def __init__(
        self,
        text: str,
        filename: str = "<input>",
        on_diagnostic: Optional[Callable[[LexerDiagnostic], None]] = None,
    ):
        self.text = text
        self.filename = filename
        self._on_diagnostic = on_diagnostic
        self.cursor = Cursor(text)
        self.state = ScanState()
        self.tokens: List[Token] = []
        self.symbols = SymbolTable()
        self.diagnostics: List[LexerDiagnostic] = []

    def scan(self) -> Tuple[List[Token], SymbolTable]:
        """Tokenize the entire text.

        Returns the token list and the symbol table as left by the first
        pass. Whitespace and comments produce no tokens.
        """
        self.cursor = Cursor(self.text)
        self.state = ScanState()
        self.tokens = []
        self.symbols = SymbolTable()
        self.diagnostics = []

        cursor = self.cursor
        while not cursor.at_end():
            char = cursor.peek()
            token_line = cursor.line
            token_column = cursor.column

            if char in WHITESPACE:
                cursor.advance()
                continue

            # Comments
            if char == '/' and cursor.peek(1) == '/':
                self.skip_line_comment()
                continue
            if char == '/' and cursor.peek(1) == '*':
                self.skip_block_comment(token_line, token_column)
                continue

            if _is_identifier_start(char):
                # Keywords and identifiers manage the declaration flags themselves.
                self.read_word(token_line, token_column)
                continue

            if char == '"':
                self.read_string(token_line, token_column)
            elif _is_digit(char):
                self.read_number(token_line, token_column)
            else:
                self.read_symbol(token_line, token_column)

            self.state.clear_declaration()

        logger.debug(
            "%s: %d tokens, %d symbols, %d diagnostics",
            self.filename, len(self.tokens), len(self.symbols), len(self.diagnostics),
        )
        return self.tokens, self.symbols

    def skip_line_comment(self) -> None:
        """Skip single-line comment (//...), leaving the newline in place"""
        self.cursor.advance()
        self.cursor.advance()
        while self.cursor.peek() not in (EOF, '\n'):
            self.cursor.advance()

    def skip_block_comment(self, line: int, column: int) -> None:
        """Skip multi-line comment (/* ... */)"""
        cursor = self.cursor
        cursor.advance()  # skip /
        cursor.advance()  # skip *

        while not cursor.at_end():
            char = cursor.advance()
            if char == '*' and cursor.peek() == '/':
                cursor.advance()
                return

        self._report(MalformedLiteral("Unterminated block comment", line, column))

    def read_string(self, line: int, column: int) -> Token:
        """Read a string literal, keeping escapes verbatim.

        An unclosed literal ends at the newline (or EOF) and gets a closing
        quote appended to its lexeme.
        """
        cursor = self.cursor
        start = cursor.position
        cursor.advance()  # opening quote

        closed = False
        while True:
            char = cursor.peek()
            if char is EOF:
                self._report(MalformedLiteral("Unterminated string literal", line, column))
                break
            if char == '\n':
                self._report(MalformedLiteral(
                    "Unterminated string literal, closed at end of line", line, column))
                break
            cursor.advance()
            if char == '\\':
                if cursor.peek() is not EOF:
                    cursor.advance()
                continue
            if char == '"':
                closed = True
                break

        lexeme = cursor.text_since(start)
        if not closed:
            lexeme += '"'
        return self._emit(Category.CONSTANT, lexeme, line, column, "string")

    def read_number(self, line: int, column: int) -> Token:
        """Read an int or double literal"""
        cursor = self.cursor
        start = cursor.position
        value_type = "int"

        while _is_digit(cursor.peek()):
            cursor.advance()

        if cursor.peek() == '.':
            value_type = "double"
            cursor.advance()
            while _is_digit(cursor.peek()):
                cursor.advance()
            if cursor.peek() == '.':
                # Emit what we have; the second dot is scanned as an operator.
                self._report(MalformedLiteral(
                    f"Malformed numeric literal {cursor.text_since(start)!r} (multiple decimal points)",
                    line, column,
                ))

        return self._emit(Category.CONSTANT, cursor.text_since(start), line, column, value_type)

    def read_word(self, line: int, column: int) -> Token:
        """Read identifier or keyword"""
        cursor = self.cursor
        start = cursor.position
        cursor.advance()
        while _is_identifier_part(cursor.peek()):
            cursor.advance()
        lexeme = cursor.text_since(start)

        if lexeme in KEYWORDS:
            token = self._emit(Category.KEYWORD, lexeme, line, column)
            self.state.just_saw_class_keyword = lexeme == 'class'
            self.state.pending_declared_type = lexeme if starts_type_name(lexeme) else None
            return token

        token = self._emit(Category.IDENTIFIER, lexeme, line, column)
        first_pass(self.symbols, token, self.state, cursor.peek())
        return token

    def read_symbol(self, line: int, column: int) -> Token:
        """Read an operator or punctuation character (or pair)"""
        cursor = self.cursor
        char = cursor.advance()
        pair = char + (cursor.peek() or "")

        if pair in COMPOUND_OPERATORS:
            cursor.advance()
            return self._emit(Category.OPERATOR, pair, line, column)

        if char in PUNCTUATION:
            if char == '(':
                self.state.inside_parameter_list = True
            elif char == ')':
                self.state.inside_parameter_list = False
            return self._emit(Category.PUNCTUATION, char, line, column)

        if char in OPERATORS:
            return self._emit(Category.OPERATOR, char, line, column)

        logger.debug("%s: unrecognized character %r at %d:%d", self.filename, char, line, column)
        return self._emit(Category.PUNCTUATION, char, line, column)

    def _emit(
        self,
        category: Category,
        lexeme: str,
        line: int,
        column: int,
        value_type: Optional[str] = None,
    ) -> Token:
        token = Token(category, lexeme, line, column, value_type)
        self.tokens.append(token)
        return token

    def _report(self, diagnostic: LexerDiagnostic) -> None:
        self.diagnostics.append(diagnostic)
        logger.debug("%s: %s", self.filename, diagnostic)
        if self._on_diagnostic is not None:
            self._on_diagnostic(diagnostic)

    def has_diagnostics(self) -> bool:
        """Check if any lexer diagnostics occurred"""
        return len(self.diagnostics) > 0

    def get_diagnostics(self) -> List[LexerDiagnostic]:
        """Get all lexer diagnostics"""
        return self.diagnostics


def scan(text: str, filename: str = "<input>", refine: bool = True) -> Tuple[List[Token], SymbolTable]:
    """Tokenize ``text`` and classify its identifiers.

    With ``refine`` (the default) the refinement pass runs over the token
    list before the symbol table is returned.
    """
    tokens, symbols = Scanner(text, filename).scan()
    if refine:
        refine_symbols(tokens, symbols)
    return tokens, symbols
