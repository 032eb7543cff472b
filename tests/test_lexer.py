"""
Unit tests for the Scanner module
"""

import pytest
from symscan.lexer import Scanner, LexerDiagnostic, MalformedLiteral, scan
from symscan.symbols import SymbolKind
from symscan.tokens import Category, Token


def lex(text):
    scanner = Scanner(text)
    tokens, _ = scanner.scan()
    return scanner, tokens


class TestScannerBasics:
    """Test basic scanner functionality"""

    def test_empty_input(self):
        """Test scanner with empty input"""
        scanner, tokens = lex("")
        assert tokens == []
        assert len(scanner.symbols) == 0
        assert not scanner.has_diagnostics()

    def test_whitespace_only(self):
        """Whitespace produces no tokens"""
        _, tokens = lex(" \t\r\n  \n")
        assert tokens == []

    def test_single_identifier(self):
        """Test lexing a single identifier"""
        _, tokens = lex("hello")
        assert len(tokens) == 1
        assert tokens[0].category == Category.IDENTIFIER
        assert tokens[0].lexeme == "hello"

    def test_multiple_identifiers(self):
        """Test lexing multiple identifiers"""
        _, tokens = lex("hello world foo")
        assert len(tokens) == 3
        assert all(t.category == Category.IDENTIFIER for t in tokens)

    def test_tokens_are_immutable(self):
        _, tokens = lex("x")
        with pytest.raises(AttributeError):
            tokens[0].lexeme = "y"

    def test_rescan_starts_fresh(self):
        scanner = Scanner("int x;")
        first, _ = scanner.scan()
        second, symbols = scanner.scan()
        assert [t.lexeme for t in first] == [t.lexeme for t in second]
        assert symbols["x"].occurrences == 1


class TestKeywords:
    """Test keyword recognition"""

    def test_if_keyword(self):
        """Test 'if' keyword"""
        _, tokens = lex("if")
        assert tokens[0].category == Category.KEYWORD
        assert tokens[0].lexeme == "if"

    def test_reserved_words(self):
        """Test recognition of the reserved words"""
        keywords = (
            "public private protected static final class int double void String "
            "new this return if else for while switch case break continue boolean true false"
        )
        _, tokens = lex(keywords)
        assert len(tokens) == len(keywords.split())
        assert all(t.category == Category.KEYWORD for t in tokens)

    def test_keyword_vs_identifier(self):
        """Test keyword vs identifier distinction"""
        _, tokens = lex("int integer")
        assert tokens[0].category == Category.KEYWORD
        assert tokens[0].lexeme == "int"
        assert tokens[1].category == Category.IDENTIFIER
        assert tokens[1].lexeme == "integer"

    def test_keywords_are_case_sensitive(self):
        _, tokens = lex("string Int")
        assert all(t.category == Category.IDENTIFIER for t in tokens)

    def test_keywords_not_in_symbol_table(self):
        scanner, _ = lex("public static void")
        assert len(scanner.symbols) == 0


class TestNumbers:
    """Test number literal lexing"""

    def test_decimal_integer(self):
        """Test decimal integer"""
        _, tokens = lex("123")
        assert tokens[0].category == Category.CONSTANT
        assert tokens[0].lexeme == "123"
        assert tokens[0].value_type == "int"

    def test_double_literal(self):
        """Test double literal"""
        _, tokens = lex("3.14")
        assert tokens[0].lexeme == "3.14"
        assert tokens[0].value_type == "double"

    def test_trailing_dot_is_double(self):
        _, tokens = lex("10.")
        assert len(tokens) == 1
        assert tokens[0].lexeme == "10."
        assert tokens[0].value_type == "double"

    def test_multiple_numbers(self):
        """Test multiple numbers"""
        _, tokens = lex("10 20 30")
        assert len(tokens) == 3
        assert all(t.category == Category.CONSTANT for t in tokens)

    def test_second_decimal_point(self):
        """A second dot ends the literal and is scanned on its own"""
        scanner, tokens = lex("3.14.5")
        assert [(t.category, t.lexeme) for t in tokens] == [
            (Category.CONSTANT, "3.14"),
            (Category.OPERATOR, "."),
            (Category.CONSTANT, "5"),
        ]
        assert tokens[0].value_type == "double"
        assert tokens[1].column == 5
        assert len(scanner.diagnostics) == 1
        diag = scanner.diagnostics[0]
        assert isinstance(diag, MalformedLiteral)
        assert (diag.line, diag.column) == (1, 1)

    def test_double_dot_after_integer_part(self):
        scanner, tokens = lex("1..2")
        assert [t.lexeme for t in tokens] == ["1.", ".", "2"]
        assert len(scanner.diagnostics) == 1

    def test_digits_then_letters(self):
        _, tokens = lex("2abc")
        assert tokens[0].category == Category.CONSTANT
        assert tokens[0].lexeme == "2"
        assert tokens[1].category == Category.IDENTIFIER
        assert tokens[1].lexeme == "abc"


class TestStrings:
    """Test string literal lexing"""

    def test_simple_string(self):
        """Test simple string"""
        _, tokens = lex('"hello"')
        assert tokens[0].category == Category.CONSTANT
        assert tokens[0].lexeme == '"hello"'
        assert tokens[0].value_type == "string"

    def test_string_with_spaces(self):
        """Test string with spaces"""
        _, tokens = lex('"hello world"')
        assert len(tokens) == 1
        assert tokens[0].lexeme == '"hello world"'

    def test_string_with_escape(self):
        """Escape sequences are kept verbatim"""
        _, tokens = lex('"hello\\nworld"')
        assert tokens[0].lexeme == '"hello\\nworld"'

    def test_escaped_quote_does_not_close(self):
        _, tokens = lex('"a\\"b" x')
        assert tokens[0].lexeme == '"a\\"b"'
        assert tokens[1].lexeme == "x"

    def test_string_contents_are_not_tokens(self):
        scanner, tokens = lex('"int x = 5;"')
        assert len(tokens) == 1
        assert len(scanner.symbols) == 0

    def test_unterminated_string_at_newline(self):
        """Test unterminated string closed at end of line"""
        scanner, tokens = lex('"abc\nx')
        assert tokens[0].category == Category.CONSTANT
        assert tokens[0].lexeme == '"abc"'
        assert tokens[1].lexeme == "x"
        assert (tokens[1].line, tokens[1].column) == (2, 1)
        assert len(scanner.get_diagnostics()) == 1

    def test_unterminated_string_at_eof(self):
        """Test unterminated string"""
        scanner, tokens = lex('"unterminated')
        assert len(tokens) == 1
        assert tokens[0].lexeme == '"unterminated"'
        assert scanner.has_diagnostics()

    def test_character_literal_is_not_a_string(self):
        _, tokens = lex("'a'")
        assert [(t.category, t.lexeme) for t in tokens] == [
            (Category.PUNCTUATION, "'"),
            (Category.IDENTIFIER, "a"),
            (Category.PUNCTUATION, "'"),
        ]


class TestOperators:
    """Test operator lexing"""

    def test_single_character_operators(self):
        """Test single-character operators"""
        _, tokens = lex("+ - * / % < > ! = . :")
        assert [t.lexeme for t in tokens] == "+ - * / % < > ! = . :".split()
        assert all(t.category == Category.OPERATOR for t in tokens)

    def test_compound_operators(self):
        """Test two-character operators"""
        ops = "== <= >= != ++ -- += -= *= /= && ||"
        _, tokens = lex(ops)
        assert [t.lexeme for t in tokens] == ops.split()
        assert all(t.category == Category.OPERATOR for t in tokens)

    def test_consecutive_operators(self):
        """Test consecutive operators"""
        _, tokens = lex("++i--i")
        assert tokens[0].lexeme == "++"
        assert tokens[1].category == Category.IDENTIFIER
        assert tokens[2].lexeme == "--"

    def test_member_access_dot(self):
        _, tokens = lex("this.goldCoins")
        assert tokens[1].category == Category.OPERATOR
        assert tokens[1].lexeme == "."

    def test_lone_ampersand_falls_back_to_punctuation(self):
        _, tokens = lex("& |")
        assert all(t.category == Category.PUNCTUATION for t in tokens)


class TestPunctuation:
    """Test punctuation lexing"""

    def test_all_punctuation(self):
        _, tokens = lex("( ) { } [ ] , ;")
        assert [t.lexeme for t in tokens] == list("(){}[],;")
        assert all(t.category == Category.PUNCTUATION for t in tokens)

    def test_unexpected_character(self):
        """Unexpected characters become punctuation, never diagnostics"""
        scanner, tokens = lex("int x = 5 @;")
        assert tokens[4].category == Category.PUNCTUATION
        assert tokens[4].lexeme == "@"
        assert not scanner.has_diagnostics()


class TestComments:
    """Test comment handling"""

    def test_single_line_comment(self):
        """Test single-line comment"""
        _, tokens = lex("int x; // comment")
        assert [t.lexeme for t in tokens] == ["int", "x", ";"]

    def test_line_comment_keeps_newline(self):
        _, tokens = lex("// comment\nx")
        assert (tokens[0].line, tokens[0].column) == (2, 1)

    def test_multi_line_comment(self):
        """Test multi-line comment"""
        _, tokens = lex("int /* comment */ x;")
        assert [t.lexeme for t in tokens] == ["int", "x", ";"]

    def test_block_comment_tracks_lines(self):
        _, tokens = lex("/* a\nb\n*/ x")
        assert (tokens[0].line, tokens[0].column) == (3, 4)

    def test_nested_comment_attempt(self):
        """The first */ closes the comment"""
        _, tokens = lex("/* /* nested */ */")
        assert [(t.category, t.lexeme) for t in tokens] == [
            (Category.OPERATOR, "*"),
            (Category.OPERATOR, "/"),
        ]

    def test_unterminated_block_comment(self):
        scanner, tokens = lex("a /* never closed")
        assert [t.lexeme for t in tokens] == ["a"]
        assert len(scanner.diagnostics) == 1
        diag = scanner.diagnostics[0]
        assert isinstance(diag, MalformedLiteral)
        assert (diag.line, diag.column) == (1, 3)
        assert "1:3" in str(diag)


class TestLineAndColumn:
    """Test line and column tracking"""

    def test_single_line_position(self):
        """Test position tracking on single line"""
        _, tokens = lex("int x")
        assert (tokens[0].line, tokens[0].column) == (1, 1)
        assert tokens[1].line == 1

    def test_multiline_position(self):
        """Test position tracking across multiple lines"""
        _, tokens = lex("int\nx")
        assert tokens[0].line == 1
        assert tokens[1].line == 2

    def test_column_tracking(self):
        """Test column tracking"""
        _, tokens = lex("int x y")
        assert tokens[0].column == 1
        # "int " is 4 chars
        assert tokens[1].column == 5

    def test_tab_counts_as_one_column(self):
        _, tokens = lex("\tx")
        assert tokens[0].column == 2

    def test_crlf_line_endings(self):
        _, tokens = lex("a\r\nb")
        assert (tokens[1].line, tokens[1].column) == (2, 1)


class TestScanState:
    """Test the declaration flags carried between tokens"""

    def test_type_keyword_leaves_pending_type(self):
        scanner, _ = lex("int")
        assert scanner.state.pending_declared_type == "int"

    def test_other_keyword_clears_pending_type(self):
        scanner, _ = lex("int return")
        assert scanner.state.pending_declared_type is None

    def test_punctuation_clears_pending_type(self):
        scanner, _ = lex("int ;")
        assert scanner.state.pending_declared_type is None

    def test_class_flag_lasts_one_token(self):
        scanner, _ = lex("class")
        assert scanner.state.just_saw_class_keyword
        scanner, _ = lex("class public")
        assert not scanner.state.just_saw_class_keyword

    def test_parentheses_toggle_parameter_list(self):
        scanner, _ = lex("f(")
        assert scanner.state.inside_parameter_list
        scanner, _ = lex("f()")
        assert not scanner.state.inside_parameter_list

    def test_pending_type_survives_comments(self):
        scanner, _ = lex("int /* count */ x;")
        assert scanner.symbols["x"].declared_type == "int"

    def test_nested_parentheses_reset_parameter_list(self):
        # The flag is flat: the inner ')' ends the parameter list early.
        scanner, _ = lex("f(g(a), int b)")
        assert scanner.symbols["b"].kind == SymbolKind.FIELD


class TestDiagnostics:
    """Test diagnostic collection"""

    def test_callback_receives_diagnostics(self):
        seen = []
        scanner = Scanner('"open\n/* open', on_diagnostic=seen.append)
        scanner.scan()
        assert len(seen) == 2
        assert seen == scanner.get_diagnostics()
        assert all(isinstance(d, LexerDiagnostic) for d in seen)

    def test_well_formed_input_has_no_diagnostics(self):
        scanner, _ = lex('class A { int x = 1; String s = "ok"; }')
        assert not scanner.has_diagnostics()


class TestScanFunction:
    """Test the module-level scan() entry point"""

    def test_returns_refined_symbols(self):
        tokens, symbols = scan("int x = 5;")
        assert len(tokens) == 5
        assert symbols["x"].kind == SymbolKind.LOCAL

    def test_refinement_can_be_skipped(self):
        _, symbols = scan("int x = 5;", refine=False)
        assert symbols["x"].kind == SymbolKind.FIELD

    def test_token_repr(self):
        tokens, _ = scan("5")
        assert repr(tokens[0]) == "Token(CONSTANT, '5', 1:1 <int>)"
        assert tokens[0] == Token(Category.CONSTANT, "5", 1, 1, "int")


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
