"""
symscan - heuristic lexer and symbol classifier for C-family source

Produces an ordered token stream and a symbol table that guesses each
identifier's role (class, method, field, parameter, local) without parsing.
"""

__version__ = "0.1.0"
__author__ = "symscan Contributors"
__license__ = "MIT"

from .tokens import Category, Token
from .cursor import Cursor, EOF
from .symbols import SymbolInfo, SymbolKind, SymbolTable
from .classifier import Classifier, ScanState, first_pass, refine
from .lexer import LexerDiagnostic, MalformedLiteral, Scanner, scan
from .analyzer import AnalysisResult, Analyzer

__all__ = [
    'Category',
    'Token',
    'Cursor',
    'EOF',
    'SymbolInfo',
    'SymbolKind',
    'SymbolTable',
    'Classifier',
    'ScanState',
    'first_pass',
    'refine',
    'LexerDiagnostic',
    'MalformedLiteral',
    'Scanner',
    'scan',
    'AnalysisResult',
    'Analyzer',
]
