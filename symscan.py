#!/usr/bin/env python3
"""symscan - top-level CLI wrapper

Compatible with Python 3.8+.

Usage examples:
  ./symscan.py                      # analyze the built-in sample program
  ./symscan.py Example.java
  ./symscan.py Example.java --symbols-only --no-refine
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from symscan.analyzer import Analyzer
from symscan.log import get_logger
from symscan.printer import render_symbols, render_tokens

logger = get_logger("cli")


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    ap = argparse.ArgumentParser(prog="symscan", description="Tokenize source and build a symbol table")
    ap.add_argument("source", nargs="?", help="Input source file (default: built-in sample)")
    only = ap.add_mutually_exclusive_group()
    only.add_argument("--tokens-only", action="store_true", help="Print only the token list")
    only.add_argument("--symbols-only", action="store_true", help="Print only the symbol table")
    ap.add_argument("--no-refine", action="store_true", help="Skip the refinement pass")
    ap.add_argument("--encoding", default=None, help="Source encoding (default: $SYMSCAN_ENCODING or utf-8)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    analyzer = Analyzer(refine=not args.no_refine, encoding=args.encoding)
    if args.source is None:
        result = analyzer.analyze_sample()
    else:
        result = analyzer.analyze_file(args.source)

    if not result.success:
        for e in result.errors:
            print("Error:", e)
        return 1

    for diag in result.diagnostics:
        logger.warning("%s: %s", result.filename, diag)

    lines: List[str] = []
    if not args.symbols_only:
        lines.extend(render_tokens(result.tokens))
    if not args.tokens_only:
        if lines:
            lines.append("")
        lines.extend(render_symbols(result.symbols, result.class_name))
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
