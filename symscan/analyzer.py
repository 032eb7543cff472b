"""
Analysis Driver

Runs the scanner and the refinement pass over a source file or string.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from symscan.classifier import Classifier
from symscan.lexer import LexerDiagnostic, Scanner
from symscan.log import get_logger
from symscan.symbols import SymbolTable
from symscan.tokens import Token

logger = get_logger(__name__)

# Analyzed when no source file is given.
SAMPLE_SOURCE = r'''public class PotionBrewer {
    // Ingredient costs in gold coins
    private static final double HERB_PRICE = 5.50;
    private static final int MUSHROOM_PRICE = 3;
    private String brewerName;
    private double goldCoins;
    private int potionsBrewed;

    public PotionBrewer(String name, double startingGold) {
        this.brewerName = name;
        this.goldCoins = startingGold;
        this.potionsBrewed = 0;
    }

    public static void main(String[] args) {
        PotionBrewer wizard = new PotionBrewer("Gandalf, the Wise", 100.0);
        String[] ingredients = {"Mandrake Root", "Dragon Scale", "Phoenix Feather"};

        wizard.brewHealthPotion(3, 2); // 3 herbs, 2 mushrooms
        wizard.brewHealthPotion(5, 4);

        wizard.printStatus();
    }

    /* Brews a potion if we have enough gold */
    public void brewHealthPotion(int herbCount, int mushroomCount) {
        double totalCost = (herbCount * HERB_PRICE) + (mushroomCount * MUSHROOM_PRICE
);
        if (totalCost <= this.goldCoins) {
            this.goldCoins -= totalCost; // Deduct the cost
            this.potionsBrewed++;
            System.out.println("Success! Potion brewed for " + totalCost + " gold.");
        } else {
            System.out.println("Not enough gold! Need: " + totalCost);
        }
    }
    // Prints the current brewer status
    public void printStatus() {
        System.out.println("\n=== Brewer Status ===");
        System.out.println("Name: " + this.brewerName);
        System.out.println("Gold remaining: " + this.goldCoins);
        System.out.println("Potions brewed: " + this.potionsBrewed);
    }
}
'''


@dataclass
class AnalysisResult:
    """Result of analysis"""
    success: bool
    filename: str = "<input>"
    tokens: List[Token] = None
    symbols: Optional[SymbolTable] = None
    diagnostics: List[LexerDiagnostic] = None
    errors: List[str] = None
    class_name: Optional[str] = None

    def __post_init__(self):
        if self.tokens is None:
            self.tokens = []
        if self.symbols is None:
            self.symbols = SymbolTable()
        if self.diagnostics is None:
            self.diagnostics = []
        if self.errors is None:
            self.errors = []


class Analyzer:
    """Scan + refine driver"""

    def __init__(self, refine: bool = True, *, encoding: Optional[str] = None):
        self.refine = refine
        self.encoding = encoding or os.environ.get("SYMSCAN_ENCODING", "utf-8")

    def analyze_file(self, path: str) -> AnalysisResult:
        """Analyze a source file.

        Read failures (missing file, bad encoding) are reported in the
        result's ``errors`` rather than raised.
        """
        try:
            with open(path, 'r', encoding=self.encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logger.debug("cannot read %s: %s", path, e)
            return AnalysisResult(
                success=False,
                filename=path,
                errors=[f"Failed to read source file: {e}"],
            )
        return self.analyze_source(text, filename=path)

    def analyze_sample(self) -> AnalysisResult:
        return self.analyze_source(SAMPLE_SOURCE, filename="<sample>")

    def analyze_source(self, text: str, filename: str = "<input>") -> AnalysisResult:
        scanner = Scanner(text, filename)
        tokens, symbols = scanner.scan()
        class_name = scanner.state.current_class_name

        if self.refine:
            classifier = Classifier()
            classifier.refine(tokens, symbols)
            class_name = classifier.current_class_name or class_name

        return AnalysisResult(
            success=True,
            filename=filename,
            tokens=tokens,
            symbols=symbols,
            diagnostics=scanner.get_diagnostics(),
            class_name=class_name,
        )
