"""Text pre-processing and segmentation components.

This package provides the pattern builder, substitution processors,
pre-processors, tokenizer, minimizer and cleaner used by the pipeline.
"""

from .cleaners import TokenCleaner, clean_tokens
from .minimizer import minimize
from .patterns import Condition, PatternBuilder, PatternTemplate, PositionalCondition
from .preprocessors import (
    AbbreviationPeriodRemoval,
    EndOfLineHyphenJoin,
    PreProcessorPipeline,
    ToneMarkSpacing,
    WordSubstitution,
)
from .substitution import SubstitutionProcessor, WordSubstitutionProcessor
from .symbols import SymbolTable
from .tokenizer import SplitRule, Tokenizer

__all__ = [
    "AbbreviationPeriodRemoval",
    "Condition",
    "EndOfLineHyphenJoin",
    "PatternBuilder",
    "PatternTemplate",
    "PositionalCondition",
    "PreProcessorPipeline",
    "SplitRule",
    "SubstitutionProcessor",
    "SymbolTable",
    "TokenCleaner",
    "Tokenizer",
    "ToneMarkSpacing",
    "WordSubstitution",
    "WordSubstitutionProcessor",
    "clean_tokens",
    "minimize",
]
