"""
French Language Module.

This module provides inflection, conjugation, elision and sentence assembly
for French.
"""

from motamot.languages.french.assembly import SentenceAssembler, apply_string_elision, assemble
from motamot.languages.french.conjugation import VerbConjugator, conjugate
from motamot.languages.french.elision import ElisionEngine, find_next_elision, reduce_to_fixed_point
from motamot.languages.french.inflection import WordFormGenerator, inflect
from motamot.languages.french.lexicon import (
    ElisionRules,
    FrenchLexicon,
    build_lexicon,
    load_default_elision_rules,
    load_default_lexicon,
    words_for_topic,
)

__all__ = [
    # Lexicon
    "FrenchLexicon",
    "ElisionRules",
    "build_lexicon",
    "load_default_lexicon",
    "load_default_elision_rules",
    "words_for_topic",
    # Morphology
    "WordFormGenerator",
    "inflect",
    "VerbConjugator",
    "conjugate",
    # Contraction
    "ElisionEngine",
    "find_next_elision",
    "reduce_to_fixed_point",
    "SentenceAssembler",
    "assemble",
    "apply_string_elision",
]
