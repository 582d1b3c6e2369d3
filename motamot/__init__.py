"""
motamot: a French sentence-building exercise engine.

This package inflects nouns and adjectives, conjugates verbs, contracts
adjacent words under French elision rules, and assembles the final sentence
string submitted for judging.
"""

__version__ = "0.1.0"
