"""
Core Package.

This package provides the data model, vocabularies, errors and logging
shared by the rest of motamot.
"""

from motamot.core.errors import IncompleteSentenceError, MotamotError, SlotNotFoundError, UnknownFeatureError
from motamot.core.lexical import Gender, Number, PartOfSpeech, Tense, Topic, WordOrigin
from motamot.core.models import (
    ConjugationParadigm,
    ElisionCandidate,
    EngineConfig,
    JudgeSubmission,
    JudgeVerdict,
    SentenceSlot,
    Word,
)

__all__ = [
    # Vocabularies
    "PartOfSpeech",
    "Gender",
    "Number",
    "WordOrigin",
    "Topic",
    "Tense",
    # Models
    "Word",
    "SentenceSlot",
    "ConjugationParadigm",
    "ElisionCandidate",
    "EngineConfig",
    "JudgeSubmission",
    "JudgeVerdict",
    # Errors
    "MotamotError",
    "UnknownFeatureError",
    "IncompleteSentenceError",
    "SlotNotFoundError",
]
