"""
Exceptions raised by motamot.

Engine operations are total over the closed vocabulary: an unsupported verb,
a no-op inflection or the absence of an elision candidate are ordinary
results, not errors. The exceptions below cover caller mistakes only.
"""

from __future__ import annotations


class MotamotError(Exception):
    """Base class for all motamot errors."""


class UnknownFeatureError(MotamotError, ValueError):
    """A gender, number, topic or part-of-speech string is not recognised."""


class IncompleteSentenceError(MotamotError):
    """Assembly was requested while some slots are still empty."""

    def __init__(self, message: str, empty_slot_ids=()) -> None:
        super().__init__(message)
        self.empty_slot_ids = tuple(empty_slot_ids)


class SlotNotFoundError(MotamotError, KeyError):
    """A slot id does not exist in the sentence."""

    def __str__(self) -> str:  # KeyError quotes its argument otherwise
        return str(self.args[0]) if self.args else ""
