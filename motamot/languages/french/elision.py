"""
Slot-level elision: contracting adjacent words (je + ai -> j'ai).

`find_next_elision` returns only the leftmost mergeable pair because every
merge shifts the indices of the slots after it. Callers re-scan after each
splice until nothing is left; `reduce_to_fixed_point` does exactly that in
one synchronous call, and `iter_reductions` exposes the intermediate
sequences for callers that animate each step.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from motamot.core.constants import APOSTROPHE
from motamot.core.lexical import WordOrigin
from motamot.core.logging_setup import get_logger
from motamot.core.models import ElisionCandidate, SentenceSlot, Word
from motamot.languages.french.lexicon import ElisionRules, load_default_elision_rules

log = get_logger(__name__)


class ElisionEngine:
    """Detect and build contractions over an ordered slot sequence."""

    def __init__(self, rules: Optional[ElisionRules] = None) -> None:
        self.rules = rules or load_default_elision_rules()

    def should_elide(self, first: SentenceSlot, second: SentenceSlot) -> bool:
        """Whether `first` must contract onto `second`."""
        if first.value is None or second.value is None:
            return False
        w1 = first.value.text.lower()
        w2 = second.value.text.lower()

        if w1 not in self.rules.triggers:
            return False
        if not w2 or w2[0] not in self.rules.vowels:
            return False
        if w1 == "si" and not w2.startswith(self.rules.si_prefixes):
            return False
        if w1 == "ce" and not w2.startswith(self.rules.ce_prefixes):
            return False
        return True

    def merge(self, first: SentenceSlot, second: SentenceSlot) -> SentenceSlot:
        """
        Build the single slot replacing the pair (`first`, `second`).

        The merged word takes its category from the second word, keeps the
        first slot's id and the second slot's type and placeholder.
        """
        a, b = first.value, second.value
        prefix = a.text.lower()[:-1]
        merged_word = Word(
            text=f"{prefix}{APOSTROPHE}{b.text}",
            part_of_speech=b.part_of_speech,
            translation=f"{a.translation} + {b.translation}",
            tags=a.tags | b.tags,
            origin=WordOrigin.ELIDED,
        )
        return SentenceSlot(
            id=first.id,
            part_of_speech=second.part_of_speech,
            value=merged_word,
            placeholder=second.placeholder,
        )

    def find_next_elision(self, slots: Sequence[SentenceSlot]) -> Optional[ElisionCandidate]:
        """Leftmost adjacent pair that must contract, or None."""
        if not self.rules.triggers:
            return None
        for i in range(len(slots) - 1):
            if self.should_elide(slots[i], slots[i + 1]):
                return ElisionCandidate(position=i, merged_slot=self.merge(slots[i], slots[i + 1]))
        return None

    @staticmethod
    def apply(slots: Sequence[SentenceSlot], candidate: ElisionCandidate) -> Tuple[SentenceSlot, ...]:
        """Splice the merged slot in place of the pair at `candidate.position`."""
        i = candidate.position
        return tuple(slots[:i]) + (candidate.merged_slot,) + tuple(slots[i + 2 :])

    def iter_reductions(self, slots: Sequence[SentenceSlot]) -> Iterator[Tuple[SentenceSlot, ...]]:
        """Yield the slot sequence after each successive merge."""
        current = tuple(slots)
        candidate = self.find_next_elision(current)
        while candidate is not None:
            log.debug(
                "elide at %d -> %s",
                candidate.position,
                candidate.merged_slot.value.text,
            )
            current = self.apply(current, candidate)
            yield current
            candidate = self.find_next_elision(current)

    def reduce_to_fixed_point(self, slots: Sequence[SentenceSlot]) -> Tuple[SentenceSlot, ...]:
        """Apply merges until no candidate remains."""
        current = tuple(slots)
        for current in self.iter_reductions(current):
            pass
        return current


def find_next_elision(
    slots: Sequence[SentenceSlot],
    rules: Optional[ElisionRules] = None,
) -> Optional[ElisionCandidate]:
    return ElisionEngine(rules).find_next_elision(slots)


def reduce_to_fixed_point(
    slots: Sequence[SentenceSlot],
    rules: Optional[ElisionRules] = None,
) -> Tuple[SentenceSlot, ...]:
    return ElisionEngine(rules).reduce_to_fixed_point(slots)
