"""
Caller-side slot sequence edits: placing, appending and removing words.

These are the operations the round screen performs on user actions. Each
returns a new tuple; the engine then reduces the result to its elision
fixed point.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from motamot.core.constants import ERROR_SLOT_NOT_FOUND
from motamot.core.errors import SlotNotFoundError
from motamot.core.lexical import PartOfSpeech
from motamot.core.models import SentenceSlot, Word, new_slot_id


def _index_of(slots: Sequence[SentenceSlot], slot_id: str) -> int:
    for i, slot in enumerate(slots):
        if slot.id == slot_id:
            return i
    raise SlotNotFoundError(ERROR_SLOT_NOT_FOUND.format(slot_id=slot_id))


def empty_slot(part_of_speech: PartOfSpeech, placeholder: Optional[str] = None) -> SentenceSlot:
    return SentenceSlot(
        id=new_slot_id(),
        part_of_speech=part_of_speech,
        placeholder=placeholder or part_of_speech.value,
    )


def assign_word(slots: Sequence[SentenceSlot], slot_id: str, word: Word) -> Tuple[SentenceSlot, ...]:
    """Place `word` in the slot `slot_id`; the slot takes the word's type."""
    i = _index_of(slots, slot_id)
    updated = slots[i].model_copy(update={"value": word, "part_of_speech": word.part_of_speech})
    return tuple(slots[:i]) + (updated,) + tuple(slots[i + 1 :])


def append_word(slots: Sequence[SentenceSlot], word: Word) -> Tuple[SentenceSlot, ...]:
    return tuple(slots) + (SentenceSlot.for_word(word),)


def remove_slot(slots: Sequence[SentenceSlot], slot_id: str) -> Tuple[SentenceSlot, ...]:
    i = _index_of(slots, slot_id)
    return tuple(slots[:i]) + tuple(slots[i + 1 :])


def slots_from_words(words: Sequence[Word]) -> Tuple[SentenceSlot, ...]:
    """One filled slot per word, in order."""
    return tuple(SentenceSlot.for_word(word) for word in words)
