"""
Core domain models for the sentence-building engine.

Defines immutable structures for words, sentence slots, conjugation
paradigms and elision merge descriptors, the data exchanged with the
external judge, and an engine configuration model.
"""

from __future__ import annotations

import uuid
from typing import FrozenSet, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from motamot.core.lexical import (
    FEMININE_TAGS,
    PartOfSpeech,
    Tense,
    Topic,
    WordOrigin,
)


def new_slot_id() -> str:
    """Generate a fresh slot identifier."""
    return f"slot-{uuid.uuid4().hex[:12]}"


class EngineConfig(BaseModel):
    """Configuration for a sentence-building round."""

    topic: Topic = Topic.DAILY_LIFE
    tense: Tense = Tense.PRESENT
    require_complete: bool = False


class Word(BaseModel):
    """A surface form with its category, gloss and descriptors.

    Words are never mutated: inflection, conjugation and elision all build
    new instances.
    """

    text: str
    part_of_speech: PartOfSpeech
    translation: str = ""
    tags: FrozenSet[str] = Field(default_factory=frozenset)
    origin: WordOrigin = WordOrigin.BASE

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        text: str,
        part_of_speech: PartOfSpeech,
        translation: str = "",
        tags: Iterable[str] = (),
    ) -> "Word":
        return cls(
            text=text,
            part_of_speech=part_of_speech,
            translation=translation,
            tags=frozenset(tags),
        )

    def with_text(self, text: str, tags: Optional[Iterable[str]] = None) -> "Word":
        """Copy of this word with a new surface form (and optionally new tags)."""
        update = {"text": text}
        if tags is not None:
            update["tags"] = frozenset(tags)
        return self.model_copy(update=update)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @property
    def is_feminine(self) -> bool:
        return bool(self.tags & FEMININE_TAGS)

    @property
    def is_elided(self) -> bool:
        return self.origin == WordOrigin.ELIDED


class SentenceSlot(BaseModel):
    """An ordered position in the sentence under construction."""

    id: str
    part_of_speech: PartOfSpeech
    value: Optional[Word] = None
    placeholder: str = ""
    fixed: bool = False

    model_config = {"frozen": True}

    @classmethod
    def for_word(cls, word: Word, slot_id: Optional[str] = None) -> "SentenceSlot":
        """Build a slot already holding `word`, typed after it."""
        return cls(
            id=slot_id or new_slot_id(),
            part_of_speech=word.part_of_speech,
            value=word,
            placeholder=word.part_of_speech.value,
        )

    @property
    def is_filled(self) -> bool:
        return self.value is not None

    @property
    def text(self) -> Optional[str]:
        return self.value.text if self.value is not None else None


class ConjugationParadigm(BaseModel):
    """Every usable form of one verb, produced on demand.

    An empty `forms` tuple (with no past participle) is the defined result
    for verbs the engine cannot conjugate.
    """

    infinitive: Word
    past_participle: Optional[Word] = None
    forms: Tuple[Word, ...] = ()

    model_config = {"frozen": True}

    @property
    def is_supported(self) -> bool:
        return bool(self.forms)

    def form_for(self, person: str) -> Optional[Word]:
        """Return the form serving `person` (a subject pronoun such as 'nous')."""
        wanted = person.strip().lower()
        for form in self.forms:
            if any(tag.lower() == wanted for tag in form.tags):
                return form
        return None


class ElisionCandidate(BaseModel):
    """The leftmost pair of slots to contract, and its replacement slot."""

    position: int = Field(..., ge=0)
    merged_slot: SentenceSlot

    model_config = {"frozen": True}


class JudgeSubmission(BaseModel):
    """What the external judge receives for one assembled sentence."""

    sentence: str
    tense: Tense
    topic: Topic
    vocabulary: List[str] = Field(default_factory=list)
    context_question: Optional[str] = None
    previous_questions: List[str] = Field(default_factory=list)


class JudgeVerdict(BaseModel):
    """Feedback returned by the external judge."""

    is_valid: bool
    correction: str
    explanation: str
    translation: str
    feedback_type: str = Field(..., pattern="^(perfect|minor_error|grammar_fail|nonsense)$")
    follow_up_question: Optional[str] = None
