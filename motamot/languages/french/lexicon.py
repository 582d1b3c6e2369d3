"""
French lexicon and elision rule sets.

The static tables in `tables.py` are loaded once into immutable
configuration objects which every engine component receives through its
constructor. Tests can build their own `FrenchLexicon` or `ElisionRules`
to exercise the engine with a substitute vocabulary.
"""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from motamot.core import constants
from motamot.core.lexical import PartOfSpeech, Topic, parse_topic
from motamot.core.models import Word
from motamot.languages.french import tables


class AuxiliaryParadigm(BaseModel):
    """A hard-coded paradigm for one of the fixed verbs."""

    infinitive: Word
    past_participle: Word
    forms: Tuple[Word, ...]

    model_config = {"frozen": True}


class FrenchLexicon(BaseModel):
    """Base vocabulary and exception tables used by the engine."""

    irregular_nouns: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    irregular_adjectives: Mapping[str, Tuple[str, str, str]] = Field(default_factory=dict, validate_default=True)
    auxiliaries: Mapping[str, AuxiliaryParadigm] = Field(default_factory=dict, validate_default=True)
    common_words: Tuple[Word, ...] = ()
    topic_pools: Mapping[Topic, Tuple[Word, ...]] = Field(default_factory=dict, validate_default=True)

    model_config = {"frozen": True}

    @field_validator("irregular_nouns", "irregular_adjectives", "auxiliaries", "topic_pools")
    @classmethod
    def freeze_tables(cls, value: Mapping) -> Mapping:
        # the default lexicon is shared process-wide
        return MappingProxyType(dict(value))

    def auxiliary(self, lemma: str) -> Optional[AuxiliaryParadigm]:
        """Look up a fixed paradigm by infinitive, ignoring case and spacing."""
        return self.auxiliaries.get(lemma.strip().lower())


class ElisionRules(BaseModel):
    """Trigger words and vowel classes for both elision passes."""

    triggers: FrozenSet[str] = frozenset(constants.ELISION_TRIGGERS)
    vowels: FrozenSet[str] = frozenset(constants.ELISION_VOWELS)
    si_prefixes: Tuple[str, ...] = constants.SI_ELISION_PREFIXES
    ce_prefixes: Tuple[str, ...] = constants.CE_ELISION_PREFIXES
    string_triggers: Tuple[str, ...] = constants.STRING_ELISION_TRIGGERS
    string_vowels: str = constants.STRING_ELISION_VOWELS
    string_ce_vowels: str = constants.STRING_CE_VOWELS

    model_config = {"frozen": True}


def _words(entries, pos: PartOfSpeech) -> Tuple[Word, ...]:
    words = []
    for entry in entries:
        text, translation = entry[0], entry[1]
        tags = entry[2] if len(entry) > 2 else ()
        words.append(Word.create(text, pos, translation, tags))
    return tuple(words)


def _build_auxiliary(lemma: str, data: dict) -> AuxiliaryParadigm:
    pp_text, pp_translation = data["past_participle"]
    return AuxiliaryParadigm(
        infinitive=Word.create(lemma, PartOfSpeech.INFINITIVE, data["translation"]),
        past_participle=Word.create(pp_text, PartOfSpeech.PAST_PARTICIPLE, pp_translation),
        forms=_words(data["forms"], PartOfSpeech.AUXILIARY),
    )


def _build_topic_pool(pool: dict) -> Tuple[Word, ...]:
    return (
        _words(pool.get("infinitives", ()), PartOfSpeech.INFINITIVE)
        + _words(pool.get("participles", ()), PartOfSpeech.PAST_PARTICIPLE)
        + _words(pool.get("nouns", ()), PartOfSpeech.NOUN)
        + _words(pool.get("adjectives", ()), PartOfSpeech.ADJECTIVE)
    )


def build_lexicon() -> FrenchLexicon:
    """Build a fresh lexicon from the static tables."""
    auxiliaries = {
        lemma: _build_auxiliary(lemma, data) for lemma, data in tables.AUXILIARY_PARADIGMS.items()
    }

    common = (
        _words(tables.SUBJECTS, PartOfSpeech.SUBJECT)
        + _words(tables.ARTICLES, PartOfSpeech.ARTICLE)
        + _words(tables.POSSESSIVES, PartOfSpeech.POSSESSIVE)
        + _words(tables.PREPOSITIONS, PartOfSpeech.PREPOSITION)
        + _words(tables.CONNECTORS, PartOfSpeech.CONNECTOR)
        + _words(tables.OBJECTS, PartOfSpeech.OBJECT)
        + _words(tables.NEGATIONS, PartOfSpeech.NEGATION)
    )
    for paradigm in auxiliaries.values():
        common += (paradigm.infinitive,) + paradigm.forms + (paradigm.past_participle,)

    return FrenchLexicon(
        irregular_nouns=dict(tables.IRREGULAR_NOUN_FEMININES),
        irregular_adjectives=dict(tables.IRREGULAR_ADJECTIVES),
        auxiliaries=auxiliaries,
        common_words=common,
        topic_pools={Topic(name): _build_topic_pool(pool) for name, pool in tables.TOPIC_POOLS.items()},
    )


@lru_cache(maxsize=1)
def load_default_lexicon() -> FrenchLexicon:
    """The process-wide lexicon, built on first use."""
    return build_lexicon()


@lru_cache(maxsize=1)
def load_default_elision_rules() -> ElisionRules:
    """The process-wide elision rules, built on first use."""
    return ElisionRules()


def words_for_topic(
    topic: Union[str, Topic],
    lexicon: Optional[FrenchLexicon] = None,
) -> Tuple[Word, ...]:
    """Common words followed by the pool of `topic` (empty for custom topics)."""
    lexicon = lexicon or load_default_lexicon()
    return lexicon.common_words + lexicon.topic_pools.get(parse_topic(topic), ())


def vocabulary_summary(words) -> Dict[str, int]:
    """Count words per part of speech, keyed by the enum value."""
    counts = Counter(word.part_of_speech.value for word in words)
    return dict(sorted(counts.items()))
