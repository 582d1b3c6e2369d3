"""
Core lexical vocabularies for the French sentence engine.

This module defines the closed sets the engine works with (parts of speech,
gender, number, word origin) together with the round metadata the outer
application hands to the judge (topic, tense), and the small display and
parsing helpers built on top of them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from motamot.core.constants import (
    ERROR_UNKNOWN_GENDER,
    ERROR_UNKNOWN_NUMBER,
    ERROR_UNKNOWN_POS,
    ERROR_UNKNOWN_TOPIC,
)
from motamot.core.errors import UnknownFeatureError


class PartOfSpeech(str, Enum):
    """Word categories a sentence slot can hold.

    The three verb sub-categories mirror how the exercise is played:
    auxiliaries (avoir/être/aller) build compound tenses, infinitives are
    picked from the word pools, past participles complete passé composé.
    """

    SUBJECT = "subject"
    VERB = "verb"  # Conjugated regular verb
    AUXILIARY = "auxiliary"  # avoir, être, aller
    INFINITIVE = "infinitive"  # manger, voir
    PAST_PARTICIPLE = "past_participle"  # mangé, vu
    ARTICLE = "article"
    POSSESSIVE = "possessive"
    NOUN = "noun"
    ADJECTIVE = "adjective"
    PREPOSITION = "preposition"
    ADVERB = "adverb"
    OBJECT = "object"
    CONNECTOR = "connector"  # et, mais, ou
    NEGATION = "negation"  # ne, pas, jamais


class Gender(str, Enum):
    """Grammatical gender."""

    MASCULINE = "masculine"
    FEMININE = "feminine"


class Number(str, Enum):
    """Grammatical number."""

    SINGULAR = "singular"
    PLURAL = "plural"


class WordOrigin(str, Enum):
    """Where a Word came from.

    Merged words are marked at construction time by the elision engine.
    """

    BASE = "base"
    ELIDED = "elided"


class Topic(str, Enum):
    """Vocabulary themes for a round."""

    DAILY_LIFE = "daily_life"
    FOOD_DRINK = "food_drink"
    TRAVEL = "travel"
    SCHOOL = "school"
    FANTASY = "fantasy"
    CUSTOM = "custom"


class Tense(str, Enum):
    """Target tenses a round can ask for."""

    PRESENT = "present"
    PASSE_COMPOSE = "passe_compose"
    FUTUR_PROCHE = "futur_proche"
    IMPARFAIT = "imparfait"


# Tag vocabulary carried in Word.tags
MASCULINE_TAGS = frozenset({"m", "masculine"})
FEMININE_TAGS = frozenset({"f", "feminine"})
NUMBER_TAGS = frozenset({"singular", "plural"})
GENDER_TAGS = MASCULINE_TAGS | FEMININE_TAGS
MUTABLE_TAG = "mutable"  # noun with a distinct feminine form (chat/chatte)

INFLECTABLE_POS = frozenset({PartOfSpeech.NOUN, PartOfSpeech.ADJECTIVE})

# Labels shown on slots and in the word picker
POS_DISPLAY_MAP = {
    PartOfSpeech.SUBJECT: "Subject",
    PartOfSpeech.VERB: "Verb",
    PartOfSpeech.AUXILIARY: "Auxiliary",
    PartOfSpeech.INFINITIVE: "Infinitive",
    PartOfSpeech.PAST_PARTICIPLE: "Past Participle",
    PartOfSpeech.ARTICLE: "Article",
    PartOfSpeech.POSSESSIVE: "Possessive",
    PartOfSpeech.NOUN: "Noun",
    PartOfSpeech.ADJECTIVE: "Adjective",
    PartOfSpeech.PREPOSITION: "Preposition",
    PartOfSpeech.ADVERB: "Adverb",
    PartOfSpeech.OBJECT: "Object",
    PartOfSpeech.CONNECTOR: "Connector",
    PartOfSpeech.NEGATION: "Negation",
}

GENDER_DISPLAY_MAP = {
    Gender.MASCULINE: "m",
    Gender.FEMININE: "f",
}

TOPIC_DISPLAY_MAP = {
    Topic.DAILY_LIFE: "Daily Life",
    Topic.FOOD_DRINK: "Food & Drink",
    Topic.TRAVEL: "Travel",
    Topic.SCHOOL: "School",
    Topic.FANTASY: "Fantasy & Sci-Fi",
    Topic.CUSTOM: "Custom Topic",
}

TENSE_DISPLAY_MAP = {
    Tense.PRESENT: "Présent",
    Tense.PASSE_COMPOSE: "Passé Composé",
    Tense.FUTUR_PROCHE: "Futur Proche",
    Tense.IMPARFAIT: "Imparfait",
}

TENSE_HINTS = {
    Tense.PRESENT: "Hint: Subject + Verb + (Object/Adjective)",
    Tense.PASSE_COMPOSE: "Hint: Subject + Avoir/Être + Participle",
    Tense.FUTUR_PROCHE: "Hint: Subject + Aller + Infinitive",
    Tense.IMPARFAIT: "Hint: Describe a past state or habit",
}

# Short codes accepted on input, as used by the word picker (m/f, s/pl)
_GENDER_ALIASES = {
    "m": Gender.MASCULINE,
    "masc": Gender.MASCULINE,
    "masculine": Gender.MASCULINE,
    "f": Gender.FEMININE,
    "fem": Gender.FEMININE,
    "feminine": Gender.FEMININE,
}

_NUMBER_ALIASES = {
    "s": Number.SINGULAR,
    "sg": Number.SINGULAR,
    "singular": Number.SINGULAR,
    "pl": Number.PLURAL,
    "plural": Number.PLURAL,
}


def parse_gender(value: Union[str, Gender]) -> Gender:
    """Coerce a gender enum, value or short code into a Gender."""
    if isinstance(value, Gender):
        return value
    gender = _GENDER_ALIASES.get(str(value).strip().lower())
    if gender is None:
        raise UnknownFeatureError(ERROR_UNKNOWN_GENDER.format(value=value))
    return gender


def parse_number(value: Union[str, Number]) -> Number:
    """Coerce a number enum, value or short code into a Number."""
    if isinstance(value, Number):
        return value
    number = _NUMBER_ALIASES.get(str(value).strip().lower())
    if number is None:
        raise UnknownFeatureError(ERROR_UNKNOWN_NUMBER.format(value=value))
    return number


def parse_topic(value: Union[str, Topic]) -> Topic:
    """Coerce a topic enum or value into a Topic."""
    if isinstance(value, Topic):
        return value
    try:
        return Topic(str(value).strip().lower())
    except ValueError:
        raise UnknownFeatureError(ERROR_UNKNOWN_TOPIC.format(value=value)) from None


def parse_pos(value: Union[str, PartOfSpeech]) -> PartOfSpeech:
    """Coerce a part-of-speech enum or value into a PartOfSpeech."""
    if isinstance(value, PartOfSpeech):
        return value
    try:
        return PartOfSpeech(str(value).strip().lower())
    except ValueError:
        raise UnknownFeatureError(ERROR_UNKNOWN_POS.format(value=value)) from None


def get_pos_display(pos: PartOfSpeech) -> Optional[str]:
    """Get display label for a part of speech."""
    return POS_DISPLAY_MAP.get(pos)


def get_gender_display(gender: Gender) -> Optional[str]:
    """Get display abbreviation for a gender."""
    return GENDER_DISPLAY_MAP.get(gender)


def get_topic_display(topic: Topic) -> Optional[str]:
    """Get display label for a topic."""
    return TOPIC_DISPLAY_MAP.get(topic)


def get_tense_display(tense: Tense) -> Optional[str]:
    """Get the French name of a tense."""
    return TENSE_DISPLAY_MAP.get(tense)


def get_tense_hint(tense: Tense) -> str:
    """Get the sentence-pattern hint shown for a tense."""
    return TENSE_HINTS.get(tense, TENSE_HINTS[Tense.PRESENT])
