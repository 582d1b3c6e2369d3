"""
Gender and number inflection for French nouns and adjectives.

Nouns are feminized through a small irregular table and then ordered suffix
rules; adjectives consult an irregular table giving all three marked forms
directly. Plural rules are applied after the gender step and compose with it.

Any other part of speech passes through unchanged.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from motamot.core.lexical import (
    GENDER_TAGS,
    INFLECTABLE_POS,
    MUTABLE_TAG,
    NUMBER_TAGS,
    Gender,
    Number,
    PartOfSpeech,
    parse_gender,
    parse_number,
)
from motamot.core.logging_setup import get_logger
from motamot.core.models import Word
from motamot.languages.french.lexicon import FrenchLexicon, load_default_lexicon

log = get_logger(__name__)

# Ordered noun feminization rules: (ending, replacement)
NOUN_FEMININE_SUFFIXES = (
    ("er", "ère"),  # écolier -> écolière
    ("f", "ve"),  # sportif -> sportive
    ("x", "se"),  # époux -> épouse
)


def feminize_noun(text: str, irregulars: Dict[str, str]) -> str:
    """Feminine form of a masculine noun stem."""
    if text in irregulars:
        return irregulars[text]
    for ending, replacement in NOUN_FEMININE_SUFFIXES:
        if text.endswith(ending):
            return text[: -len(ending)] + replacement
    if text.endswith("e"):
        return text
    return text + "e"


def pluralize_noun(text: str) -> str:
    """Plural form of a noun stem (cheval -> chevaux, jeu -> jeux)."""
    if text.endswith(("s", "x", "z")):
        return text
    if text.endswith(("au", "eu")):
        return text + "x"
    if text.endswith("al"):
        return text[:-2] + "aux"
    return text + "s"


def feminize_adjective(text: str) -> str:
    return text if text.endswith("e") else text + "e"


def pluralize_adjective(text: str) -> str:
    if text.endswith(("s", "x")):
        return text
    if text.endswith("au"):
        return text + "x"
    return text + "s"


def _resolved_tags(word: Word, gender: Gender, number: Number) -> frozenset:
    kept = {tag for tag in word.tags if tag not in GENDER_TAGS and tag not in NUMBER_TAGS}
    return frozenset(kept | {gender.value, number.value})


class WordFormGenerator:
    """Inflect nouns and adjectives for gender and number."""

    def __init__(self, lexicon: Optional[FrenchLexicon] = None) -> None:
        self.lexicon = lexicon or load_default_lexicon()

    def inflect(
        self,
        word: Word,
        gender: Union[str, Gender],
        number: Union[str, Number],
    ) -> Word:
        """
        Return `word` inflected for `gender` and `number`.

        Args:
            word: A base word, usually masculine singular.
            gender: Target gender (enum, value, or 'm'/'f').
            number: Target number (enum, value, or 's'/'pl').

        Returns:
            A new Word tagged with the resolved gender and number, or `word`
            itself when it is neither a noun nor an adjective.
        """
        if word.part_of_speech not in INFLECTABLE_POS:
            return word

        gender = parse_gender(gender)
        number = parse_number(number)

        if word.part_of_speech == PartOfSpeech.NOUN:
            text = self._inflect_noun(word, gender, number)
        else:
            text = self._inflect_adjective(word.text, gender, number)

        log.debug("inflect %s (%s, %s) -> %s", word.text, gender.value, number.value, text)
        return word.with_text(text, tags=_resolved_tags(word, gender, number))

    def _inflect_noun(self, word: Word, gender: Gender, number: Number) -> str:
        text = word.text
        if gender == Gender.FEMININE and not word.is_feminine:
            text = feminize_noun(text, self.lexicon.irregular_nouns)
        if number == Number.PLURAL:
            text = pluralize_noun(text)
        return text

    def _inflect_adjective(self, text: str, gender: Gender, number: Number) -> str:
        irregular = self.lexicon.irregular_adjectives.get(text)
        if irregular is not None:
            feminine, masculine_plural, feminine_plural = irregular
            forms = {
                (Gender.MASCULINE, Number.SINGULAR): text,
                (Gender.FEMININE, Number.SINGULAR): feminine,
                (Gender.MASCULINE, Number.PLURAL): masculine_plural,
                (Gender.FEMININE, Number.PLURAL): feminine_plural,
            }
            return forms[(gender, number)]

        if gender == Gender.FEMININE:
            text = feminize_adjective(text)
        if number == Number.PLURAL:
            text = pluralize_adjective(text)
        return text

    def variations(self, word: Word) -> Dict[Tuple[Gender, Number], Word]:
        """All four gender/number forms of `word`."""
        return {
            (gender, number): self.inflect(word, gender, number)
            for gender in Gender
            for number in Number
        }

    @staticmethod
    def can_change_gender(word: Word) -> bool:
        """Whether a gender choice makes sense for this word in the picker."""
        if word.part_of_speech == PartOfSpeech.ADJECTIVE:
            return True
        return word.part_of_speech == PartOfSpeech.NOUN and word.has_tag(MUTABLE_TAG)


def inflect(
    word: Word,
    gender: Union[str, Gender],
    number: Union[str, Number],
    lexicon: Optional[FrenchLexicon] = None,
) -> Word:
    """Inflect `word` with the default (or given) lexicon."""
    return WordFormGenerator(lexicon).inflect(word, gender, number)
