"""
Present-tense conjugation for French verbs.

Three verbs (avoir, être, aller) resolve to fixed paradigms taken verbatim
from the lexicon. Regular -er verbs are generated from their stem with the
-ger, -cer and -yer spelling adjustments. Every other verb yields an empty
paradigm, which callers treat as "conjugation unavailable".
"""

from __future__ import annotations

from typing import Optional

from motamot.core.lexical import PartOfSpeech
from motamot.core.logging_setup import get_logger
from motamot.core.models import ConjugationParadigm, Word
from motamot.languages.french.lexicon import FrenchLexicon, load_default_lexicon
from motamot.languages.french.tables import REGULAR_PERSON_LABELS, REGULAR_PERSON_TAGS

log = get_logger(__name__)

PAST_PARTICIPLE_GLOSS = "Past Participle"


def regular_stem(infinitive: str) -> str:
    """Stem of an -er infinitive (manger -> mang)."""
    return infinitive[:-2]


def _translation_base(translation: str) -> str:
    return translation.replace("to ", "", 1) if translation.startswith("to ") else translation


class VerbConjugator:
    """Build conjugation paradigms from an infinitive Word."""

    def __init__(self, lexicon: Optional[FrenchLexicon] = None) -> None:
        self.lexicon = lexicon or load_default_lexicon()

    def conjugate(self, infinitive: Word) -> ConjugationParadigm:
        """
        Return the paradigm for `infinitive`.

        Args:
            infinitive: The verb's base form (usually part of speech INFINITIVE).

        Returns:
            A ConjugationParadigm. For avoir/être/aller it holds the six fixed
            forms; for -er verbs five generated forms; otherwise no forms and
            no past participle.
        """
        auxiliary = self.lexicon.auxiliary(infinitive.text)
        if auxiliary is not None:
            return ConjugationParadigm(
                infinitive=infinitive,
                past_participle=auxiliary.past_participle,
                forms=auxiliary.forms,
            )

        lemma = infinitive.text.strip()
        if lemma.lower().endswith("er"):
            return self._conjugate_regular(infinitive, lemma)

        log.debug("No conjugation available for %r", infinitive.text)
        return ConjugationParadigm(infinitive=infinitive)

    def _conjugate_regular(self, infinitive: Word, lemma: str) -> ConjugationParadigm:
        stem = regular_stem(lemma)
        lower = lemma.lower()

        # nous keeps the soft g/c: mangeons, commençons
        if lower.endswith("ger"):
            nous_form = f"{stem}eons"
        elif lower.endswith("cer"):
            nous_form = f"{stem[:-1]}çons"
        else:
            nous_form = f"{stem}ons"

        # nettoyer -> nettoie, nettoies, nettoient; nettoyons and nettoyez keep y
        singular_stem = stem[:-1] + "i" if lower.endswith("yer") else stem

        texts = (
            f"{singular_stem}e",
            f"{singular_stem}es",
            nous_form,
            f"{stem}ez",
            f"{singular_stem}ent",
        )
        base = _translation_base(infinitive.translation)
        forms = tuple(
            Word.create(text, PartOfSpeech.VERB, f"{base} ({label})", tags)
            for text, label, tags in zip(texts, REGULAR_PERSON_LABELS, REGULAR_PERSON_TAGS)
        )
        past_participle = Word.create(f"{stem}é", PartOfSpeech.PAST_PARTICIPLE, PAST_PARTICIPLE_GLOSS)
        return ConjugationParadigm(infinitive=infinitive, past_participle=past_participle, forms=forms)

    def is_supported(self, infinitive: Word) -> bool:
        return self.conjugate(infinitive).is_supported


def conjugate(infinitive: Word, lexicon: Optional[FrenchLexicon] = None) -> ConjugationParadigm:
    """Conjugate `infinitive` with the default (or given) lexicon."""
    return VerbConjugator(lexicon).conjugate(infinitive)
