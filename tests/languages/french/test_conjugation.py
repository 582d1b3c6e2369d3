"""Tests for verb conjugation paradigms."""

import pytest

from motamot.core.lexical import PartOfSpeech
from motamot.core.models import Word
from motamot.languages.french.conjugation import VerbConjugator, conjugate, regular_stem
from motamot.languages.french.lexicon import FrenchLexicon


def infinitive(text, translation=""):
    return Word.create(text, PartOfSpeech.INFINITIVE, translation)


def texts(paradigm):
    return [form.text for form in paradigm.forms]


class TestFixedParadigms:
    """avoir, être and aller come from the fixed tables."""

    def test_avoir(self):
        paradigm = conjugate(infinitive("avoir", "to have (Aux)"))
        assert texts(paradigm) == ["ai", "as", "a", "avons", "avez", "ont"]
        assert paradigm.past_participle.text == "eu"

    def test_etre(self):
        paradigm = conjugate(infinitive("être"))
        assert texts(paradigm) == ["suis", "es", "est", "sommes", "êtes", "sont"]
        assert paradigm.past_participle.text == "été"

    def test_aller(self):
        """aller ends in -er but is never generated."""
        paradigm = conjugate(infinitive("aller"))
        assert texts(paradigm) == ["vais", "vas", "va", "allons", "allez", "vont"]
        assert paradigm.past_participle.text == "allé"

    def test_case_insensitive_lemma(self):
        paradigm = conjugate(infinitive("Avoir"))
        assert texts(paradigm)[0] == "ai"

    def test_fixed_forms_are_auxiliaries_tagged_by_person(self):
        paradigm = conjugate(infinitive("avoir"))
        assert all(form.part_of_speech == PartOfSpeech.AUXILIARY for form in paradigm.forms)
        assert paradigm.form_for("il").text == "a"
        assert paradigm.form_for("Elle").text == "a"
        assert paradigm.form_for("nous").text == "avons"

    def test_infinitive_is_the_input_word(self):
        word = infinitive("être", "to be")
        assert conjugate(word).infinitive == word


class TestRegularVerbs:
    """Generated -er paradigms."""

    def test_parler(self):
        paradigm = conjugate(infinitive("parler", "to speak"))
        assert texts(paradigm) == ["parle", "parles", "parlons", "parlez", "parlent"]
        assert paradigm.past_participle.text == "parlé"
        assert paradigm.past_participle.part_of_speech == PartOfSpeech.PAST_PARTICIPLE

    def test_ger_keeps_e_in_nous(self):
        paradigm = conjugate(infinitive("manger"))
        assert texts(paradigm) == ["mange", "manges", "mangeons", "mangez", "mangent"]

    def test_cer_takes_cedilla_in_nous(self):
        paradigm = conjugate(infinitive("commencer"))
        assert paradigm.form_for("nous").text == "commençons"
        assert paradigm.form_for("vous").text == "commencez"

    def test_yer_changes_y_to_i(self):
        paradigm = conjugate(infinitive("nettoyer"))
        assert texts(paradigm) == ["nettoie", "nettoies", "nettoyons", "nettoyez", "nettoient"]
        assert paradigm.past_participle.text == "nettoyé"

    @pytest.mark.parametrize("verb", ["parler", "manger", "commencer", "payer", "étudier", "voyager"])
    def test_five_forms_and_participle(self, verb):
        paradigm = conjugate(infinitive(verb))
        assert len(paradigm.forms) == 5
        assert paradigm.past_participle is not None
        assert paradigm.past_participle.text == regular_stem(verb) + "é"

    def test_person_tags_and_translations(self):
        paradigm = conjugate(infinitive("manger", "to eat"))
        first = paradigm.forms[0]
        assert first.tags == frozenset({"Je", "Il", "Elle"})
        assert first.translation == "eat (Je/Il)"
        assert paradigm.forms[4].tags == frozenset({"Ils", "Elles"})
        assert all(form.part_of_speech == PartOfSpeech.VERB for form in paradigm.forms)


class TestUnsupportedVerbs:
    """Verbs outside the supported classes give an empty paradigm."""

    @pytest.mark.parametrize("verb", ["dormir", "boire", "prendre", "partir", "lire"])
    def test_empty_paradigm(self, verb):
        word = infinitive(verb)
        paradigm = conjugate(word)
        assert paradigm.forms == ()
        assert paradigm.past_participle is None
        assert paradigm.infinitive == word
        assert not paradigm.is_supported

    def test_is_supported(self):
        conjugator = VerbConjugator()
        assert conjugator.is_supported(infinitive("parler"))
        assert not conjugator.is_supported(infinitive("finir"))


class TestSubstituteLexicon:
    def test_without_fixed_tables_aller_is_generated(self):
        """With no fixed paradigms, aller falls through to the -er rules."""
        paradigm = VerbConjugator(FrenchLexicon()).conjugate(infinitive("aller"))
        assert texts(paradigm)[0] == "alle"
        assert conjugate(infinitive("avoir"), lexicon=FrenchLexicon()).forms == ()
