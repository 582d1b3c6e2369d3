"""Tests for noun and adjective inflection."""

import pytest

from motamot.core.errors import UnknownFeatureError
from motamot.core.lexical import Gender, Number, PartOfSpeech
from motamot.core.models import Word
from motamot.languages.french.inflection import (
    WordFormGenerator,
    feminize_noun,
    inflect,
    pluralize_adjective,
    pluralize_noun,
)
from motamot.languages.french.lexicon import FrenchLexicon


def noun(text, tags=("m",), translation="x"):
    return Word.create(text, PartOfSpeech.NOUN, translation, tags)


def adjective(text, translation="x"):
    return Word.create(text, PartOfSpeech.ADJECTIVE, translation)


class TestNounGender:
    """Feminization of nouns."""

    def test_irregular_chat(self):
        """chat -> chatte comes from the irregular table."""
        result = inflect(noun("chat", ("m", "mutable"), "cat"), Gender.FEMININE, Number.SINGULAR)
        assert result.text == "chatte"
        assert result.translation == "cat"

    def test_irregular_chien_and_sorcier(self):
        assert inflect(noun("chien"), "f", "s").text == "chienne"
        assert inflect(noun("sorcier"), "f", "s").text == "sorcière"

    def test_er_suffix(self):
        """-er -> -ère."""
        assert inflect(noun("écolier"), "feminine", "singular").text == "écolière"

    def test_f_suffix(self):
        assert inflect(noun("sportif"), "f", "s").text == "sportive"

    def test_x_suffix(self):
        assert inflect(noun("époux"), "f", "s").text == "épouse"

    def test_default_appends_e(self):
        assert inflect(noun("ami"), "f", "s").text == "amie"

    def test_already_ending_in_e(self):
        assert inflect(noun("élève"), "f", "s").text == "élève"

    def test_already_feminine_is_not_transformed(self):
        """A noun tagged feminine keeps its stem."""
        maison = noun("maison", ("f",))
        assert inflect(maison, "f", "s").text == "maison"
        assert inflect(noun("télé", ("feminine",)), "f", "s").text == "télé"

    def test_masculine_request_keeps_stem(self):
        assert inflect(noun("chat"), "m", "s").text == "chat"


class TestNounPlural:
    """Pluralization of nouns."""

    @pytest.mark.parametrize("stem", ["pays", "prix", "nez", "paris"])
    def test_s_x_z_unchanged(self, stem):
        """Nouns already ending in s/x/z do not change."""
        assert pluralize_noun(stem) == stem
        assert inflect(noun(stem), "m", "pl").text == stem

    def test_au_and_eu_take_x(self):
        assert inflect(noun("château"), "m", "pl").text == "châteaux"
        assert inflect(noun("jeu"), "m", "pl").text == "jeux"

    def test_al_becomes_aux(self):
        assert inflect(noun("cheval"), "m", "pl").text == "chevaux"

    def test_default_appends_s(self):
        assert inflect(noun("train"), "m", "pl").text == "trains"

    def test_feminine_then_plural(self):
        """Plural applies after the gender step."""
        assert inflect(noun("chat"), "f", "pl").text == "chattes"
        assert inflect(noun("sorcier"), "f", "pl").text == "sorcières"


class TestNounTags:
    """Resolved gender and number tags."""

    def test_replaces_prior_gender_and_number_tags(self):
        result = inflect(noun("chat", ("m", "singular", "mutable")), "f", "pl")
        assert result.tags == frozenset({"feminine", "plural", "mutable"})

    def test_returns_new_word(self):
        original = noun("chat")
        result = inflect(original, "f", "s")
        assert result is not original
        assert original.text == "chat"
        assert original.tags == frozenset({"m"})


class TestAdjectives:
    """Adjective inflection."""

    def test_irregular_feminine_plural(self):
        """beau feminine plural comes straight from the table."""
        assert inflect(adjective("beau", "beautiful"), Gender.FEMININE, Number.PLURAL).text == "belles"

    def test_irregular_every_slot(self):
        beau = adjective("beau")
        assert inflect(beau, "m", "s").text == "beau"
        assert inflect(beau, "f", "s").text == "belle"
        assert inflect(beau, "m", "pl").text == "beaux"

    def test_irregular_vieux_and_frais(self):
        assert inflect(adjective("vieux"), "f", "s").text == "vieille"
        assert inflect(adjective("vieux"), "m", "pl").text == "vieux"
        assert inflect(adjective("frais"), "f", "pl").text == "fraîches"

    def test_regular_feminine(self):
        assert inflect(adjective("grand"), "f", "s").text == "grande"
        assert inflect(adjective("rouge"), "f", "s").text == "rouge"

    def test_regular_plural(self):
        assert inflect(adjective("petit"), "m", "pl").text == "petits"
        assert pluralize_adjective("gris") == "gris"
        assert pluralize_adjective("roux") == "roux"
        assert pluralize_adjective("esquimau") == "esquimaux"

    def test_regular_feminine_plural_composes(self):
        assert inflect(adjective("intelligent"), "f", "pl").text == "intelligentes"
        assert inflect(adjective("fatigué"), "f", "pl").text == "fatiguées"

    def test_adjective_tags(self):
        result = inflect(adjective("grand"), "f", "pl")
        assert {"feminine", "plural"} <= result.tags


class TestIdentityForOtherCategories:
    """Non noun/adjective words pass through unchanged."""

    @pytest.mark.parametrize(
        "pos",
        [PartOfSpeech.VERB, PartOfSpeech.ARTICLE, PartOfSpeech.SUBJECT, PartOfSpeech.INFINITIVE],
    )
    def test_identity(self, pos):
        word = Word.create("le", pos, "the")
        assert inflect(word, "f", "pl") is word

    def test_identity_ignores_bad_features(self):
        """The no-op path does not even validate gender/number."""
        word = Word.create("et", PartOfSpeech.CONNECTOR, "and")
        assert inflect(word, "neuter", "dual") is word


class TestFeatureParsing:
    def test_unknown_gender_raises(self):
        with pytest.raises(UnknownFeatureError):
            inflect(noun("chat"), "neuter", "s")

    def test_unknown_number_is_value_error(self):
        with pytest.raises(ValueError):
            inflect(noun("chat"), "m", "dual")


class TestGeneratorConfiguration:
    """The generator uses whatever lexicon it is given."""

    def test_substitute_irregular_table(self):
        lexicon = FrenchLexicon(irregular_nouns={"lion": "lionne"})
        generator = WordFormGenerator(lexicon)
        assert generator.inflect(noun("lion"), "f", "s").text == "lionne"
        assert generator.inflect(noun("chat"), "f", "s").text == "chate"

    def test_feminize_noun_helper(self):
        assert feminize_noun("chat", {}) == "chate"

    def test_variations(self):
        forms = WordFormGenerator().variations(adjective("beau"))
        assert forms[(Gender.FEMININE, Number.PLURAL)].text == "belles"
        assert len(forms) == 4

    def test_can_change_gender(self):
        assert WordFormGenerator.can_change_gender(adjective("grand"))
        assert WordFormGenerator.can_change_gender(noun("chat", ("m", "mutable")))
        assert not WordFormGenerator.can_change_gender(noun("train"))
