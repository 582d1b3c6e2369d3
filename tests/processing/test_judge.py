"""Tests for the judge boundary."""

import pytest

from motamot.core.errors import IncompleteSentenceError
from motamot.core.lexical import PartOfSpeech, Tense, Topic
from motamot.core.models import EngineConfig, SentenceSlot, Word
from motamot.languages.french.lexicon import words_for_topic
from motamot.processing.judge import (
    MAX_VOCABULARY_ENTRIES,
    OfflineJudge,
    SentenceJudge,
    build_submission,
    format_vocabulary,
)
from motamot.processing.slots import slots_from_words


def sentence_slots(*texts):
    return slots_from_words([Word.create(text, PartOfSpeech.OBJECT, text) for text in texts])


class TestBuildSubmission:
    def test_sentence_is_contracted(self):
        config = EngineConfig(topic=Topic.DAILY_LIFE, tense=Tense.PASSE_COMPOSE)
        submission = build_submission(sentence_slots("Je", "ai", "mangé"), config)
        assert submission.sentence == "J'ai mangé"
        assert submission.tense == Tense.PASSE_COMPOSE
        assert submission.topic == Topic.DAILY_LIFE

    def test_context_and_history(self):
        submission = build_submission(
            sentence_slots("Oui"),
            context_question="Tu aimes le café ?",
            previous_questions=["Ça va ?"],
        )
        assert submission.context_question == "Tu aimes le café ?"
        assert submission.previous_questions == ["Ça va ?"]

    def test_require_complete(self):
        slots = sentence_slots("Je") + (SentenceSlot(id="gap", part_of_speech=PartOfSpeech.VERB),)
        with pytest.raises(IncompleteSentenceError):
            build_submission(slots, EngineConfig(require_complete=True))

    def test_vocabulary_is_capped(self):
        vocabulary = words_for_topic("travel") * 5
        submission = build_submission(sentence_slots("Je"), vocabulary=vocabulary)
        assert len(submission.vocabulary) == MAX_VOCABULARY_ENTRIES

    def test_format_vocabulary(self):
        assert format_vocabulary([Word.create("chat", PartOfSpeech.NOUN, "cat")]) == ["chat (cat)"]

    def test_format_vocabulary_stops_at_limit(self):
        def endless():
            while True:
                yield Word.create("chat", PartOfSpeech.NOUN, "cat")

        assert len(format_vocabulary(endless(), limit=3)) == 3


class TestOfflineJudge:
    def test_echoes_sentence(self):
        judge: SentenceJudge = OfflineJudge()
        verdict = judge.judge(build_submission(sentence_slots("le", "avion")))
        assert verdict.is_valid
        assert verdict.correction == "l'avion"
        assert verdict.feedback_type == "perfect"
