"""
Boundary with the external sentence judge.

The engine never evaluates grammar. It only produces the assembled string
and the round metadata; any judging service plugs in behind the
`SentenceJudge` protocol. `OfflineJudge` is the demo-mode stand-in used
when no service is configured: it accepts the sentence as written.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, List, Optional, Protocol, Sequence

from motamot.core.models import EngineConfig, JudgeSubmission, JudgeVerdict, SentenceSlot, Word
from motamot.languages.french.assembly import assemble

# Prompt-size limit on the vocabulary list sent with a submission
MAX_VOCABULARY_ENTRIES = 200


class SentenceJudge(Protocol):
    def judge(self, submission: JudgeSubmission) -> JudgeVerdict: ...


def format_vocabulary(words: Iterable[Word], limit: int = MAX_VOCABULARY_ENTRIES) -> List[str]:
    """Render words as 'text (translation)' entries, capped at `limit`."""
    return [f"{word.text} ({word.translation})" for word in islice(words, limit)]


def build_submission(
    slots: Sequence[SentenceSlot],
    config: Optional[EngineConfig] = None,
    vocabulary: Iterable[Word] = (),
    context_question: Optional[str] = None,
    previous_questions: Sequence[str] = (),
) -> JudgeSubmission:
    """Assemble the sentence and bundle it with the round metadata."""
    config = config or EngineConfig()
    return JudgeSubmission(
        sentence=assemble(slots, require_complete=config.require_complete),
        tense=config.tense,
        topic=config.topic,
        vocabulary=format_vocabulary(vocabulary),
        context_question=context_question,
        previous_questions=list(previous_questions),
    )


class OfflineJudge:
    """Demo judge: echoes the sentence back as correct."""

    def judge(self, submission: JudgeSubmission) -> JudgeVerdict:
        return JudgeVerdict(
            is_valid=True,
            correction=submission.sentence,
            explanation="Demo mode (no judge configured): looks good!",
            translation="This is a demo translation.",
            feedback_type="perfect",
            follow_up_question="Et toi, ça va ?",
        )
