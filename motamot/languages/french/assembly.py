"""
Sentence assembly: slots to the plain string handed to the judge.

Joining is followed by a regex elision pass that does not depend on
slot-level merging, so the submitted text is contracted even if merging was
skipped or is still in progress. This pass's trigger set leaves out
"jusque", unlike the slot-level engine.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Sequence

from motamot.core.constants import APOSTROPHE, ERROR_INCOMPLETE_SENTENCE
from motamot.core.errors import IncompleteSentenceError
from motamot.core.models import SentenceSlot
from motamot.languages.french.lexicon import ElisionRules, load_default_elision_rules

SI_IL_PATTERN = re.compile(r"\b(si)\s+(il)", re.IGNORECASE)


def _compile_trigger_pattern(rules: ElisionRules) -> Optional[Pattern[str]]:
    if not rules.string_triggers or not rules.string_vowels:
        return None
    triggers = "|".join(re.escape(t) for t in rules.string_triggers)
    vowels = re.escape(rules.string_vowels)
    return re.compile(rf"\b({triggers})\s+([{vowels}])", re.IGNORECASE)


class SentenceAssembler:
    """Join slot texts and normalize elision at the string level."""

    def __init__(self, rules: Optional[ElisionRules] = None) -> None:
        self.rules = rules or load_default_elision_rules()
        self._trigger_pattern = _compile_trigger_pattern(self.rules)

    def apply_string_elision(self, sentence: str) -> str:
        """Rewrite 'je ai' -> "j'ai", 'si il' -> "s'il" and friends."""

        def contract(match: "re.Match[str]") -> str:
            trigger, next_char = match.group(1), match.group(2)
            if trigger.lower() == "ce" and next_char.lower() not in self.rules.string_ce_vowels:
                return match.group(0)
            return f"{trigger[:-1]}{APOSTROPHE}{next_char}"

        if self._trigger_pattern is not None:
            sentence = self._trigger_pattern.sub(contract, sentence)
        return SI_IL_PATTERN.sub(lambda m: f"s{APOSTROPHE}{m.group(2)}", sentence)

    def join(self, slots: Sequence[SentenceSlot], require_complete: bool = False) -> str:
        """Space-join the texts of filled slots."""
        empty = [slot.id for slot in slots if slot.value is None]
        if require_complete and empty:
            raise IncompleteSentenceError(ERROR_INCOMPLETE_SENTENCE.format(count=len(empty)), empty)
        return " ".join(slot.value.text for slot in slots if slot.value is not None)

    def assemble(self, slots: Sequence[SentenceSlot], require_complete: bool = False) -> str:
        """
        Build the final sentence string.

        Args:
            slots: The ordered slot sequence.
            require_complete: Raise IncompleteSentenceError instead of
                skipping empty slots.

        Returns:
            The joined, elision-normalized sentence.
        """
        return self.apply_string_elision(self.join(slots, require_complete=require_complete))


def apply_string_elision(sentence: str, rules: Optional[ElisionRules] = None) -> str:
    return SentenceAssembler(rules).apply_string_elision(sentence)


def assemble(
    slots: Sequence[SentenceSlot],
    require_complete: bool = False,
    rules: Optional[ElisionRules] = None,
) -> str:
    return SentenceAssembler(rules).assemble(slots, require_complete=require_complete)
