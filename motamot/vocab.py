import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from tqdm import tqdm

from motamot.core.lexical import INFLECTABLE_POS, PartOfSpeech, Topic, parse_topic
from motamot.core.models import Word
from motamot.languages.french.conjugation import VerbConjugator
from motamot.languages.french.inflection import WordFormGenerator
from motamot.languages.french.lexicon import FrenchLexicon, load_default_lexicon, words_for_topic


@dataclass
class FormInventory:
    topic: Topic
    inflections: Dict[str, Dict[str, str]] = field(default_factory=dict)
    conjugations: Dict[str, List[str]] = field(default_factory=dict)
    past_participles: Dict[str, Optional[str]] = field(default_factory=dict)
    unsupported_verbs: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "topic": self.topic.value,
            "inflections": self.inflections,
            "conjugations": self.conjugations,
            "past_participles": self.past_participles,
            "unsupported_verbs": self.unsupported_verbs,
        }


def build_form_inventory(
    topic: Union[str, Topic],
    lexicon: Optional[FrenchLexicon] = None,
    show_progress: bool = False,
) -> FormInventory:
    """
    Generate every form the picker can offer for a topic's vocabulary.
    :param topic: topic whose pool (plus the common words) is expanded
    :param lexicon: lexicon to use, default lexicon if None
    :param show_progress: display a progress bar
    :return: inflections keyed "gender/number", conjugations and participles
    """
    topic = parse_topic(topic)
    lexicon = lexicon or load_default_lexicon()
    generator = WordFormGenerator(lexicon)
    conjugator = VerbConjugator(lexicon)
    inventory = FormInventory(topic=topic)

    words: List[Word] = list(words_for_topic(topic, lexicon))
    for word in tqdm(words, desc=f"forms ({topic.value})", disable=not show_progress):
        if word.part_of_speech in INFLECTABLE_POS:
            variations = generator.variations(word)
            inventory.inflections[word.text] = {
                f"{gender.value}/{number.value}": varied.text
                for (gender, number), varied in variations.items()
            }
        elif word.part_of_speech == PartOfSpeech.INFINITIVE:
            paradigm = conjugator.conjugate(word)
            if not paradigm.is_supported:
                inventory.unsupported_verbs.append(word.text)
                continue
            inventory.conjugations[word.text] = [form.text for form in paradigm.forms]
            inventory.past_participles[word.text] = (
                paradigm.past_participle.text if paradigm.past_participle else None
            )
    return inventory


def write_form_inventory(inventory: FormInventory, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(inventory.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    return path
