"""
Command-line interface: inflect, conjugate, contract, vocab, forms.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from motamot.core.constants import DEFAULT_FORMS_FILE
from motamot.core.errors import UnknownFeatureError
from motamot.core.lexical import PartOfSpeech, get_topic_display, parse_pos, parse_topic
from motamot.core.logging_setup import init_logging
from motamot.core.models import Word
from motamot.languages.french.assembly import SentenceAssembler
from motamot.languages.french.conjugation import VerbConjugator
from motamot.languages.french.elision import ElisionEngine
from motamot.languages.french.inflection import WordFormGenerator
from motamot.languages.french.lexicon import load_default_lexicon, vocabulary_summary, words_for_topic
from motamot.processing.slots import slots_from_words
from motamot.vocab import build_form_inventory, write_form_inventory

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine decisions")) -> None:
    init_logging(level=logging.DEBUG if verbose else None)


def _lookup(text: str) -> Word:
    """Find `text` in the full vocabulary, falling back to an untyped object word."""
    lexicon = load_default_lexicon()
    wanted = text.lower()
    for pool in (lexicon.common_words, *lexicon.topic_pools.values()):
        for word in pool:
            if word.text.lower() == wanted:
                return word.with_text(text)
    return Word.create(text, PartOfSpeech.OBJECT)


@app.command()
def inflect(
    word: str = typer.Argument(...),
    pos: str = typer.Option("noun", "--pos", "-p", help="noun or adjective"),
    gender: str = typer.Option("masculine", "--gender", "-g"),
    number: str = typer.Option("singular", "--number", "-n"),
    tag: Optional[List[str]] = typer.Option(None, "--tag", "-t", help="Extra tag, e.g. f or mutable"),
) -> None:
    try:
        base = Word.create(word, parse_pos(pos), tags=tag or ())
        result = WordFormGenerator().inflect(base, gender, number)
    except UnknownFeatureError as exc:
        raise typer.BadParameter(str(exc))
    typer.echo(result.text)


@app.command()
def conjugate(
    verb: str = typer.Argument(...),
    translation: str = typer.Option("", "--translation", help="English gloss, e.g. 'to eat'"),
) -> None:
    paradigm = VerbConjugator().conjugate(Word.create(verb, PartOfSpeech.INFINITIVE, translation))
    if not paradigm.is_supported:
        typer.echo(f"No conjugation available for '{verb}'.")
        raise typer.Exit(code=1)
    for form in paradigm.forms:
        persons = "/".join(sorted(form.tags))
        typer.echo(f"{persons}: {form.text}")
    if paradigm.past_participle is not None:
        typer.echo(f"Past participle: {paradigm.past_participle.text}")


@app.command()
def contract(
    sentence: str = typer.Argument(..., help="Words separated by spaces"),
    steps: bool = typer.Option(False, "--steps/--no-steps", help="Show each merge"),
) -> None:
    slots = slots_from_words([_lookup(token) for token in sentence.split()])
    engine = ElisionEngine()
    for reduced in engine.iter_reductions(slots):
        if steps:
            typer.echo(" | ".join(slot.text or "" for slot in reduced))
        slots = reduced
    typer.echo(SentenceAssembler().assemble(slots))


@app.command()
def vocab(topic: str = typer.Option("daily_life", "--topic", "-t")) -> None:
    try:
        resolved = parse_topic(topic)
    except UnknownFeatureError as exc:
        raise typer.BadParameter(str(exc))
    words = words_for_topic(resolved)
    typer.echo(f"Topic: {get_topic_display(resolved)}; Words: {len(words)}")
    for pos, count in vocabulary_summary(words).items():
        typer.echo(f"  {pos}: {count}")


@app.command()
def forms(
    topic: str = typer.Option("daily_life", "--topic", "-t"),
    output: Path = typer.Option(Path("output") / DEFAULT_FORMS_FILE, "--output", "-o"),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
) -> None:
    try:
        inventory = build_form_inventory(topic, show_progress=progress)
    except UnknownFeatureError as exc:
        raise typer.BadParameter(str(exc))
    path = write_form_inventory(inventory, output)
    typer.echo(str(path))


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
