"""
Pytest configuration for test discovery and import path setup.

Ensures the project root is on sys.path so that `import motamot` works
regardless of how pytest is invoked (e.g., `pytest` or `pytest tests/`),
and provides small builders for words and slot sequences.
"""

import os
import sys
from typing import List

import pytest


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)

from motamot.core.lexical import PartOfSpeech  # noqa: E402
from motamot.core.models import SentenceSlot, Word  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "regression: golden sentence tests")


def make_word(text, pos=PartOfSpeech.OBJECT, translation="", tags=()):
    return Word.create(text, pos, translation or text, tags)


def make_slots(*texts):
    """Filled slots with ids s0, s1, ... for the given texts."""
    return tuple(
        SentenceSlot(id=f"s{i}", part_of_speech=PartOfSpeech.OBJECT, value=make_word(text), placeholder=f"p{i}")
        for i, text in enumerate(texts)
    )


@pytest.fixture
def word_factory():
    return make_word


@pytest.fixture
def slot_factory():
    return make_slots
