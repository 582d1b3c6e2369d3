"""
Tests for the core constants module.

This module tests that constants are defined consistently.
"""

from motamot.core import constants


def test_slot_triggers_include_jusque():
    assert "jusque" in constants.ELISION_TRIGGERS
    assert len(set(constants.ELISION_TRIGGERS)) == 12


def test_string_triggers_are_slot_triggers_without_jusque_and_si():
    assert set(constants.STRING_ELISION_TRIGGERS) == set(constants.ELISION_TRIGGERS) - {"jusque", "si"}


def test_vowel_classes():
    assert set(constants.ELISION_VOWELS) <= set(constants.STRING_ELISION_VOWELS) | {"è", "ê"}
    assert "h" in constants.ELISION_VOWELS
    assert "h" in constants.STRING_ELISION_VOWELS


def test_triggers_end_in_elidable_vowel():
    for trigger in constants.ELISION_TRIGGERS:
        assert trigger[-1] in "aei", trigger


def test_error_messages_format():
    assert "3" in constants.ERROR_INCOMPLETE_SENTENCE.format(count=3)
    assert "abc" in constants.ERROR_SLOT_NOT_FOUND.format(slot_id="abc")
