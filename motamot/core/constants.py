"""
Core Constants Module.

This module defines constants and configuration values used across the application.
"""

# Logging configuration
LOG_LEVEL_ENV = "MOTAMOT_LOG_LEVEL"
LOG_FILE_ENV = "MOTAMOT_LOG_FILE"
DEFAULT_LOG_FILE = "motamot.log"

# Slot-level elision
ELISION_TRIGGERS = ("je", "me", "te", "se", "le", "la", "de", "ne", "que", "jusque", "si", "ce")
ELISION_VOWELS = ("a", "e", "i", "o", "u", "y", "h", "é", "è", "ê")
APOSTROPHE = "'"

# "si" only contracts before "il(s)"; "ce" only before forms of "être"
SI_ELISION_PREFIXES = ("il",)
CE_ELISION_PREFIXES = ("est", "ét")

# String-level normalization (no "jusque", wider vowel class)
STRING_ELISION_TRIGGERS = ("je", "me", "te", "se", "le", "la", "de", "ne", "que", "ce")
STRING_ELISION_VOWELS = "aeiouyéàèùâêîôûh"
STRING_CE_VOWELS = "eé"

# Inventory export
DEFAULT_FORMS_FILE = "forms.json"

# Error messages
ERROR_UNKNOWN_GENDER = "Unknown gender '{value}'. Use 'masculine' or 'feminine'."
ERROR_UNKNOWN_NUMBER = "Unknown number '{value}'. Use 'singular' or 'plural'."
ERROR_UNKNOWN_TOPIC = "Unknown topic '{value}'."
ERROR_UNKNOWN_POS = "Unknown part of speech '{value}'."
ERROR_INCOMPLETE_SENTENCE = "Sentence has {count} empty slot(s); fill every slot before assembling."
ERROR_SLOT_NOT_FOUND = "No slot with id '{slot_id}'."
