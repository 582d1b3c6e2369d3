"""
Languages Package.

This package contains language-specific morphology and contraction modules.
"""

import motamot.languages.french

SUPPORTED_LANGUAGES = ["french"]

__all__ = ["french", "SUPPORTED_LANGUAGES"]
