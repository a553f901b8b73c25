"""
Corrections Module - Fixes tokens the recogniser is known to misread.
"""

from typing import Dict, Optional


# Misread -> intended token
KNOWN_MISREADINGS: Dict[str, str] = {
    "B0": "BD",
    "BO": "BD",
    "80": "BD",
    "8D": "BD",
    "EG": "E9",
    "EY": "E9",
    "IC": "1C",
    "65": "55",
    "66": "55",
    "56": "55",
}


class TextCorrector:
    """
    Rewrites known misreadings of grid tokens.

    Attributes:
        replacements: Misread -> intended token table
    """

    def __init__(self, replacements: Optional[Dict[str, str]] = None):
        self.replacements = dict(KNOWN_MISREADINGS if replacements is None else replacements)

    def apply(self, token: str) -> str:
        """
        Correct a single token (exact match only).

        Args:
            token: Token as read

        Returns:
            Corrected token, or token unchanged if it is not a known misreading
        """
        return self.replacements.get(token, token)

    def correct_all(self, text: str) -> str:
        """
        Replace every known misreading inside a line of text.

        Replacements are applied in table order.

        Args:
            text: Text such as a target line "1C IC 55"

        Returns:
            Corrected text
        """
        for wrong, corrected in self.replacements.items():
            text = text.replace(wrong, corrected)
        return text
