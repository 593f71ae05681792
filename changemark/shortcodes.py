"""Emoji shortcode normalization.

Converts ``:shortcode:`` notation (``:sparkles:``, ``:bug:``, ``:warning:``)
into display glyphs using the alias table of the ``emoji`` package.
"""

import re
from typing import Optional

import emoji

SHORTCODE_PATTERN = re.compile(r":[A-Za-z0-9_+\-]+:")


def _lookup_shortcode(shortcode: str) -> Optional[str]:
    converted = emoji.emojize(shortcode, language="alias")
    if converted == shortcode:
        return None
    return converted


def normalize_shortcodes(text: str, strict: bool = True) -> str:
    """Replace emoji shortcodes in text with their glyphs.

    Args:
        text: Text that may contain shortcodes.
        strict: Only replace shortcodes spelled exactly as known. When False,
            shortcodes written in another case (":Sparkles:") also match.

    Returns:
        The text with every known shortcode replaced. Unknown shortcodes
        are left as they are.
    """

    def replace(match: re.Match) -> str:
        shortcode = match.group(0)
        glyph = _lookup_shortcode(shortcode)
        if glyph is None and not strict:
            glyph = _lookup_shortcode(shortcode.lower())
        if glyph is None:
            return shortcode
        return glyph

    return SHORTCODE_PATTERN.sub(replace, text)
