"""Turkish-aware text normalization for slugs and search keys."""

import re

TURKISH_CHAR_MAP = str.maketrans({
    "ş": "s", "Ş": "s",
    "ğ": "g", "Ğ": "g",
    "ü": "u", "Ü": "u",
    "ö": "o", "Ö": "o",
    "ç": "c", "Ç": "c",
    "ı": "i", "I": "i",
    "İ": "i",
})

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def transliterate_turkish(text: str) -> str:
    """
    Replace Turkish letters with their ASCII equivalents and lower-case.

    Substitution runs before lower-casing: ``"İ".lower()`` yields ``i``
    followed by a combining dot, which would otherwise leak into the output.
    """
    return text.translate(TURKISH_CHAR_MAP).lower()


def normalize_turkish(text: str) -> str:
    """
    Map text to a lowercase ASCII key containing only ``[a-z0-9]``.

    Examples:
        >>> normalize_turkish("Çanakkale")
        'canakkale'
        >>> normalize_turkish("Kadıköy / Moda")
        'kadikoymoda'

    Args:
        text: Arbitrary display text

    Returns:
        Normalized key, empty for empty or whitespace-only input
    """
    if not text:
        return ""
    return _NON_ALNUM.sub("", transliterate_turkish(text))
