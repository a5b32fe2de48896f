"""URL slug generation for listings and seeker profiles."""

import random
import re
import string
import unicodedata
from typing import Iterable, Optional

from domain.services.text_normalizer import transliterate_turkish

SLUG_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_SUFFIX_LENGTH = 6
# Leaves room for "-" and the suffix inside a String(255) column
DEFAULT_MAX_BASE_LENGTH = 200

_PUNCTUATION = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def slugify_fragment(text: str) -> str:
    """
    Turn a single fragment into a hyphenated ASCII slug part.

    Punctuation is dropped rather than split on, so ``"Ayşe'nin Odası"``
    becomes ``"aysenin-odasi"`` and ``"Oda/Daire"`` becomes ``"odadaire"``.
    Only whitespace and hyphen runs turn into a single hyphen.
    """
    text = transliterate_turkish(text)
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = _PUNCTUATION.sub("", text)
    return _SEPARATORS.sub("-", text).strip("-")


def truncate_slug_base(base: str, max_length: int) -> str:
    """
    Shorten ``base`` to at most ``max_length`` characters.

    The cut lands on a hyphen boundary when there is one, so words are not
    split; a single word longer than the limit is cut hard.
    """
    if len(base) <= max_length:
        return base
    cut = base[:max_length]
    if base[max_length] != "-" and "-" in cut:
        cut = cut.rsplit("-", 1)[0]
    return cut.strip("-")


class SlugGenerator:
    """
    Builds readable slugs with a random suffix.

    The suffix makes two records with identical seed text land on different
    slugs. Uniqueness is probabilistic; storage must still enforce it.
    The readable base is capped at ``max_base_length`` so the whole slug
    fits the ``slug`` column.
    """

    def __init__(
        self,
        random_source: Optional[random.Random] = None,
        suffix_length: int = DEFAULT_SUFFIX_LENGTH,
        max_base_length: int = DEFAULT_MAX_BASE_LENGTH,
    ):
        if suffix_length < 1:
            raise ValueError("Slug suffix length must be positive")
        if max_base_length < 1:
            raise ValueError("Slug base length must be positive")
        self.random_source = random_source or random.SystemRandom()
        self.suffix_length = suffix_length
        self.max_base_length = max_base_length

    @property
    def max_length(self) -> int:
        """Longest slug this generator can return."""
        return self.max_base_length + 1 + self.suffix_length

    def generate(self, fragments: Iterable[Optional[str]]) -> str:
        """
        Generate a slug from ordered seed fragments.

        Args:
            fragments: Seed text such as ``[title, address]``; ``None`` and
                empty entries are skipped

        Returns:
            Slug of the form ``base-parts-xxxxxx`` (or just the suffix when
            no fragment survives slugification)
        """
        parts = [slugify_fragment(str(fragment)) for fragment in fragments if fragment]
        base = _HYPHEN_RUNS.sub("-", "-".join(part for part in parts if part))
        base = truncate_slug_base(base, self.max_base_length)

        suffix = self._suffix()
        return f"{base}-{suffix}" if base else suffix

    def _suffix(self) -> str:
        return "".join(
            self.random_source.choice(SLUG_ALPHABET) for _ in range(self.suffix_length)
        )


_default_generator = SlugGenerator()


def generate_slug(fragments: Iterable[Optional[str]]) -> str:
    """Generate a slug with the process-wide generator."""
    return _default_generator.generate(fragments)
