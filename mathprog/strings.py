"""Random lowercase strings and fixed-width text blocks."""

from __future__ import annotations

import random
import string


def random_string(size: int, rng: random.Random | None = None) -> str:
    """Return ``size`` random lowercase Latin letters.

    ``rng`` supplies the randomness; a freshly seeded generator is used when
    it is not given.
    """
    if size < 0:
        raise ValueError("string size must not be negative")
    generator = rng if rng is not None else random.Random()
    return "".join(generator.choice(string.ascii_lowercase) for _ in range(size))


def format_block(text: str, width: int = 50) -> str:
    """Split ``text`` into lines of at most ``width`` characters."""
    if width <= 0:
        raise ValueError("line width must be positive")
    return "\n".join(text[start:start + width] for start in range(0, len(text), width))