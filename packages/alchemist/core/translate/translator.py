"""Lexicon-backed text translation.

Words missing from the lexicon are minted with the language's synthesis
configuration and remembered, so a repeated word always translates the
same way.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

import numpy as np

from alchemist.core.lexicon import Lexicon
from alchemist.core.synthesis import (
    DEFAULT_MAX_EXPANSION_DEPTH,
    INVALID_WEIGHTS_ERROR,
    SynthesisConfig,
    SynthesisConfigError,
    is_config_valid,
)
from alchemist.core.vocabulary import WordClass

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[^\W_]+")


def tokenize(text: str) -> Iterator[tuple[str, bool]]:
    """Split text into ``(chunk, is_word)`` pieces.

    Words are maximal runs of letters and digits; everything else (spaces,
    punctuation, underscores) comes through as separator chunks.

    Example:
        >>> list(tokenize("Hi, you"))
        [('Hi', True), (', ', False), ('you', True)]
    """
    position = 0
    for match in _WORD_RE.finditer(text):
        if match.start() > position:
            yield text[position : match.start()], False
        yield match.group(), True
        position = match.end()
    if position < len(text):
        yield text[position:], False


def translate_word(
    word: str,
    lexicon: Lexicon,
    config: SynthesisConfig,
    rng: np.random.Generator | None = None,
    max_depth: int = DEFAULT_MAX_EXPANSION_DEPTH,
) -> str:
    """Translate one word, minting and storing a new one on a lexicon miss."""
    native = word.lower()
    existing = lexicon.get(native)
    if existing is not None:
        return existing
    # TODO: pick function-word weights once lexicon entries carry a WordType.
    minted = config.synthesize(WordClass.CONTENT, rng, max_depth)
    lexicon.add(native, minted)
    logger.debug("Minted %r for %r", minted, native)
    return minted


def translate_text(
    text: str,
    lexicon: Lexicon,
    config: SynthesisConfig,
    rng: np.random.Generator | None = None,
    max_depth: int = DEFAULT_MAX_EXPANSION_DEPTH,
) -> str:
    """Translate running text word by word, keeping separators verbatim.

    Raises:
        SynthesisConfigError: If the word-length weights are invalid
    """
    if not is_config_valid(config):
        raise SynthesisConfigError(INVALID_WEIGHTS_ERROR)
    rng = rng if rng is not None else np.random.default_rng()
    return "".join(
        translate_word(chunk, lexicon, config, rng, max_depth) if is_word else chunk
        for chunk, is_word in tokenize(text)
    )


__all__ = [
    "tokenize",
    "translate_text",
    "translate_word",
]
