"""Translation of native text through a language's lexicon."""

from alchemist.core.translate.translator import tokenize, translate_text, translate_word

__all__ = [
    "tokenize",
    "translate_text",
    "translate_word",
]
