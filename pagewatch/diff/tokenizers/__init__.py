"""
Tokenizers for diff operations.

- markup: tags, words and whitespace from raw HTML, used by the highlighter
- natural_text: whitespace separated words from plain text, used by the word level change count
"""

from .markup import Token, TokenType, tokenize_markup
from .natural_text import split_words

__all__ = [
    'Token',
    'TokenType',
    'tokenize_markup',
    'split_words',
]
