"""
Tokenizer that splits raw markup into tags, words and whitespace.

Every token is a maximal run of exactly one of:
- a tag, anything between '<' and the next '>' (e.g. '<p>', '<a href="...">')
- a word, a run of characters that are neither whitespace nor '<'
- whitespace

Characters that fit none of these (only a '<' that never closes) are dropped,
so joining the token values gives back the input otherwise unchanged.
"""

import re
from enum import Enum
from typing import List, NamedTuple


class TokenType(str, Enum):
    TAG = 'tag'
    WORD = 'word'
    WHITESPACE = 'space'


class Token(NamedTuple):
    type: TokenType
    value: str


MARKUP_TOKEN_RE = re.compile(r'(<[^>]+>)|([^<\s]+)|(\s+)')


def tokenize_markup(html_content: str) -> List[Token]:
    """
    Split markup into an ordered list of TAG, WORD and WHITESPACE tokens.

    Args:
        html_content: Raw markup, may be empty or None

    Returns:
        List of tokens in document order

    Examples:
        >>> [t.value for t in tokenize_markup("<p>Hello world</p>")]
        ['<p>', 'Hello', ' ', 'world', '</p>']
        >>> [t.type.value for t in tokenize_markup("a <b>")]
        ['word', 'space', 'tag']
    """
    if not html_content:
        return []

    tokens = []
    for match in MARKUP_TOKEN_RE.finditer(html_content):
        tag, word, space = match.groups()
        if tag:
            tokens.append(Token(TokenType.TAG, tag))
        elif word:
            tokens.append(Token(TokenType.WORD, word))
        elif space:
            tokens.append(Token(TokenType.WHITESPACE, space))

    return tokens
