"""
Word splitter for already extracted plain text.

Unlike the markup tokenizer this knows nothing about tags, it only cuts on
runs of whitespace and throws the whitespace away.
"""

import re
from typing import List

WHITESPACE_RUN_RE = re.compile(r'\s+')


def split_words(text: str) -> List[str]:
    """
    Split text into words on whitespace runs.

    Leading or trailing whitespace yields an empty first or last word, the
    same as a plain regex split would.

    Examples:
        >>> split_words("one  two\\nthree")
        ['one', 'two', 'three']
        >>> split_words(" padded ")
        ['', 'padded', '']
    """
    return WHITESPACE_RUN_RE.split(text)
