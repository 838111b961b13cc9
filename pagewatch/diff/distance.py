"""
Change counting between two plain text snapshots.

Short texts are compared character by character with a true edit distance,
long texts word by word with an LCS based add/remove count, which keeps the
cost of big pages down.
"""

import Levenshtein
from loguru import logger

from .tokenizers import split_words

# Below this many characters (on either side) the character level distance is used
CHARACTER_LEVEL_MAX_LENGTH = 1000

# Length difference (as a share of the longer text) above which the edit distance is not computed
LENGTH_DIFFERENCE_SHORTCUT_RATIO = 0.5

# Substitution costs a delete plus an insert, so the distance is len(a) + len(b) - 2 * LCS
INDEL_WEIGHTS = (1, 1, 2)


def character_changes(old_text: str, new_text: str) -> int:
    """
    Number of single character insertions, deletions and substitutions
    needed to turn old_text into new_text.

    When the lengths differ by more than half of the longer text, the longer
    length is returned straight away as an upper bound.
    """
    old_len = len(old_text)
    new_len = len(new_text)
    longest = max(old_len, new_len)

    if abs(old_len - new_len) > longest * LENGTH_DIFFERENCE_SHORTCUT_RATIO:
        return longest

    return Levenshtein.distance(old_text, new_text)


def word_changes(old_text: str, new_text: str) -> int:
    """
    Words added plus words removed, aligned on the longest common
    subsequence of the two word lists.
    """
    old_words = split_words(old_text)
    new_words = split_words(new_text)

    # Works on the word lists as sequences of hashables, memory stays linear
    return Levenshtein.distance(old_words, new_words, weights=INDEL_WEIGHTS)


def count_changes(old_text: str, new_text: str) -> int:
    """
    Count how much changed between two extracted texts.

    Args:
        old_text: Previous plain text, may be empty or None
        new_text: Current plain text, may be empty or None

    Returns:
        int: 0 when either side is empty or both are equal, otherwise the
        number of changed characters (short texts) or changed words (long texts)
    """
    # Nothing to compare against is reported as no change, even when only one side is empty
    if not old_text or not new_text:
        return 0

    if old_text == new_text:
        return 0

    if len(old_text) < CHARACTER_LEVEL_MAX_LENGTH or len(new_text) < CHARACTER_LEVEL_MAX_LENGTH:
        changes = character_changes(old_text, new_text)
        logger.trace(f"Character level change count {changes} ({len(old_text)} -> {len(new_text)} chars)")
        return changes

    changes = word_changes(old_text, new_text)
    logger.trace(f"Word level change count {changes} ({len(old_text)} -> {len(new_text)} chars)")
    return changes
