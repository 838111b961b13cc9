"""
Diff rendering module for change detection.

This module counts how much the text of a page changed and renders a copy of
the new markup where words that were not present before are highlighted.
"""

from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .distance import CHARACTER_LEVEL_MAX_LENGTH, character_changes, count_changes, word_changes
from .tokenizers import Token, TokenType, tokenize_markup

# Remember! The output is dropped into an iframe as-is, styles must be inline.
ADDED_HIGHLIGHT_COLOR = '#ffff66'
REMOVED_HIGHLIGHT_COLOR = '#ffcccc'

HIGHLIGHT_OPEN_TEMPLATE = '<span style="background-color: {color};">'
HIGHLIGHT_CLOSE = '</span>'

NO_PREVIOUS_VERSION_HTML = '<p style="padding: 20px; color: #666;">No previous version available</p>'


class HighlightState(Enum):
    CLOSED = 'closed'
    OPEN = 'open'


class ComparisonRender(NamedTuple):
    old_html: str
    new_html: str


def mark_added_tokens(old_tokens: List[Token], new_tokens: List[Token]) -> List[Tuple[Token, bool]]:
    """
    Pair every new token with a flag telling if it is an added word.

    A word counts as added when its value appears nowhere in the old words,
    its position is not taken into account. Tags and whitespace are never added.
    """
    old_words = {token.value for token in old_tokens if token.type == TokenType.WORD}

    return [(token, token.type == TokenType.WORD and token.value not in old_words)
            for token in new_tokens]


def _serialize_events(marked_tokens: Iterable[Tuple[Token, bool]], open_marker: str) -> Iterator[str]:
    state = HighlightState.CLOSED

    for token, added in marked_tokens:
        if added:
            if state == HighlightState.CLOSED:
                yield open_marker
                state = HighlightState.OPEN
        elif state == HighlightState.OPEN:
            # Whitespace, a tag or an unchanged word always ends the highlighted run
            yield HIGHLIGHT_CLOSE
            state = HighlightState.CLOSED
        yield token.value

    if state == HighlightState.OPEN:
        yield HIGHLIGHT_CLOSE


def serialize_highlighted(marked_tokens: Iterable[Tuple[Token, bool]], highlight_color: str) -> str:
    """Join the tokens back into markup, wrapping each run of added words in a highlight span."""
    open_marker = HIGHLIGHT_OPEN_TEMPLATE.format(color=highlight_color)
    return ''.join(_serialize_events(marked_tokens, open_marker))


def highlight_changes(old_html: Optional[str], new_html: Optional[str], highlight_color: str = ADDED_HIGHLIGHT_COLOR) -> str:
    """
    Render new_html with every word that does not exist in old_html highlighted.

    Args:
        old_html: Previous markup, may be empty or None (first snapshot)
        new_html: Current markup, may be empty or None
        highlight_color: CSS colour for the highlight background

    Returns:
        str: The new markup with added words wrapped in <span style="background-color: ...">
    """
    if not old_html:
        return new_html or ''
    if not new_html:
        return ''
    if old_html == new_html:
        return new_html

    marked = mark_added_tokens(tokenize_markup(old_html), tokenize_markup(new_html))
    return serialize_highlighted(marked, highlight_color)


def highlight_removed(old_html: Optional[str], new_html: Optional[str], removed_color: str = REMOVED_HIGHLIGHT_COLOR) -> str:
    """
    Render old_html with every word that is gone from new_html highlighted.

    This is highlight_changes() with the arguments swapped, words "added"
    relative to the new version are exactly the removed ones.
    """
    if not old_html or not new_html:
        return old_html or ''

    return highlight_changes(new_html, old_html, removed_color)


def render_comparison(old_html: Optional[str],
                      new_html: Optional[str],
                      added_color: str = ADDED_HIGHLIGHT_COLOR,
                      removed_color: str = REMOVED_HIGHLIGHT_COLOR) -> ComparisonRender:
    """
    Build both panels of a side-by-side comparison.

    Returns:
        ComparisonRender: old_html with removed words highlighted, new_html with added words highlighted.
        Without a previous version the old panel is a short placeholder notice.
    """
    if not old_html:
        return ComparisonRender(old_html=NO_PREVIOUS_VERSION_HTML,
                                new_html=highlight_changes('', new_html, added_color))

    return ComparisonRender(old_html=highlight_removed(old_html, new_html, removed_color),
                            new_html=highlight_changes(old_html, new_html, added_color))


# Export main public API
__all__ = [
    'count_changes',
    'character_changes',
    'word_changes',
    'highlight_changes',
    'highlight_removed',
    'render_comparison',
    'mark_added_tokens',
    'serialize_highlighted',
    'ComparisonRender',
    'HighlightState',
    'CHARACTER_LEVEL_MAX_LENGTH',
    'ADDED_HIGHLIGHT_COLOR',
    'REMOVED_HIGHLIGHT_COLOR',
    'NO_PREVIOUS_VERSION_HTML',
]
