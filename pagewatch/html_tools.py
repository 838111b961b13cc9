from typing import Optional
import re

# Script and style blocks must go before the tags are stripped, or their content leaks into the text
SCRIPT_BLOCK_RE = re.compile(r'<script[\s\S]*?</script>', re.IGNORECASE)
STYLE_BLOCK_RE = re.compile(r'<style[\s\S]*?</style>', re.IGNORECASE)
TAG_RE = re.compile(r'<[^>]+>')
WHITESPACE_RE = re.compile(r'\s+')

# Only these, in this order, this is not a general entity decoder
DECODED_ENTITIES = (
    ('&nbsp;', ' '),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
)


def extract_text(html_content: Optional[str]) -> str:
    """Converts a html string to a single line of readable text.

    Script and style blocks are dropped, every other tag becomes a space,
    a handful of common entities are decoded and all whitespace is collapsed.

    :param html_content: string with html content, None is treated as empty
    :return: normalized plain text, '' for empty input
    """
    if not html_content:
        return ''

    text = SCRIPT_BLOCK_RE.sub('', html_content)
    text = STYLE_BLOCK_RE.sub('', text)
    text = TAG_RE.sub(' ', text)

    for entity, replacement in DECODED_ENTITIES:
        text = text.replace(entity, replacement)

    return WHITESPACE_RE.sub(' ', text).strip()
