from loguru import logger

from .diff import count_changes
from .exceptions import InvalidThreshold
from .html_tools import extract_text


def validate_threshold(threshold):
    # bool is an int subclass but never a meaningful threshold
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
        raise InvalidThreshold(threshold)
    return threshold


def detect_change(old_html, new_html, threshold):
    """
    Decide if the page changed enough to report it.

    A threshold of 0 or 1 means any difference in the extracted text counts,
    above that the change count of the text has to reach the threshold.
    The very first snapshot (no old_html) is never a change.
    """
    validate_threshold(threshold)

    if not old_html:
        return False
    if old_html == new_html:
        return False

    old_text = extract_text(old_html)
    new_text = extract_text(new_html)

    if old_text == new_text:
        logger.trace("Markup differs but the extracted text is the same")
        return False

    if threshold <= 1:
        return True

    changes = count_changes(old_text, new_text)
    logger.debug(f"Text changed by {changes}, threshold is {threshold}")
    return changes >= threshold
