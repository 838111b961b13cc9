import time

from loguru import logger

from . import config
from .change_detection import detect_change
from .diff import render_comparison


def check_snapshot(target, new_html, store):
    """
    Compare freshly fetched markup against the stored snapshot of a target and record the result.

    The fetch itself (and any retrying) belongs to the caller, this only
    decides, updates the target state and stores the snapshots.

    :param target: pagewatch.model.Target.model
    :param new_html: markup that was just fetched
    :param store: a SnapshotStoreBase implementation
    :return: True when a change at or above the target threshold was detected
    """
    uuid = target['uuid']
    previous_html = store.get_latest_html(uuid)

    changed_detected = detect_change(previous_html, new_html, target['change_threshold'])
    now = time.time()

    if changed_detected and not target.is_changed():
        # Keep what it looked like before this change for the comparison view
        if previous_html:
            store.save_previous_html(uuid, previous_html)
        target.mark_changed(when=now)
    elif not target.is_changed():
        target.mark_as_read()

    # Always keep the latest markup
    store.save_latest_html(uuid, new_html)
    target['last_scan_time'] = now
    target['error_message'] = None

    logger.debug(f"Target {uuid} ({target.get('url')}): {'CHANGED' if changed_detected else 'no change'}")
    return changed_detected


def record_check_error(target, error):
    """Put the target in error state, the caller decides what counts as a failed check"""
    message = str(error) if error else None
    logger.error(f"Error checking target {target['uuid']} ({target.get('url')}): {message}")
    target.mark_error(message)
    target['last_scan_time'] = time.time()


def render_target_comparison(target, store, added_color=None, removed_color=None):
    """Load both snapshots of a target and render the side-by-side panels"""
    uuid = target['uuid']
    return render_comparison(old_html=store.get_previous_html(uuid),
                             new_html=store.get_latest_html(uuid) or '',
                             added_color=added_color or config.get_added_color(),
                             removed_color=removed_color or config.get_removed_color())
