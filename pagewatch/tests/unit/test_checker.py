#!/usr/bin/env python3

import pytest

from pagewatch import checker
from pagewatch.diff import NO_PREVIOUS_VERSION_HTML
from pagewatch.exceptions import InvalidThreshold
from pagewatch.model import STATE_CHANGED, STATE_ERROR, STATE_NO_CHANGE
from pagewatch.model import Target
from pagewatch.storage import MemorySnapshotStore


@pytest.fixture
def store():
    return MemorySnapshotStore()


@pytest.fixture
def target():
    return Target.model(default={'url': 'https://example.com', 'change_threshold': 1})


def test_target_defaults():
    t = Target.model()
    assert t['title'] == 'New Page'
    assert t['change_threshold'] == 100
    assert t['state'] == STATE_NO_CHANGE
    assert t.uuid and t.uuid != Target.model().uuid


def test_target_unknown_state_reset():
    t = Target.model(default={'state': 'bogus'})
    assert t['state'] == STATE_NO_CHANGE


def test_first_check_stores_snapshot(target, store):
    assert checker.check_snapshot(target, '<p>Hello</p>', store) is False
    assert target['state'] == STATE_NO_CHANGE
    assert store.get_latest_html(target.uuid) == '<p>Hello</p>'
    assert store.get_previous_html(target.uuid) is None
    assert target['last_scan_time']


def test_change_keeps_before_snapshot(target, store, mocker):
    mocker.patch('pagewatch.checker.time.time', return_value=1700000000.0)

    checker.check_snapshot(target, '<p>Hello</p>', store)
    assert checker.check_snapshot(target, '<p>Hello world</p>', store) is True

    assert target.is_changed()
    assert target['last_change_time'] == 1700000000.0
    assert store.get_previous_html(target.uuid) == '<p>Hello</p>'
    assert store.get_latest_html(target.uuid) == '<p>Hello world</p>'

    # Still unread, the first "before" snapshot is kept so the comparison covers everything since
    assert checker.check_snapshot(target, '<p>Hello world again</p>', store) is True
    assert store.get_previous_html(target.uuid) == '<p>Hello</p>'

    # Once read, the next change moves the "before" snapshot along
    target.mark_as_read()
    assert checker.check_snapshot(target, '<p>Goodbye</p>', store) is True
    assert store.get_previous_html(target.uuid) == '<p>Hello world again</p>'


def test_changed_state_sticks_until_read(target, store):
    checker.check_snapshot(target, '<p>Hello</p>', store)
    checker.check_snapshot(target, '<p>Hello world</p>', store)
    assert checker.check_snapshot(target, '<p>Hello world</p>', store) is False
    assert target['state'] == STATE_CHANGED


def test_below_threshold_is_not_a_change(store):
    target = Target.model(default={'change_threshold': 50})
    checker.check_snapshot(target, '<p>Hello world</p>', store)
    assert checker.check_snapshot(target, '<p>Hello worlds</p>', store) is False
    assert target['state'] == STATE_NO_CHANGE
    # The latest snapshot is always replaced
    assert store.get_latest_html(target.uuid) == '<p>Hello worlds</p>'


def test_error_then_recovery(target, store):
    checker.record_check_error(target, TimeoutError('Request timeout (30s)'))
    assert target.is_error()
    assert target['state'] == STATE_ERROR
    assert target['error_message'] == 'Request timeout (30s)'

    checker.check_snapshot(target, '<p>Hello</p>', store)
    assert target['state'] == STATE_NO_CHANGE
    assert target['error_message'] is None


def test_error_without_message(target):
    checker.record_check_error(target, None)
    assert target['error_message'] == 'Unknown error'


def test_invalid_threshold_propagates(store):
    target = Target.model(default={'change_threshold': -3})
    with pytest.raises(InvalidThreshold):
        checker.check_snapshot(target, '<p>Hello</p>', store)


def test_render_target_comparison(target, store):
    panels = checker.render_target_comparison(target, store)
    assert panels.old_html == NO_PREVIOUS_VERSION_HTML
    assert panels.new_html == ''

    checker.check_snapshot(target, '<p>Hello world</p>', store)
    checker.check_snapshot(target, '<p>Hello there</p>', store)

    panels = checker.render_target_comparison(target, store, added_color='#0f0', removed_color='#f00')
    assert panels.new_html == '<p>Hello <span style="background-color: #0f0;">there</span></p>'
    assert panels.old_html == '<p>Hello <span style="background-color: #f00;">world</span></p>'


def test_render_target_comparison_colors_from_env(target, store, monkeypatch):
    monkeypatch.setenv('HIGHLIGHT_ADDED_COLOR', 'lime')
    checker.check_snapshot(target, '<p>a</p>', store)
    checker.check_snapshot(target, '<p>b</p>', store)
    panels = checker.render_target_comparison(target, store)
    assert 'background-color: lime' in panels.new_html
