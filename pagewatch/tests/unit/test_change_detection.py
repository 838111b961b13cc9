#!/usr/bin/env python3

import unittest

from pagewatch.change_detection import detect_change
from pagewatch.exceptions import InvalidThreshold


class TestDetectChange(unittest.TestCase):

    def test_first_snapshot_is_never_a_change(self):
        self.assertFalse(detect_change(None, '<p>Hello</p>', 1))
        self.assertFalse(detect_change('', '<p>Hello</p>', 1))

    def test_identical_markup(self):
        self.assertFalse(detect_change('<p>Hello</p>', '<p>Hello</p>', 1))

    def test_markup_only_change_is_ignored(self):
        self.assertFalse(detect_change('<p>Hello</p>', '<div class="new">Hello</div>', 1))
        self.assertFalse(detect_change('<p>Hello</p><script>var a=1;</script>',
                                       '<p>Hello</p><script>var a=2;</script>', 1))

    def test_low_threshold_any_text_difference(self):
        self.assertTrue(detect_change('<p>Hello world</p>', '<p>Hello worlds</p>', 1))
        self.assertTrue(detect_change('<p>Hello world</p>', '<p>Hello worlds</p>', 0))

    def test_threshold_compared_against_change_count(self):
        old_html = '<p>Hello world</p>'
        new_html = '<p>Hello there world</p>'
        # 'there ' is six inserted characters
        self.assertTrue(detect_change(old_html, new_html, 6))
        self.assertFalse(detect_change(old_html, new_html, 7))

    def test_emptied_page(self):
        # The text vanished, any difference counts at threshold 1 but the change count is 0
        self.assertTrue(detect_change('<p>Hello</p>', '<p></p>', 1))
        self.assertFalse(detect_change('<p>Hello</p>', '<p></p>', 2))

    def test_invalid_threshold(self):
        for threshold in (-1, '5', 2.5, True, None):
            with self.assertRaises(InvalidThreshold):
                detect_change('<p>a</p>', '<p>b</p>', threshold)

        # InvalidThreshold is also a ValueError for callers that only know about that
        with self.assertRaises(ValueError):
            detect_change('<p>a</p>', '<p>b</p>', -5)


if __name__ == '__main__':
    unittest.main()
