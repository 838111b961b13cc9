# Settings read from the environment, the CLI options override these where they overlap
import os

from .diff import ADDED_HIGHLIGHT_COLOR, REMOVED_HIGHLIGHT_COLOR

# distutils.util.strtobool is gone since python 3.12
_TRUE_VALUES = ('y', 'yes', 't', 'true', 'on', '1')
_FALSE_VALUES = ('n', 'no', 'f', 'false', 'off', '0')


def strtobool(value):
    value = str(value).strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError('"{}" is not a valid bool value'.format(value))


def get_logger_level(default='DEBUG'):
    level = os.getenv('LOGGER_LEVEL')
    if not level:
        return default
    return int(level) if level.isdecimal() else level.upper()


def get_brotli_threshold():
    return int(os.getenv('SNAPSHOT_BROTLI_COMPRESSION_THRESHOLD', 1024))


def brotli_disabled():
    return strtobool(os.getenv('DISABLE_BROTLI_SNAPSHOT', 'False'))


def get_added_color():
    return os.getenv('HIGHLIGHT_ADDED_COLOR', ADDED_HIGHLIGHT_COLOR)


def get_removed_color():
    return os.getenv('HIGHLIGHT_REMOVED_COLOR', REMOVED_HIGHLIGHT_COLOR)
