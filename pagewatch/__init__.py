#!/usr/bin/env python3

__version__ = '0.1.0'

import getopt
import sys

from loguru import logger

USAGE = ('pagewatch -o [old html file] -n [new html file] -t [threshold, default 100]'
         ' -c [added colour] -r [removed colour] -w [write highlighted new html to file]'
         ' -R [write old html with removals highlighted to file]'
         ' -l [debug level - TRACE, DEBUG(default), INFO, SUCCESS, WARNING, ERROR, CRITICAL]')


def get_version():
    return __version__


def configure_logger(logger_level):
    # Without this, a logger will be duplicated
    logger.remove()
    log_level_for_stdout = {'TRACE', 'DEBUG', 'INFO', 'SUCCESS'}
    logger.configure(handlers=[
        {"sink": sys.stdout, "level": logger_level,
         "filter": lambda record: record['level'].name in log_level_for_stdout},
        {"sink": sys.stderr, "level": logger_level,
         "filter": lambda record: record['level'].name not in log_level_for_stdout},
    ])


def _read_file(path):
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        return f.read()


def _write_file(path, contents):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(contents)


def main(argv=None):
    from pagewatch import config
    from pagewatch.change_detection import detect_change
    from pagewatch.diff import count_changes, render_comparison
    from pagewatch.exceptions import PageWatchException
    from pagewatch.html_tools import extract_text
    from pagewatch.model import DEFAULT_CHANGE_THRESHOLD

    argv = sys.argv[1:] if argv is None else argv

    try:
        opts, args = getopt.getopt(argv, "o:n:t:c:r:w:R:l:")
    except getopt.GetoptError:
        print(USAGE)
        sys.exit(2)

    old_path = None
    new_path = None
    threshold = DEFAULT_CHANGE_THRESHOLD
    added_color = config.get_added_color()
    removed_color = config.get_removed_color()
    highlighted_out = None
    removed_out = None
    logger_level = config.get_logger_level()

    for opt, arg in opts:
        if opt == '-o':
            old_path = arg

        if opt == '-n':
            new_path = arg

        if opt == '-t':
            try:
                threshold = int(arg)
            except ValueError:
                threshold = -1
            if threshold < 0:
                print(f"Threshold must be a whole number >= 0, got '{arg}'")
                print(USAGE)
                sys.exit(2)

        if opt == '-c':
            added_color = arg

        if opt == '-r':
            removed_color = arg

        if opt == '-w':
            highlighted_out = arg

        if opt == '-R':
            removed_out = arg

        if opt == '-l':
            logger_level = int(arg) if arg.isdecimal() else arg.upper()

    try:
        configure_logger(logger_level)
    # Catch negative number or wrong log level name
    except ValueError:
        print("Available log level names: TRACE, DEBUG(default), INFO, SUCCESS,"
              " WARNING, ERROR, CRITICAL")
        sys.exit(2)

    if not new_path:
        print(USAGE)
        sys.exit(2)

    try:
        old_html = _read_file(old_path) if old_path else ''
        new_html = _read_file(new_path)

        changes = count_changes(extract_text(old_html), extract_text(new_html))
        changed = detect_change(old_html, new_html, threshold)

        print(f"Changes: {changes}")
        print(f"Threshold: {threshold}")
        print(f"Changed: {'yes' if changed else 'no'}")

        if highlighted_out or removed_out:
            panels = render_comparison(old_html, new_html, added_color=added_color, removed_color=removed_color)
            if highlighted_out:
                _write_file(highlighted_out, panels.new_html)
                logger.success(f"Wrote highlighted new version to {highlighted_out}")
            if removed_out:
                _write_file(removed_out, panels.old_html)
                logger.success(f"Wrote old version with removals highlighted to {removed_out}")

    except (PageWatchException, OSError) as e:
        logger.error(str(e))
        sys.exit(1)

    sys.exit(0)
