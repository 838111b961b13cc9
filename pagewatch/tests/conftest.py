#!/usr/bin/env python3
import pytest
from loguru import logger


# https://loguru.readthedocs.io/en/latest/resources/migration.html#replacing-caplog-fixture-from-pytest-library
# Show loguru logs only if a test fails.
@pytest.fixture(autouse=True)
def reportlog(pytestconfig):
    logging_plugin = pytestconfig.pluginmanager.getplugin("logging-plugin")
    handler_id = logger.add(logging_plugin.report_handler, format="{message}")
    yield
    try:
        logger.remove(handler_id)
    except ValueError:
        # The CLI tests reconfigure the logger, which already dropped this handler
        pass
