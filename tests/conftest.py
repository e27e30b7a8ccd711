"""Pytest configuration and shared fixtures for gridtable test suite.

This module provides shared fixtures, test configuration, and sample tables
that are used across the entire test suite.
"""

import logging
from typing import Generator

import pytest

from gridtable.table import Table

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


MYSQL_DESCRIBE_OUTPUT = """\
+----------+--------------+------+-----+---------+----------------+
|  FIELD   |     TYPE     | NULL | KEY | DEFAULT |     EXTRA      |
+----------+--------------+------+-----+---------+----------------+
| user_id  | smallint(5)  | NO   | PRI | NULL    | auto_increment |
+----------+--------------+------+-----+---------+----------------+
"""

SIMPLE_GRID = """\
+----+-------+
| id | name  |
+----+-------+
| 1  | Alice |
| 2  | Bob   |
+----+-------+
"""


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def mysql_describe_output() -> str:
    """Provide the output of a MySQL ``DESCRIBE`` statement."""
    return MYSQL_DESCRIBE_OUTPUT


@pytest.fixture
def simple_grid() -> str:
    """Provide a small two-column grid table."""
    return SIMPLE_GRID


@pytest.fixture
def simple_table() -> Table:
    """Provide the table encoded by ``simple_grid``."""
    return Table(headers=["id", "name"], rows=[["1", "Alice"], ["2", "Bob"]])


@pytest.fixture
def restore_package_logger() -> Generator[None, None, None]:
    """Restore the ``gridtable`` logger changed by ``configure_logging``."""
    logger = logging.getLogger("gridtable")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    try:
        yield
    finally:
        for handler in list(logger.handlers):
            if handler not in handlers:
                logger.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in logger.handlers:
                logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = propagate
