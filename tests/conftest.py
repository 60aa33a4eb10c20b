"""Pytest configuration and fixtures."""

import logging

import pytest

from smoothbraintest.unit import RecordingUnit


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Drop handlers added to smoothbraintest loggers so tests stay isolated."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("smoothbraintest"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def recorder():
    """Non-halting unit context that keeps every failure message."""
    return RecordingUnit()


@pytest.fixture
def halting():
    """Unit context that records a failure and then raises UnitHalted."""
    return RecordingUnit(halt=True)


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""
    import textwrap

    def _write(content: str, name: str = "smoothbrain.yaml"):
        p = tmp_path / name
        p.write_text(textwrap.dedent(content))
        return p

    return _write
