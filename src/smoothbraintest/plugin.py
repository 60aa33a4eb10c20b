"""pytest integration: settings options and the ``sbt`` fixture."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from smoothbraintest.config import EngineConfig, load_config
from smoothbraintest.unit import PytestUnit
from smoothbraintest.verbose import setup_logger

logger = logging.getLogger(__name__)

_CONFIG_KEY = pytest.StashKey[EngineConfig]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("smoothbrain", "smoothbrain assertions")
    group.addoption(
        "--smoothbrain-config",
        dest="smoothbrain_config",
        default=None,
        metavar="PATH",
        help="YAML settings file for smoothbrain assertion reports",
    )
    parser.addini(
        "smoothbrain_config",
        help="YAML settings file for smoothbrain assertion reports",
        default="",
    )


def _resolve_config_path(config: pytest.Config) -> Path | None:
    option = config.getoption("smoothbrain_config")
    if option:
        return Path(option)
    ini_value = config.getini("smoothbrain_config")
    if ini_value:
        # ini paths are relative to the ini file, not the invocation directory
        path = Path(ini_value)
        if not path.is_absolute() and config.inipath is not None:
            path = config.inipath.parent / path
        return path
    return None


def pytest_configure(config: pytest.Config) -> None:
    path = _resolve_config_path(config)
    if path is None:
        engine_config = EngineConfig()
    else:
        if not path.exists():
            raise pytest.UsageError(f"smoothbrain config file not found: {path}")
        try:
            engine_config = load_config(path)
        except (ValueError, yaml.YAMLError) as e:
            raise pytest.UsageError(f"invalid smoothbrain config {path}: {e}") from e

    config.stash[_CONFIG_KEY] = engine_config

    if engine_config.log_file or engine_config.verbose:
        debug_file = Path(engine_config.log_file) if engine_config.log_file else None
        setup_logger(debug_file, verbose=engine_config.verbose)
        logger.debug(f"Loaded smoothbrain settings from {path or 'defaults'}")


def pytest_unconfigure(config: pytest.Config) -> None:
    package_logger = logging.getLogger("smoothbraintest")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def sbt(request: pytest.FixtureRequest) -> PytestUnit:
    """Test-unit context for smoothbrain assertions in the current test."""
    return PytestUnit(config=request.config.stash.get(_CONFIG_KEY, None))
