"""Global test configuration — shared fixtures and safety guards.

This conftest provides:

1. **Logger guard**: the ``opten-text`` logger is module-global, so the
   level and handler list are restored after every test.  A test that
   enables DEBUG or attaches a file handler cannot leak it into the next.

2. **Settings factory**: ``make_settings`` builds a validated
   :class:`~opten_text.config.Settings` with per-test overrides, so CLI
   handler tests never depend on a ``config/settings.toml`` on disk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from opten_text.config import LoggingConfig, Settings, TextConfig
from opten_text.logging import handler, logger
from opten_text.text import SplitOptions

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def _restore_logger() -> Iterator[None]:
    """Snapshot and restore logger level, handler level, and handlers."""
    level = logger.level
    handler_level = handler.level
    handlers = list(logger.handlers)
    yield
    for extra in [h for h in logger.handlers if h not in handlers]:
        logger.removeHandler(extra)
        extra.close()
    logger.setLevel(level)
    handler.setLevel(handler_level)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory for Settings with optional [text] overrides."""

    def _make(
        *,
        replacement: str = "-",
        truncate_length: int = 80,
        split_options: SplitOptions = SplitOptions.REMOVE_EMPTY_ENTRIES,
    ) -> Settings:
        return Settings(
            text=TextConfig(
                replacement=replacement,
                truncate_length=truncate_length,
                split_options=split_options,
            ),
            logging=LoggingConfig(),
        )

    return _make
