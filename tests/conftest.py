import re
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

import pytest
import yaml

ANSI_RE = re.compile(r'\x1b\[[0-9;]*m')


class ConfigFileFixture(Protocol):
    """Type for config_file fixture callable."""

    def __call__(self, entries: list[dict[str, str]]) -> Path:
        """Write a repogen config listing ``entries`` and return its path."""
        ...


@pytest.fixture
def config_file(tmp_path: Path) -> ConfigFileFixture:
    """Fixture to create a config.yaml from template entries."""

    def _create(entries: list[dict[str, str]]) -> Path:
        config_path = tmp_path / 'config.yaml'
        config_path.write_text(
            yaml.safe_dump({'configs': entries}, sort_keys=False),
            encoding='utf-8',
        )
        return config_path

    return _create


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a function removing ANSI color sequences from text."""

    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)

    return _strip
