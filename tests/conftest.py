import sys
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI points loguru at the runner's stderr; restore a plain sink afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def write_file():
    """Write text to a path below a root, creating parent directories."""

    def _write(root: Path, relative: str, content: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
