from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.workspace import Workspace


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """Provide a directory for descriptors and source files rooted at tmp_path."""
    return Workspace(tmp_path)
