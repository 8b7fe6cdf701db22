from __future__ import annotations

from pathlib import Path

import pytest


class HasWorkingDir:
    """Gives every test of a class its own scratch directory, taken from ``tmp_path``."""

    working_dir: Path

    @pytest.fixture(autouse=True)
    def _bind_working_dir(self, tmp_path: Path) -> None:
        self.working_dir = tmp_path

    def file(self, *parts: str, text: str | None = None) -> Path:
        path = self.working_dir.joinpath(*parts)
        if text is not None:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return path
