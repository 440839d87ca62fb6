from __future__ import annotations

from pathlib import Path

import pytest

from licensit.core.catalog import get_catalog
from licensit.core.domain.errors import TemplateNotFound


_ENV_VARS = (
    "LICENSE_AUTHOR",
    "LICENSIT_AUTHOR",
    "LICENSIT_LOG_LEVEL",
    "LICENSIT_OUTPUT_FILENAME",
)


@pytest.fixture(autouse=True)
def hermetic_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Autouse: each test runs in its own tmp cwd, with HOME/XDG dirs inside tmp
    and no author configured in the environment.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_catalog.cache_clear()
    yield tmp_path
    get_catalog.cache_clear()


class MemoryTemplateStore:
    """In-memory `TemplateStore` for catalogs built in tests."""

    def __init__(self, templates: dict[str, str]) -> None:
        self.templates = dict(templates)
        self.reads: list[str] = []

    def read(self, template_ref: str) -> str:
        self.reads.append(template_ref)
        try:
            return self.templates[template_ref]
        except KeyError:
            raise TemplateNotFound(template_ref) from None


@pytest.fixture
def memory_store() -> type[MemoryTemplateStore]:
    return MemoryTemplateStore
