"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from typst_templatr.l1_entities.config import TemplatrConfig
from typst_templatr.l1_entities.errors import ConfigNotFoundError

# --- Protocol-conforming Fakes ---


class FakeLinker:
    """Fake Linker for L2 use case tests — records calls, touches nothing."""

    def __init__(self, error: OSError | None = None) -> None:
        self._error = error
        self.link_calls: list[tuple[Path, Path]] = []
        self.unlink_calls: list[Path] = []

    def link(self, source: Path, destination: Path) -> None:
        if self._error is not None:
            raise self._error
        self.link_calls.append((source, destination))

    def unlink(self, destination: Path) -> None:
        if self._error is not None:
            raise self._error
        self.unlink_calls.append(destination)


class FakeConfigStore:
    """Fake ConfigStore for L4 tests — keeps the record in memory."""

    def __init__(self, config: TemplatrConfig | None = None, path: Path | None = None) -> None:
        self.config = config
        self._path = path or Path('/fake/home/.typst-templatr.yaml')
        self.save_calls: list[TemplatrConfig] = []

    def resolve_path(self) -> Path:
        return self._path

    def load(self) -> TemplatrConfig:
        if self.config is None:
            raise ConfigNotFoundError(self._path)
        return self.config

    def save(self, config: TemplatrConfig) -> Path:
        self.save_calls.append(config)
        self.config = config
        return self._path


# --- Standard Fixtures ---


@pytest.fixture
def library_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'lib'
    d.mkdir()
    return d


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'proj'
    d.mkdir()
    return d


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'src'
    d.mkdir()
    return d


@pytest.fixture
def report_template(source_dir: Path) -> Path:
    p = source_dir / 'report.typ'
    p.write_text('#set page(paper: "a4")\n= Report\n', encoding='utf-8')
    return p


@pytest.fixture
def fake_linker() -> FakeLinker:
    return FakeLinker()
