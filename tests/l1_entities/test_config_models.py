"""Tests for the configuration model."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from typst_templatr.l1_entities.config import TemplatrConfig
from typst_templatr.l1_entities.errors import HomeDirectoryError


class TestTemplatrConfig:
    def test_keeps_path_as_typed(self):
        cfg = TemplatrConfig(templates_path='~/.typst-templates')
        assert cfg.templates_path == '~/.typst-templates'

    def test_library_dir_expands_home(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv('HOME', str(tmp_path))
        monkeypatch.setenv('USERPROFILE', str(tmp_path))
        cfg = TemplatrConfig(templates_path='~/.typst-templates')
        assert cfg.library_dir == tmp_path / '.typst-templates'

    def test_library_dir_absolute(self, tmp_path: Path):
        cfg = TemplatrConfig(templates_path=str(tmp_path / 'lib'))
        assert cfg.library_dir == tmp_path / 'lib'

    def test_missing_templates_path_raises(self):
        with pytest.raises(ValidationError):
            TemplatrConfig.model_validate({})

    def test_extra_keys_ignored(self):
        cfg = TemplatrConfig.model_validate({'templates_path': '/lib', 'theme': 'dark'})
        assert cfg.templates_path == '/lib'

    def test_dump_has_single_key(self):
        assert TemplatrConfig(templates_path='/lib').model_dump() == {'templates_path': '/lib'}

    @pytest.mark.skipif(sys.platform == 'win32', reason='~user lookup is POSIX-specific')
    def test_library_dir_unknown_user(self):
        cfg = TemplatrConfig(templates_path='~nosuchuser_ttr_xyz/lib')
        with pytest.raises(HomeDirectoryError, match='Cannot expand templates_path'):
            _ = cfg.library_dir
