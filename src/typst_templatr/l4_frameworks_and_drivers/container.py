"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from typst_templatr.l1_entities.config import TemplatrConfig
from typst_templatr.l2_use_cases.ports.linker import Linker
from typst_templatr.l2_use_cases.project_link import ProjectLinks
from typst_templatr.l2_use_cases.template_library import TemplateLibrary
from typst_templatr.l3_interface_adapters.gateways.symlink_linker import SymlinkLinker


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: TemplatrConfig,
        cwd: Path,
        linker: Linker | None = None,
    ) -> None:
        self.config = config
        self.cwd = cwd

        self.linker: Linker = linker or SymlinkLinker()
        self.library = TemplateLibrary(config.library_dir, cwd)
        self.project_links = ProjectLinks(config.library_dir, cwd, self.linker)
