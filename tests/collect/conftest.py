"""Shared fixtures for collection tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from docsweep.collect import OutputStore
from docsweep.collect._internal.scanner import BlockScanner
from docsweep.config.models import ExtractionConfig
from docsweep.hooks import HookRegistry

MODULE = "Geometry"
FILE = "src/geometry.jl"


@pytest.fixture
def registry() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def make_scanner(registry: HookRegistry) -> Callable[..., BlockScanner]:
    """Build a scanner for the test module with a fresh store."""

    def _make(config: ExtractionConfig | None = None) -> BlockScanner:
        return BlockScanner(
            module=MODULE,
            store=OutputStore(),
            hooks=registry,
            config=config or ExtractionConfig(),
        )

    return _make
