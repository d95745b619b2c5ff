"""Tests for the hook registry and interceptor chain."""

from __future__ import annotations

from typing import Any

import pytest

from docsweep.core.errors import ErrorCode, HookError
from docsweep.hooks import HookRegistry, HookResult


def _passthrough(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
    return False, doc, decl


class TestRegistration:
    def test_lazily_empty_for_unknown_module(self) -> None:
        registry = HookRegistry()
        assert registry.hooks("Geometry") == []

    def test_register_appends_in_order(self) -> None:
        registry = HookRegistry()

        def first(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
            return False, doc, decl

        def second(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
            return False, doc, decl

        registry.register("Geometry", first)
        registry.register("Geometry", second)

        assert registry.hooks("Geometry") == [first, second]

    def test_modules_are_independent(self) -> None:
        registry = HookRegistry()
        registry.register("A", _passthrough)

        assert registry.hooks("B") == []

    def test_unnamed_duplicates_allowed(self) -> None:
        registry = HookRegistry()
        registry.register("A", _passthrough)
        registry.register("A", _passthrough)

        assert len(registry.hooks("A")) == 2

    def test_duplicate_name_raises_immediately(self) -> None:
        registry = HookRegistry()
        registry.register("A", _passthrough, name="capture")

        with pytest.raises(HookError) as exc_info:
            registry.register("A", _passthrough, name="capture")

        assert exc_info.value.code is ErrorCode.HOOK_DUPLICATE_NAME
        assert registry.names("A") == ["capture"]

    def test_same_name_different_modules(self) -> None:
        registry = HookRegistry()
        registry.register("A", _passthrough, name="capture")
        registry.register("B", _passthrough, name="capture")

        assert registry.names("B") == ["capture"]

    def test_module_handle_registers_for_its_module(self) -> None:
        registry = HookRegistry()
        hooks = registry.for_module("Geometry")

        @hooks.register
        def decorated(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
            return False, doc, decl

        assert hooks.hooks() == [decorated]
        assert registry.hooks("Geometry") == [decorated]


class TestIntercept:
    def test_no_hooks_returns_pair_unchanged(self) -> None:
        registry = HookRegistry()
        decl = object()

        result = registry.intercept("A", "doc", decl)

        assert result == HookResult(False, "doc", decl)

    def test_unclaimed_rewrites_flow_to_next(self) -> None:
        registry = HookRegistry()
        seen: list[Any] = []

        def upper(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
            return False, doc.upper(), decl

        def record(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
            seen.append(doc)
            return False, doc, decl

        registry.register("A", upper)
        registry.register("A", record)

        result = registry.intercept("A", "doc", None)

        assert seen == ["DOC"]
        assert result == HookResult(False, "DOC", None)

    def test_first_claim_stops_chain(self) -> None:
        registry = HookRegistry()
        calls: list[str] = []

        def claim(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
            calls.append("claim")
            return True, "claimed doc", "claimed decl"

        def never(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
            calls.append("never")
            return False, doc, decl

        registry.register("A", claim)
        registry.register("A", never)

        result = registry.intercept("A", "doc", "decl")

        assert calls == ["claim"]
        assert result == HookResult(True, "claimed doc", "claimed decl")

    def test_other_module_hooks_not_consulted(self) -> None:
        registry = HookRegistry()

        def claim(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
            return True, doc, decl

        registry.register("Other", claim)

        assert registry.intercept("A", "doc", "decl").claimed is False
