"""Tests for scope tracking."""

from __future__ import annotations

import pytest

from docsweep.collect import Scope, enter
from docsweep.tree import build


class TestScopeRoot:
    @pytest.mark.parametrize(
        ("name", "path"),
        [
            ("Geometry", ("Geometry",)),
            ("Outer.Inner", ("Outer", "Inner")),
            ("", ()),
        ],
    )
    def test_dotted_name_becomes_path(self, name: str, path: tuple[str, ...]) -> None:
        assert Scope.root(name).module_path == path

    def test_root_has_no_bindings(self) -> None:
        scope = Scope.root("M")
        assert scope.type_params == frozenset()
        assert not scope.in_type


class TestEnter:
    def test_module_appends_to_path(self) -> None:
        scope = Scope.root("Outer")

        inner = enter(scope, build.module("Inner"))

        assert inner.module_path == ("Outer", "Inner")

    def test_type_adds_type_params_and_flag(self) -> None:
        scope = Scope.root("Geometry")

        inner = enter(scope, build.type_decl("Point", type_params=["T"]))

        assert inner.type_params == frozenset({"T"})
        assert inner.in_type
        assert inner.module_path == ("Geometry",)

    def test_nested_types_accumulate_params(self) -> None:
        outer = enter(Scope.root("M"), build.type_decl("A", type_params=["T"]))

        inner = enter(outer, build.type_decl("B", type_params=["S"]))

        assert inner.type_params == frozenset({"T", "S"})

    def test_module_inside_type_scope_resets_bindings(self) -> None:
        typed = enter(Scope.root("M"), build.type_decl("A", type_params=["T"]))

        inner = enter(typed, build.module("Sub"))

        assert inner.type_params == frozenset()
        assert not inner.in_type

    def test_enter_does_not_mutate_parent(self) -> None:
        scope = Scope.root("M")
        before = (scope.module_path, scope.type_params, scope.flags)

        enter(scope, build.type_decl("A", type_params=["T"]))
        enter(scope, build.module("Sub"))

        assert (scope.module_path, scope.type_params, scope.flags) == before

    def test_other_nodes_keep_scope(self) -> None:
        scope = Scope.root("M")
        assert enter(scope, build.block()) is scope
        assert enter(scope, build.function("f", "x")) is scope

    def test_scopes_compare_structurally(self) -> None:
        node = build.type_decl("A", type_params=["T"])
        assert enter(Scope.root("M"), node) == enter(Scope.root("M"), node)
        assert hash(enter(Scope.root("M"), node)) == hash(enter(Scope.root("M"), node))
