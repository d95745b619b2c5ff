"""Per-module interceptor chains.

An interceptor gets first refusal over every (docstring, declaration) pair
found while extracting a module:

    def interceptor(doc, decl) -> tuple[bool, doc, decl]: ...

Interceptors run in registration order. Each receives the pair as left by
the previous one. The first to return ``claimed=True`` ends the chain and its
pair is final; default classification is skipped for it.

The registry is owned by the caller and passed to the extractor explicitly.
It does no locking: two runs against the same target module must not share a
registry concurrently.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from docsweep.core.errors import HookError
from docsweep.core.logging import get_logger

log = get_logger("hooks.registry")

Interceptor = Callable[[Any, Any], tuple[bool, Any, Any]]


class HookResult(NamedTuple):
    """Outcome of running a module's chain over one pair."""

    claimed: bool
    doc: Any
    decl: Any


@dataclass(frozen=True, slots=True)
class _Entry:
    interceptor: Interceptor
    name: str | None = None


@dataclass
class HookRegistry:
    """Ordered interceptor lists keyed by target module name."""

    _chains: dict[str, list[_Entry]] = field(default_factory=dict)

    def _chain(self, module: str) -> list[_Entry]:
        return self._chains.setdefault(module, [])

    def hooks(self, module: str) -> list[Interceptor]:
        """Interceptors registered for ``module``, in run order."""
        return [entry.interceptor for entry in self._chain(module)]

    def names(self, module: str) -> list[str]:
        return [entry.name for entry in self._chain(module) if entry.name is not None]

    def register(self, module: str, interceptor: Interceptor, *, name: str | None = None) -> None:
        """Append ``interceptor`` to the chain of ``module``.

        Raises:
            HookError: ``name`` is already registered for ``module``.
        """
        chain = self._chain(module)
        if name is not None and any(entry.name == name for entry in chain):
            raise HookError.duplicate_name(module, name)
        chain.append(_Entry(interceptor=interceptor, name=name))
        log.debug("hook_registered", module=module, name=name, position=len(chain))

    def for_module(self, module: str) -> ModuleHooks:
        return ModuleHooks(self, module)

    def intercept(self, module: str, doc: Any, decl: Any) -> HookResult:
        """Run the chain of ``module`` over one pair."""
        for entry in self._chain(module):
            claimed, doc, decl = entry.interceptor(doc, decl)
            if claimed:
                log.debug("hook_claimed", module=module, name=entry.name)
                return HookResult(True, doc, decl)
        return HookResult(False, doc, decl)


@dataclass(frozen=True)
class ModuleHooks:
    """Registration handle bound to one target module."""

    registry: HookRegistry
    module: str

    def register(self, interceptor: Interceptor, *, name: str | None = None) -> Interceptor:
        """Register ``interceptor``; returns it so this also works as a decorator."""
        self.registry.register(self.module, interceptor, name=name)
        return interceptor

    def hooks(self) -> list[Interceptor]:
        return self.registry.hooks(self.module)
