"""Hook chain: caller-registered interceptors run before classification."""

from docsweep.hooks.builtin import BUILTIN_HOOKS, capture_marked, register_builtins, track
from docsweep.hooks.registry import HookRegistry, HookResult, Interceptor, ModuleHooks

__all__ = [
    "BUILTIN_HOOKS",
    "HookRegistry",
    "HookResult",
    "Interceptor",
    "ModuleHooks",
    "capture_marked",
    "register_builtins",
    "track",
]
