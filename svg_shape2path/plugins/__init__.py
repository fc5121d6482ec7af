"""Optimization plugins for svg-shape2path.

Each plugin module exposes ``name``, ``plugin_type``, ``active``,
``description``, default ``params`` and the per-item function ``fn``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

from svg_shape2path.exceptions import ConfigError, PluginNotFoundError
from svg_shape2path.plugins import convert_shape_to_path as _convert_shape_to_path
from svg_shape2path.plugins.convert_shape_to_path import KeepSignal


@dataclass(frozen=True)
class Plugin:
    """Registered plugin descriptor."""

    name: str
    type: str
    active: bool
    description: str
    fn: Callable[..., KeepSignal]
    params: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_module(cls, module: ModuleType) -> Plugin:
        return cls(
            name=module.name,
            type=module.plugin_type,
            active=module.active,
            description=module.description,
            fn=module.fn,
            params=dict(module.params),
        )

    def resolve_params(self, overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Merge ``overrides`` over the plugin defaults.

        Raises:
            ConfigError: If an override names a param the plugin does not have.
        """
        resolved = dict(self.params)
        for key, value in (overrides or {}).items():
            if key not in self.params:
                raise ConfigError(
                    f"{self.name}: unknown param '{key}'",
                    details={"known": ", ".join(sorted(self.params))},
                )
            resolved[key] = value
        return resolved


_REGISTRY: dict[str, Plugin] = {
    plugin.name: plugin
    for plugin in (Plugin.from_module(_convert_shape_to_path),)
}


def get_plugin(name: str) -> Plugin:
    """Look up a plugin by name.

    Raises:
        PluginNotFoundError: If no plugin has that name.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise PluginNotFoundError(name) from None


def list_plugins() -> list[Plugin]:
    return list(_REGISTRY.values())


__all__ = ["KeepSignal", "Plugin", "get_plugin", "list_plugins"]
