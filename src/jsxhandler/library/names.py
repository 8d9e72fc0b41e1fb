"""Map definition symbols to canonical component names."""

from __future__ import annotations

from typing import Mapping

__all__ = ["ComponentNameResolver", "folder_to_component"]

_SUFFIXES = ("Props", "Interface", "Type")
_PREFIXES = ("Internal",)


def folder_to_component(folder: str) -> str:
    """Convert a kebab-case component folder to PascalCase.

    Example:
        >>> folder_to_component("date-picker")
        'DatePicker'
    """

    return "".join(part[:1].upper() + part[1:] for part in folder.split("-") if part)


class ComponentNameResolver:
    """Derive names such as ``Form.Item`` from an interface and its folder.

    Explicit aliases win over the naming heuristics: the interface name is
    stripped of ``Props``-style suffixes, then either names the folder's
    component itself or one of its static members.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases = dict(aliases or {})

    def resolve(self, interface_name: str, component_folder: str) -> str | None:
        interface_name = interface_name.strip()
        if interface_name in self._aliases:
            return self._aliases[interface_name]
        if not interface_name.isidentifier():
            return None
        if not component_folder or component_folder.startswith(("_", ".")):
            return None

        base = folder_to_component(component_folder)
        name = self._strip_affixes(interface_name)
        if name == base or name.startswith("Compounded"):
            return base
        if name.startswith(base) and name[len(base) :][:1].isupper():
            return f"{base}.{name[len(base):]}"
        if not name[:1].isupper():
            return None
        return f"{base}.{name}"

    @staticmethod
    def _strip_affixes(name: str) -> str:
        for prefix in _PREFIXES:
            if name.startswith(prefix) and len(name) > len(prefix):
                name = name[len(prefix) :]
        for suffix in _SUFFIXES:
            if name.endswith(suffix) and len(name) > len(suffix):
                name = name[: -len(suffix)]
                break
        return name
