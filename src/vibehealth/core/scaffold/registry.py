"""Scaffold registry — in-memory index of loaded scaffolds."""

from __future__ import annotations

from vibehealth.core.scaffold.models import Scaffold


class ScaffoldRegistry:
    """In-memory registry of all loaded scaffold definitions."""

    def __init__(self) -> None:
        self._scaffolds: dict[str, Scaffold] = {}
        self._by_tool: dict[str, list[str]] = {}

    def register(self, scaffold: Scaffold) -> None:
        """Add a scaffold to the id and tool indexes."""
        if scaffold.id in self._scaffolds:
            raise ValueError(f"Duplicate scaffold id registered: {scaffold.id!r}")
        self._scaffolds[scaffold.id] = scaffold

        for tool in scaffold.applicability.tools:
            ids = self._by_tool.setdefault(tool, [])
            if scaffold.id not in ids:
                ids.append(scaffold.id)

    def get(self, scaffold_id: str) -> Scaffold | None:
        return self._scaffolds.get(scaffold_id)

    def find_by_tool(self, tool_name: str) -> list[Scaffold]:
        """Scaffolds applicable to ``tool_name``, in registration order."""
        return [self._scaffolds[sid] for sid in self._by_tool.get(tool_name, [])]

    def all(self) -> list[Scaffold]:
        return list(self._scaffolds.values())

    def __len__(self) -> int:
        return len(self._scaffolds)
