"""Factory functions for creating pre-populated DecorationRegistry instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roomcost.config import DEFAULT_DELIMITER, DEFAULT_ENCODING
from roomcost.ingest import load_items
from roomcost.registry import DecorationRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from roomcost.formatting import ReportWriter


def create_registry(
    items_path: Path,
    report: ReportWriter | None = None,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> DecorationRegistry:
    """Create a DecorationRegistry populated from an items file.

    Example::

        from pathlib import Path
        from roomcost import create_registry

        registry = create_registry(Path("items.txt"))
        registry.apply("A101", "WhitePaint", "BlueTile")
    """
    registry = DecorationRegistry(report)
    load_items(registry, items_path, delimiter=delimiter, encoding=encoding)
    return registry
