"""slotgraph.io: edge-list and dataframe I/O with lazy symbol loading."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_lazy_symbols: dict[str, tuple[str, str]] = {
    # plain-text edge list
    "read_edge_list": ("slotgraph.io.edgelist_io", "read_edge_list"),
    "write_edge_list": ("slotgraph.io.edgelist_io", "write_edge_list"),
    "iter_edge_lines": ("slotgraph.io.edgelist_io", "iter_edge_lines"),
    # DataFrame
    "from_dataframe": ("slotgraph.io.dataframe_io", "from_dataframe"),
    "to_dataframe": ("slotgraph.io.dataframe_io", "to_dataframe"),
}

__all__ = sorted(_lazy_symbols)


def __getattr__(name: str) -> Any:
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
