# slotgraph/__init__.py
"""slotgraph: weighted directed graphs over recyclable integer slots."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

from .core._Edge import Edge
from .core._Errors import (
    ConcurrentStructuralChange,
    DuplicateNameError,
    GraphError,
    InvalidEndpointError,
    SelfLoopError,
)
from .core._Marks import Mark
from .core.graph import Graph

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "io": "slotgraph.io",
    "core": "slotgraph.core",
    "algorithms": "slotgraph.algorithms",
    "adapters": "slotgraph.adapters",
    "networkx": "slotgraph.adapters.networkx_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    "read_edge_list": ("slotgraph.io.edgelist_io", "read_edge_list"),
    "write_edge_list": ("slotgraph.io.edgelist_io", "write_edge_list"),
    "from_dataframe": ("slotgraph.io.dataframe_io", "from_dataframe"),
    "to_dataframe": ("slotgraph.io.dataframe_io", "to_dataframe"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("slotgraph.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("slotgraph.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(
    set(list(_lazy_submodules) + list(_lazy_symbols))
    | {
        "Graph",
        "Edge",
        "Mark",
        "GraphError",
        "InvalidEndpointError",
        "SelfLoopError",
        "DuplicateNameError",
        "ConcurrentStructuralChange",
    }
)


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("slotgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
