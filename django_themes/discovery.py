"""Find theme and block classes by scanning a package directory.

Each ``.py`` file below ``root_path`` is mapped to a dotted module name under
``namespace`` (``<root>/seasonal/winter.py`` -> ``<namespace>.seasonal.winter``),
imported, and searched for concrete classes implementing the contract.
Scanning is best effort: a missing root yields nothing and modules that fail
to import are skipped.
"""
from __future__ import annotations

import inspect
import logging
import os
from importlib import import_module
from typing import List, Type

from .contracts import Block, Theme, is_implementation

log = logging.getLogger(__name__)

__all__ = ["discover", "discover_themes", "discover_blocks"]

_SKIP_DIRS = {"__pycache__"}


def discover_themes(path, namespace: str) -> List[Type[Theme]]:
    return discover(path, namespace, Theme)


def discover_blocks(path, namespace: str) -> List[Type[Block]]:
    return discover(path, namespace, Block)


def discover(root_path, namespace: str, contract: type) -> List[type]:
    """Return the concrete ``contract`` classes defined in modules under ``root_path``."""
    root_path = os.fspath(root_path)
    if not os.path.isdir(root_path):
        log.debug("Discovery root %s does not exist; nothing to scan", root_path)
        return []

    found: List[type] = []
    for module_name in _module_names(root_path, namespace):
        try:
            module = import_module(module_name)
        except Exception as exc:
            log.debug("Skipping %s: %s", module_name, exc)
            continue
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if obj.__module__ != module.__name__:
                continue
            if is_implementation(obj, contract):
                found.append(obj)
    log.debug(
        "Discovered %d %s implementation(s) in %s",
        len(found), contract.__name__, root_path,
    )
    return found


def _module_names(root_path: str, namespace: str):
    prefix = namespace.strip(".")

    def _on_error(exc):
        log.debug("Cannot read %s: %s", getattr(exc, "filename", root_path), exc)

    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIP_DIRS)
        relative = os.path.relpath(dirpath, root_path)
        parts = [] if relative == os.curdir else relative.split(os.sep)
        for filename in sorted(filenames):
            stem, ext = os.path.splitext(filename)
            if ext != ".py":
                continue
            segments = [prefix] if prefix else []
            segments.extend(parts)
            if stem != "__init__":
                segments.append(stem)
            if segments:
                yield ".".join(segments)
