from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from django.utils.module_loading import import_string

from .contracts import Block, is_implementation
from .exceptions import InvalidImplementation

log = logging.getLogger(__name__)

__all__ = ["LazyRegistry", "BlockRegistry"]

T = TypeVar("T")


class LazyRegistry(Generic[T]):
    """Map keys to implementation classes and construct each one on demand.

    Only classes are stored at registration; an instance is created the first
    time its key is resolved and reused for the lifetime of the registry.
    """

    contract: type = object

    def __init__(self) -> None:
        self._registered: Dict[str, Type[T]] = {}
        self._instances: Dict[str, T] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _validate(self, candidate) -> Type[T]:
        if isinstance(candidate, str):
            try:
                candidate = import_string(candidate)
            except ImportError as exc:
                raise InvalidImplementation(candidate, self.contract) from exc
        if not is_implementation(candidate, self.contract):
            raise InvalidImplementation(candidate, self.contract)
        return candidate

    def _store(self, key: str, cls: Type[T], instance: Optional[T] = None) -> None:
        previous = self._registered.get(key)
        self._registered[key] = cls
        if instance is not None:
            self._instances[key] = instance
        elif previous is not None and previous is not cls:
            self._instances.pop(key, None)
        log.debug("Registered %s %r -> %s.%s", self.contract.__name__, key, cls.__module__, cls.__qualname__)

    def _lock_for(self, key: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(key, threading.Lock())

    def _resolve(self, key: str) -> Optional[T]:
        instance = self._instances.get(key)
        if instance is not None:
            return instance
        if key not in self._registered:
            return None
        with self._lock_for(key):
            instance = self._instances.get(key)
            if instance is None:
                instance = self._registered[key]()
                self._instances[key] = instance
                log.debug("Constructed %s %r", self.contract.__name__, key)
        return instance

    def _resolve_all(self) -> Dict[str, T]:
        return {key: self._resolve(key) for key in list(self._registered)}

    def has(self, key: str) -> bool:
        return key in self._registered

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._registered)


class BlockRegistry(LazyRegistry[Block]):
    """Flat registry of block types for the page editor."""

    contract = Block

    def register(self, block_class) -> "BlockRegistry":
        """Register ``block_class`` under the type its instance declares.

        One instance is built to read :meth:`Block.type` and is kept as the
        cached instance for that type.
        """
        cls = self._validate(block_class)
        instance = cls()
        self._store(instance.type(), cls, instance)
        return self

    def register_many(self, block_classes: Iterable) -> "BlockRegistry":
        for block_class in block_classes:
            self.register(block_class)
        return self

    def get(self, block_type: str) -> Optional[Block]:
        return self._resolve(block_type)

    def types(self) -> List[str]:
        return list(self._registered)

    def all(self) -> Dict[str, Block]:
        return self._resolve_all()

    def list(self) -> List[Dict[str, Any]]:
        return [block.to_dict() for block in self.all().values()]

    def by_category(self) -> Dict[str, List[Dict[str, Any]]]:
        grouped: Dict[str, List[Dict[str, Any]]] = {}
        for block in self.all().values():
            grouped.setdefault(block.category(), []).append(block.to_dict())
        return grouped

    def default_content(self, block_type: str) -> Dict[str, Any]:
        block = self.get(block_type)
        if block is None:
            return {}
        return copy.deepcopy(block.default_content())

    def component(self, block_type: str) -> Optional[str]:
        block = self.get(block_type)
        if block is None:
            return None
        return block.component()
