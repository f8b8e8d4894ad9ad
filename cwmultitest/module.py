"""Generic module interface with always-failing and always-accepting modules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class AppResponse:
    """Events and optional data produced by processing a message."""

    events: list = field(default_factory=list)
    data: Optional[bytes] = None


class ModuleError(Exception):
    """Raised when a module refuses to process a message, query or sudo action."""


class Module(ABC):
    """Handles messages, queries and privileged actions of one kind."""

    @abstractmethod
    def execute(self, api: Any, storage: Any, router: Any, block: Any, sender: Any, msg: Any) -> AppResponse:
        """Run a message sent by an external actor or contract."""

    @abstractmethod
    def query(self, api: Any, storage: Any, querier: Any, block: Any, request: Any) -> bytes:
        """Answer a query."""

    @abstractmethod
    def sudo(self, api: Any, storage: Any, router: Any, block: Any, msg: Any) -> AppResponse:
        """Run a privileged action that has already been authorized."""


class FailingModule(Module):
    """A module that rejects every message, query and privileged action."""

    def execute(self, api, storage, router, block, sender, msg) -> AppResponse:
        raise ModuleError(f"Unexpected exec msg {msg!r} from {sender!r}")

    def query(self, api, storage, querier, block, request) -> bytes:
        raise ModuleError(f"Unexpected custom query {request!r}")

    def sudo(self, api, storage, router, block, msg) -> AppResponse:
        raise ModuleError(f"Unexpected sudo msg {msg!r}")


class AcceptingModule(Module):
    """A module that accepts everything and returns empty results."""

    def execute(self, api, storage, router, block, sender, msg) -> AppResponse:
        return AppResponse()

    def query(self, api, storage, querier, block, request) -> bytes:
        return b""

    def sudo(self, api, storage, router, block, msg) -> AppResponse:
        return AppResponse()