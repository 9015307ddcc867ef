"""The process-wide connection to the online service."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from fishcore.network import NetworkEvent, NetworkMessage

logger = logging.getLogger(__name__)


class ApiBackend(ABC):
    """A connection to the online service; every backend implements this."""

    @classmethod
    @abstractmethod
    async def create(cls) -> "ApiBackend":
        """Open a connection and return the backend."""

    @abstractmethod
    async def close(self) -> None:
        """Close the connection."""

    @abstractmethod
    def dispatch_message(self, message: NetworkMessage) -> None:
        """Send a message to the service."""

    @abstractmethod
    def next_event(self) -> NetworkEvent | None:
        """Return the next queued event, or ``None`` if there is none."""


_instance: "Api | None" = None


class Api:
    """Holds the single active backend."""

    def __init__(self, backend: ApiBackend):
        self.backend = backend

    @staticmethod
    async def init(backend_class: type[ApiBackend]) -> None:
        """Create the backend, unless one is already running."""
        global _instance
        if _instance is None:
            backend = await backend_class.create()
            _instance = Api(backend)
        else:
            logger.warning("Attempting to initiate api but it is already initiated!")

    @staticmethod
    async def close() -> None:
        """Close and drop the running backend, if any."""
        global _instance
        api, _instance = _instance, None
        if api is not None:
            await api.backend.close()

    @staticmethod
    def instance() -> "Api":
        """Return the running API; raises :class:`RuntimeError` before :meth:`init`."""
        if _instance is None:
            raise RuntimeError("Api.instance was called before Api.init")
        return _instance

    @staticmethod
    def is_initialized() -> bool:
        """Return whether a backend is running."""
        return _instance is not None