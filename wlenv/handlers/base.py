"""Handler contracts for "single" and "multi" globals"""

from abc import ABC, abstractmethod
from typing import List, Optional, Type

from wlenv.core.interfaces import Interface
from wlenv.protocol.proxy import Proxy
from wlenv.protocol.transport import Transport


class SingleGlobalHandler(ABC):
    """
    Handler for a global representing a capability of the server.

    These are generally advertised once, at connection start, and never
    removed (wl_compositor, wl_shm, xdg_wm_base).
    """

    interface: Type[Interface]

    @abstractmethod
    def created(self, transport: Transport, id: int, version: int) -> None:
        """The global was advertised with given id and version"""

    @abstractmethod
    def get(self) -> Optional[Proxy]:
        """The bound global, if it was advertised"""


class MultiGlobalHandler(ABC):
    """
    Handler for a global representing a resource.

    Several instances may exist at once and each can appear or disappear
    during the session (wl_output, wl_seat).
    """

    interface: Type[Interface]

    @abstractmethod
    def created(self, transport: Transport, id: int, version: int) -> None:
        """A new instance was advertised with given id and version"""

    @abstractmethod
    def removed(self, id: int) -> None:
        """The instance with given id was removed"""

    @abstractmethod
    def get_all(self) -> List[Proxy]:
        """All currently existing instances, oldest first"""


def bind_version(interface: Type[Interface], advertised: int, max_version: Optional[int] = None) -> int:
    """Highest version both sides support"""
    return min(advertised, max_version if max_version is not None else interface.VERSION)
