"""Contract of the connection the environment is built on"""

from typing import Callable, Protocol, runtime_checkable

from wlenv.core.models import GlobalEvent
from wlenv.protocol.proxy import Proxy

RegistryListener = Callable[[GlobalEvent], None]


@runtime_checkable
class Transport(Protocol):
    """
    Registry side of a client connection.

    Notifications are only delivered to subscribed listeners from inside
    `synchronize()`, on the calling thread, in the order the server sent them.
    """

    def subscribe(self, listener: RegistryListener) -> None: ...

    def unsubscribe(self, listener: RegistryListener) -> None: ...

    def bind(self, interface_name: str, id: int, version: int) -> Proxy:
        """Bind global `id`; raises BindError if `version` exceeds the advertised one"""
        ...

    def synchronize(self) -> None:
        """Block until every notification sent before this call is delivered"""
        ...
