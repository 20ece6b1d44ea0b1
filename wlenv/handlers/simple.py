"""Generic handlers for globals that need no dedicated logic"""

from typing import Callable, Dict, List, Optional, Type

from loguru import logger

from wlenv.core.interfaces import Interface
from wlenv.handlers.base import MultiGlobalHandler, SingleGlobalHandler, bind_version
from wlenv.protocol.proxy import Proxy, ProxyListener
from wlenv.protocol.transport import Transport

ProxyCallback = Callable[[Proxy], None]


class SimpleGlobal(SingleGlobalHandler):
    """
    Minimalist handler for "single" globals.

    Binds the global as soon as the registry signals it and does nothing
    more. Appropriate for globals that never generate events, like
    wl_compositor or wl_data_device_manager.
    """

    def __init__(self, interface: Type[Interface], max_version: Optional[int] = None) -> None:
        self.interface = interface
        self.max_version = max_version
        self._global: Optional[Proxy] = None

    def created(self, transport: Transport, id: int, version: int) -> None:
        proxy = transport.bind(
            self.interface.NAME, id, bind_version(self.interface, version, self.max_version)
        )
        previous, self._global = self._global, proxy
        if previous is not None:
            logger.debug(
                "{interface} re-advertised as id={id}, replacing {old}",
                interface=self.interface.NAME,
                id=id,
                old=previous,
            )
            previous.release()

    def get(self) -> Optional[Proxy]:
        return self._global

    def __repr__(self) -> str:
        return f"SimpleGlobal({self.interface.NAME})"


class SimpleMultiGlobal(MultiGlobalHandler):
    """
    Generic handler for "multi" globals.

    Keeps every live instance keyed by registry id, in advertisement order.
    `listener` is attached to each bound object so the application can
    follow its events; `on_created` and `on_removed` are called with the
    object after it is bound and before it is released.
    """

    def __init__(
        self,
        interface: Type[Interface],
        max_version: Optional[int] = None,
        listener: Optional[ProxyListener] = None,
        on_created: Optional[ProxyCallback] = None,
        on_removed: Optional[ProxyCallback] = None,
    ) -> None:
        self.interface = interface
        self.max_version = max_version
        self.listener = listener
        self.on_created = on_created
        self.on_removed = on_removed
        self._instances: Dict[int, Proxy] = {}

    def created(self, transport: Transport, id: int, version: int) -> None:
        proxy = transport.bind(
            self.interface.NAME, id, bind_version(self.interface, version, self.max_version)
        )
        if self.listener is not None:
            proxy.add_listener(self.listener)

        previous = self._instances.get(id)
        if previous is not None:
            # Duplicate advertisement: swap in place so ordering is kept
            logger.debug("Duplicate advertisement of {proxy}, replacing", proxy=previous)
            previous.release()
        self._instances[id] = proxy

        if self.on_created is not None:
            self.on_created(proxy)

    def removed(self, id: int) -> None:
        proxy = self._instances.pop(id, None)
        if proxy is None:
            return
        if self.on_removed is not None:
            self.on_removed(proxy)
        proxy.release()

    def get_all(self) -> List[Proxy]:
        return list(self._instances.values())

    def __repr__(self) -> str:
        return f"SimpleMultiGlobal({self.interface.NAME}, live={len(self._instances)})"
