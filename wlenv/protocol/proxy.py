"""Bound protocol objects"""

from typing import Any, Callable, Dict, List

from loguru import logger

ProxyListener = Callable[["Proxy", str, Dict[str, Any]], None]


class Proxy:
    """
    Local handle to a bound global.

    Tagged with the interface it was bound as, the registry id it came from
    and the version negotiated at bind time. Events the server sends to the
    object are delivered to the listeners attached with `add_listener`.
    """

    def __init__(self, interface_name: str, id: int, version: int) -> None:
        self.interface_name = interface_name
        self.id = id
        self.version = version
        self.user_data: Dict[str, Any] = {}
        self._listeners: List[ProxyListener] = []
        self._alive = True

    @property
    def is_alive(self) -> bool:
        return self._alive

    def add_listener(self, listener: ProxyListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ProxyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, event: str, args: Dict[str, Any]) -> None:
        """Deliver a server event to the listeners of this object"""
        if not self._alive:
            # Events racing a release are dropped, the server will stop sending them
            logger.debug("Dropping {event} for released {proxy}", event=event, proxy=self)
            return
        for listener in list(self._listeners):
            listener(self, event, args)

    def release(self) -> None:
        """Destroy the local object; further events are dropped"""
        if self._alive:
            self._alive = False
            self._listeners.clear()
            logger.debug("Released {proxy}", proxy=self)

    def __repr__(self) -> str:
        state = "" if self._alive else ", released"
        return f"<Proxy {self.interface_name}@{self.id} v{self.version}{state}>"
