"""In-memory registry server, used by the tests and the demo"""

from collections import deque
from functools import partial
from typing import Callable, Deque, Dict, List, Optional

from loguru import logger

from wlenv.core.errors import BindError, TransportError
from wlenv.core.models import GlobalAdded, GlobalEvent, GlobalRemoved
from wlenv.protocol.proxy import Proxy
from wlenv.protocol.transport import RegistryListener

BindHook = Callable[["InMemoryTransport", Proxy], None]


class InMemoryTransport:
    """
    Loopback transport with a scriptable server side.

    Server actions (`advertise`, `retract`, `emit`, `push`) only queue
    notifications; they reach the client on the next `synchronize()`. A
    round delivers exactly what was queued before it started, so anything a
    handler triggers while being notified (e.g. bind replies scripted with
    `on_bind`) is delivered by the following round.
    """

    def __init__(self) -> None:
        self._globals: Dict[int, GlobalAdded] = {}
        # Last advertisement of each retracted id, for binds racing the removal
        self._retracted: Dict[int, GlobalAdded] = {}
        self._listeners: List[RegistryListener] = []
        self._pending: Deque[Callable[[], None]] = deque()
        self._bind_hooks: Dict[str, List[BindHook]] = {}
        self._connected = True
        self.bound: List[Proxy] = []
        self.sync_count = 0

    # Server side

    def advertise(self, interface_name: str, version: int, id: Optional[int] = None) -> int:
        """Announce a new global, returns its id (lowest free one unless given)"""
        if id is None:
            id = self._next_id()
        elif id in self._globals:
            raise ValueError(f"Global id {id} is already live")
        event = GlobalAdded(id=id, interface_name=interface_name, version=version)
        self._globals[event.id] = event
        self._queue_for(list(self._listeners), event)
        logger.debug(
            "Server advertised {interface} id={id} v{version}",
            interface=interface_name,
            id=event.id,
            version=version,
        )
        return event.id

    def retract(self, id: int, with_interface: bool = True) -> None:
        """Remove a live global; the id becomes free for reuse"""
        advertisement = self._globals.pop(id, None)
        if advertisement is None:
            raise KeyError(f"No live global with id {id}")
        self._retracted[id] = advertisement
        event = GlobalRemoved(
            id=id,
            interface_name=advertisement.interface_name if with_interface else None,
        )
        self._queue_for(list(self._listeners), event)

    def push(self, event: GlobalEvent) -> None:
        """Queue a raw notification without touching the server's global list"""
        self._queue_for(list(self._listeners), event)

    def emit(self, proxy: Proxy, event: str, **args) -> None:
        """Queue an event for a bound object"""
        self._pending.append(partial(proxy.dispatch, event, args))

    def on_bind(self, interface_name: str, hook: BindHook) -> None:
        """Run `hook` each time a client binds `interface_name`"""
        self._bind_hooks.setdefault(interface_name, []).append(hook)

    def disconnect(self) -> None:
        self._connected = False

    def globals(self) -> List[GlobalAdded]:
        return list(self._globals.values())

    # Client side

    def subscribe(self, listener: RegistryListener) -> None:
        # A new registry gets the current global list first
        self._listeners.append(listener)
        for event in self._globals.values():
            self._queue_for([listener], event)

    def unsubscribe(self, listener: RegistryListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def bind(self, interface_name: str, id: int, version: int) -> Proxy:
        self._ensure_connected()
        advertisement = self._globals.get(id)
        inert = False
        if advertisement is None or advertisement.interface_name != interface_name:
            retracted = self._retracted.get(id)
            if retracted is not None and retracted.interface_name == interface_name:
                advertisement, inert = retracted, True
        if advertisement is None:
            raise BindError(interface_name, id, version, "no such global")
        if advertisement.interface_name != interface_name:
            raise BindError(
                interface_name, id, version,
                f"global is a {advertisement.interface_name}",
            )
        if not 1 <= version <= advertisement.version:
            raise BindError(
                interface_name, id, version,
                f"server advertised version {advertisement.version}",
            )

        proxy = Proxy(interface_name, id, version)
        if inert:
            # The client has not seen the removal yet; it gets a dead object
            # and the queued GlobalRemoved follows
            logger.debug("Bind of {proxy} raced its removal", proxy=proxy)
            proxy.release()
            return proxy

        self.bound.append(proxy)
        for hook in self._bind_hooks.get(interface_name, []):
            hook(self, proxy)
        return proxy

    def synchronize(self) -> None:
        self._ensure_connected()
        for _ in range(len(self._pending)):
            # Dropped only once delivered, so a failed delivery is retried next round
            self._pending[0]()
            self._pending.popleft()
        self.sync_count += 1

    # Internals

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise TransportError("Connection to the server is closed")

    def _next_id(self) -> int:
        # Lowest free id, so retracted ids get reused like a real server does
        candidate = 1
        while candidate in self._globals:
            candidate += 1
        return candidate

    def _queue_for(self, listeners: List[RegistryListener], event: GlobalEvent) -> None:
        for listener in listeners:
            self._pending.append(partial(listener, event))

    def __repr__(self) -> str:
        return (
            f"<InMemoryTransport globals={len(self._globals)} "
            f"pending={len(self._pending)} connected={self._connected}>"
        )


def make_transport(advertised: Optional[Dict[str, int]] = None) -> InMemoryTransport:
    """Build a transport advertising `{interface_name: version}`"""
    transport = InMemoryTransport()
    for interface_name, version in (advertised or {}).items():
        transport.advertise(interface_name, version)
    return transport
