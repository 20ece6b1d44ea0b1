"""Transport contract, bound objects and the loopback transport"""

from wlenv.protocol.memory import InMemoryTransport, make_transport
from wlenv.protocol.proxy import Proxy
from wlenv.protocol.transport import RegistryListener, Transport

__all__ = ["InMemoryTransport", "make_transport", "Proxy", "RegistryListener", "Transport"]
