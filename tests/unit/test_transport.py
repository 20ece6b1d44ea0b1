"""Unit tests for the proxy and the in-memory transport"""

from typing import List

import pytest

from wlenv.core.errors import BindError, TransportError
from wlenv.core.models import GlobalAdded, GlobalEvent, GlobalRemoved
from wlenv.protocol import InMemoryTransport, Proxy, Transport, make_transport


@pytest.fixture
def transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def received(transport: InMemoryTransport) -> List[GlobalEvent]:
    events: List[GlobalEvent] = []
    transport.subscribe(events.append)
    return events


class TestProxy:
    """Test bound object handles"""

    def test_listener_receives_events(self) -> None:
        proxy = Proxy("wl_output", 3, 2)
        seen = []
        proxy.add_listener(lambda p, event, args: seen.append((p, event, args)))

        proxy.dispatch("mode", {"width": 800})

        assert seen == [(proxy, "mode", {"width": 800})]

    def test_released_proxy_drops_events(self) -> None:
        proxy = Proxy("wl_output", 3, 2)
        seen = []
        proxy.add_listener(lambda p, event, args: seen.append(event))

        proxy.release()
        proxy.dispatch("mode", {})

        assert not proxy.is_alive
        assert seen == []

    def test_remove_listener(self) -> None:
        proxy = Proxy("wl_seat", 1, 1)
        seen = []

        def listener(p, event, args):
            seen.append(event)

        proxy.add_listener(listener)
        proxy.remove_listener(listener)
        proxy.dispatch("name", {"name": "seat0"})

        assert seen == []

    def test_repr(self) -> None:
        assert repr(Proxy("wl_shm", 2, 1)) == "<Proxy wl_shm@2 v1>"


class TestInMemoryTransport:
    """Test the loopback registry server"""

    def test_satisfies_transport_contract(self, transport: InMemoryTransport) -> None:
        assert isinstance(transport, Transport)

    def test_notifications_wait_for_synchronize(
        self, transport: InMemoryTransport, received: List[GlobalEvent]
    ) -> None:
        transport.advertise("wl_compositor", 4)

        assert received == []

        transport.synchronize()

        assert received == [GlobalAdded(id=1, interface_name="wl_compositor", version=4)]

    def test_new_subscriber_gets_current_globals(self) -> None:
        """A late subscriber receives the global list, without duplicates"""
        transport = make_transport({"wl_compositor": 4, "wl_shm": 1})
        events: List[GlobalEvent] = []

        transport.subscribe(events.append)
        transport.synchronize()

        assert [event.interface_name for event in events] == ["wl_compositor", "wl_shm"]

    def test_ids_reused_after_retraction(
        self, transport: InMemoryTransport, received: List[GlobalEvent]
    ) -> None:
        first = transport.advertise("wl_output", 2)
        second = transport.advertise("wl_output", 2)
        transport.retract(first)

        assert transport.advertise("wl_seat", 7) == first
        assert second == 2

    def test_retraction_notification(
        self, transport: InMemoryTransport, received: List[GlobalEvent]
    ) -> None:
        id = transport.advertise("wl_output", 2)
        transport.retract(id)
        transport.retract(transport.advertise("wl_seat", 1), with_interface=False)
        transport.synchronize()

        assert received[1] == GlobalRemoved(id=id, interface_name="wl_output")
        assert received[3] == GlobalRemoved(id=id, interface_name=None)

    def test_advertise_with_explicit_id(self, transport: InMemoryTransport) -> None:
        assert transport.advertise("wl_output", 2, id=5) == 5
        assert transport.advertise("wl_output", 2) == 1

        with pytest.raises(ValueError):
            transport.advertise("wl_seat", 1, id=5)

    def test_retract_unknown_id(self, transport: InMemoryTransport) -> None:
        with pytest.raises(KeyError):
            transport.retract(42)

    def test_bind_at_or_below_advertised_version(self, transport: InMemoryTransport) -> None:
        id = transport.advertise("wl_compositor", 4)

        proxy = transport.bind("wl_compositor", id, 3)

        assert proxy.version == 3
        assert proxy.id == id
        assert transport.bound == [proxy]

    def test_bind_above_advertised_version_fails(self, transport: InMemoryTransport) -> None:
        id = transport.advertise("wl_compositor", 4)

        with pytest.raises(BindError):
            transport.bind("wl_compositor", id, 5)

    def test_bind_wrong_interface_fails(self, transport: InMemoryTransport) -> None:
        id = transport.advertise("wl_compositor", 4)

        with pytest.raises(BindError):
            transport.bind("wl_shm", id, 1)

    def test_bind_racing_retraction_gets_released_proxy(self, transport: InMemoryTransport) -> None:
        id = transport.advertise("wl_output", 3)
        transport.retract(id)

        proxy = transport.bind("wl_output", id, 3)

        assert proxy.id == id
        assert not proxy.is_alive
        assert transport.bound == []

    def test_bind_racing_retraction_checks_version(self, transport: InMemoryTransport) -> None:
        id = transport.advertise("wl_output", 3)
        transport.retract(id)

        with pytest.raises(BindError):
            transport.bind("wl_output", id, 4)

    def test_failed_delivery_retried(self, transport: InMemoryTransport) -> None:
        """A notification whose delivery raised stays queued"""
        seen = []
        failures = [RuntimeError("busy")]

        def flaky(event: GlobalEvent) -> None:
            if failures:
                raise failures.pop()
            seen.append(event.id)

        transport.subscribe(flaky)
        id = transport.advertise("wl_seat", 1)

        with pytest.raises(RuntimeError):
            transport.synchronize()
        transport.synchronize()

        assert seen == [id]

    def test_bind_dead_id_fails(self, transport: InMemoryTransport) -> None:
        with pytest.raises(BindError):
            transport.bind("wl_shm", 9, 1)

    def test_round_delivers_only_earlier_notifications(self, transport: InMemoryTransport) -> None:
        """Replies to requests made during a round arrive in the next one"""
        seen = []
        transport.on_bind("wl_output", lambda t, proxy: t.emit(proxy, "done"))
        transport.advertise("wl_output", 2)

        def bind_on_add(event: GlobalEvent) -> None:
            proxy = transport.bind(event.interface_name, event.id, 2)
            proxy.add_listener(lambda p, name, args: seen.append(name))

        transport.subscribe(bind_on_add)
        transport.synchronize()

        assert seen == []

        transport.synchronize()

        assert seen == ["done"]
        assert transport.sync_count == 2

    def test_push_raw_notification(
        self, transport: InMemoryTransport, received: List[GlobalEvent]
    ) -> None:
        transport.push(GlobalRemoved(id=5, interface_name="wl_output"))
        transport.synchronize()

        assert received == [GlobalRemoved(id=5, interface_name="wl_output")]
        assert transport.globals() == []

    def test_unsubscribe(self, transport: InMemoryTransport, received: List[GlobalEvent]) -> None:
        transport.unsubscribe(received.append)
        transport.advertise("wl_shm", 1)
        transport.synchronize()

        assert received == []

    def test_disconnected_transport_fails(self, transport: InMemoryTransport) -> None:
        id = transport.advertise("wl_shm", 1)
        transport.disconnect()

        with pytest.raises(TransportError):
            transport.synchronize()
        with pytest.raises(TransportError):
            transport.bind("wl_shm", id, 1)
