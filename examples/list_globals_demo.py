"""
Demo: Binding globals over the loopback transport

Builds an environment against a scripted server, then plays a hotplug
sequence: a second output appears, the first one goes away, and a global
nobody declared is advertised and silently ignored.
"""

import sys

from loguru import logger

from wlenv import (
    InMemoryTransport,
    SimpleGlobal,
    SimpleMultiGlobal,
    init_environment,
    settings,
)
from wlenv.core.interfaces import WlCompositor, WlOutput, WlSeat, WlShm, XdgWmBase


def describe_output(transport: InMemoryTransport, proxy) -> None:
    """Server side: every bound output reports its mode right away"""
    transport.emit(proxy, "mode", width=1920, height=1080, refresh=60000)
    transport.emit(proxy, "done")


def track_mode(proxy, event: str, args: dict) -> None:
    if event == "mode":
        proxy.user_data["mode"] = (args["width"], args["height"])


def main() -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)

    transport = InMemoryTransport()
    transport.on_bind(WlOutput.NAME, describe_output)
    transport.advertise("wl_compositor", 5)
    transport.advertise("wl_shm", 1)
    transport.advertise("xdg_wm_base", 3)
    first_output = transport.advertise("wl_output", 4)
    transport.advertise("wl_seat", 8)

    env = init_environment(
        transport,
        singles=[SimpleGlobal(WlCompositor), SimpleGlobal(WlShm), SimpleGlobal(XdgWmBase)],
        multis=[SimpleMultiGlobal(WlOutput, listener=track_mode), SimpleMultiGlobal(WlSeat)],
        extras={"title": "wlenv demo"},
    )

    print("=" * 60)
    print(env.with_extras(lambda extras: extras.title))
    print("=" * 60)
    print(f"compositor: {env.require_global(WlCompositor)}")
    print(f"wm base:    {env.require_global(XdgWmBase)}")
    for output in env.get_all_globals(WlOutput):
        print(f"output:     {output} mode={output.user_data.get('mode')}")
    print()

    print("Hotplug: new output, first output unplugged, unknown global advertised")
    transport.advertise("wl_output", 4)
    transport.retract(first_output)
    transport.advertise("zxdg_unknown_v1", 1)
    transport.synchronize()
    transport.synchronize()

    for output in env.get_all_globals(WlOutput):
        print(f"output:     {output} mode={output.user_data.get('mode')}")
    print(f"advertised: {[ad.interface_name for ad in env.advertised()]}")
    print(env)


if __name__ == "__main__":
    main()
