"""
Interface markers

Accessors on the environment are keyed by marker classes rather than by
strings, so a typo fails loudly at the call site:

    class ZwpTabletManagerV2(Interface):
        NAME = "zwp_tablet_manager_v2"
        VERSION = 1

    env.get_global(ZwpTabletManagerV2)
"""

from typing import ClassVar


class Interface:
    """Base class for protocol interface markers"""

    NAME: ClassVar[str] = ""
    VERSION: ClassVar[int] = 1

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.NAME:
            raise TypeError(f"{cls.__name__} must define a non-empty NAME")
        if cls.VERSION < 1:
            raise TypeError(f"{cls.__name__}.VERSION must be >= 1")


# Core protocol globals

class WlCompositor(Interface):
    NAME = "wl_compositor"
    VERSION = 4


class WlSubcompositor(Interface):
    NAME = "wl_subcompositor"
    VERSION = 1


class WlShm(Interface):
    NAME = "wl_shm"
    VERSION = 1


class WlDataDeviceManager(Interface):
    NAME = "wl_data_device_manager"
    VERSION = 3


class WlOutput(Interface):
    NAME = "wl_output"
    VERSION = 3


class WlSeat(Interface):
    NAME = "wl_seat"
    VERSION = 7


class XdgWmBase(Interface):
    NAME = "xdg_wm_base"
    VERSION = 2
