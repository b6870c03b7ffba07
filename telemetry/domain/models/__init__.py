from .user import User
from .device import Device
from .event import DeviceEvent
from .time_window import EventTimeWindow

__all__ = ["User", "Device", "DeviceEvent", "EventTimeWindow"]
