from .device_gatekeeper import DeviceGateKeeper, SessionIdentity
from .device_provisioning import find_or_create_device
from .event_query_planner import plan_event_window

__all__ = [
    "DeviceGateKeeper",
    "SessionIdentity",
    "find_or_create_device",
    "plan_event_window",
]
