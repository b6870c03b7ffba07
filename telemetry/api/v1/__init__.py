from .auth_controller import router as auth_router
from .device_controller import router as device_router
from .events_controller import router as events_router
from .health_controller import router as health_router


__all__ = ["auth_router", "device_router", "events_router", "health_router"]
