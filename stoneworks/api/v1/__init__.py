from .calendar import router as calendar_router
from .assignments import router as assignments_router
from .orders import router as orders_router
from .work_orders import router as work_orders_router
from .customers import router as customers_router
from .measurements import router as measurements_router
from .employees import router as employees_router
from .drafts import router as drafts_router

__all__ = [
    "calendar_router",
    "assignments_router",
    "orders_router",
    "work_orders_router",
    "customers_router",
    "measurements_router",
    "employees_router",
    "drafts_router",
]
