from .customer import CustomerCreate, CustomerUpdate, CustomerRead
from .measurement import MeasurementCreate, MeasurementUpdate, MeasurementRead
from .work_order import StageStatus, StageRead, StageUpdate, OrderDetailRead, OrderDetailWithStages
from .order import (
    OrderRead,
    OrderWithDetails,
    SaleOrderCreate,
    WorkOrderInfo,
    WorkOrderConversionCreate,
    ConversionResult,
)
from .assignment import AssignmentCreate, AssignmentUpdate, AssignmentRead
from .calendar import CalendarDetailRow, CalendarStageRow, CalendarRow, CalendarData, CalendarView
from .employee import EmployeeRead
