"""业务常量

工种代码、工序模板、状态枚举等固定数据
"""

WORK_TYPES = [
    {"name": "Kitchen", "code": "K", "value": "kitchen"},
    {"name": "Walls", "code": "W", "value": "walls"},
    {"name": "Floor", "code": "F", "value": "floor"},
    {"name": "Other", "code": "X", "value": "other"},
]

# 工种 -> 订单编号代码
WORK_TYPE_CODES = {wt["value"]: wt["code"] for wt in WORK_TYPES}

ORDER_STATUSES = {
    "sale": ["pending", "converted", "cancelled"],
    "work": ["pending", "in_progress", "completed", "cancelled"],
}

SALE_ORDER_STATUS = "sale"
WORKING_ORDER_STATUS = "working"

# 工序状态（封闭集合）
STAGE_STATUSES = [
    {"value": "not_started", "label": "Not Started", "color": "gray"},
    {"value": "in_progress", "label": "In Progress", "color": "blue"},
    {"value": "completed", "label": "Completed", "color": "green"},
    {"value": "delayed", "label": "Delayed", "color": "red"},
    {"value": "on_hold", "label": "On Hold", "color": "yellow"},
]
STAGE_STATUS_VALUES = tuple(s["value"] for s in STAGE_STATUSES)
DEFAULT_STAGE_STATUS = STAGE_STATUS_VALUES[0]

# 工单创建时一次性生成的工序模板
WORK_ORDER_STAGES = [
    {"value": "pending", "label": "Pending"},
    {"value": "cutting", "label": "Cutting"},
    {"value": "finishing", "label": "Finishing"},
    {"value": "delivery", "label": "Delivery"},
    {"value": "installing", "label": "Installing"},
    {"value": "completed", "label": "Completed"},
]

DEFAULT_PROCESS_STAGE = "pending"

MATERIAL_TYPES = ["marble", "quartz", "granite"]

UNITS = ["count", "linear_meter_ML", "square_meter_M²", "cubic_meter_M³"]

# 工人费率倍数
EMPLOYEE_RATES = (0.5, 1.0, 1.5, 2.0)

# 员工初始数据，用于填充 employees 表
STATIC_EMPLOYEES = [
    {"name": "John Doe", "role": "Technician"},
    {"name": "Jane Smith", "role": "Technician"},
    {"name": "Mike Johnson", "role": "Supervisor"},
    {"name": "Sara Wilson", "role": "Designer"},
    {"name": "Ahmed Mohamed", "role": "Installer"},
    {"name": "Fatima Ali", "role": "Project Manager"},
    {"name": "Carlos Rodriguez", "role": "Fabricator"},
    {"name": "Maria Garcia", "role": "Quality Control"},
    {"name": "David Chen", "role": "Measurement Specialist"},
    {"name": "Omar Khaled", "role": "Installer"},
]

# 草稿键
SALE_ORDER_DRAFT = "sale_order"
WORK_ORDER_DRAFT = "work_order"
