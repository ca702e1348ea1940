"""日历数据结构定义

CalendarRow 描述 排班 -> 工序 -> 工单 -> 订单 的嵌套查询结果，
每一层都可能缺失；CalendarData 是归一化之后的三个扁平集合。
"""

from pydantic import AliasChoices, BaseModel, Field
from datetime import date
from typing import List, Optional

from .assignment import AssignmentRead
from .order import OrderRead, OrderWithDetails
from .work_order import OrderDetailRead, StageRead


class CalendarDetailRow(OrderDetailRead):
    orders: Optional[OrderRead] = Field(default=None, validation_alias=AliasChoices("orders", "order"))


class CalendarStageRow(StageRead):
    order_details: Optional[CalendarDetailRow] = Field(
        default=None, validation_alias=AliasChoices("order_details", "order_detail")
    )


class CalendarRow(AssignmentRead):
    """一条嵌套的排班记录"""
    order_stages: Optional[CalendarStageRow] = Field(
        default=None, validation_alias=AliasChoices("order_stages", "stage")
    )


class CalendarData(BaseModel):
    """归一化后的日历数据"""
    assignments: List[AssignmentRead] = []
    stages: List[StageRead] = []
    orders: List[OrderWithDetails] = []


class CalendarView(CalendarData):
    """日历接口返回的数据，assignments 已按筛选条件过滤"""
    week_start: date
    week_end: date
    week_range_text: str = ""
    status_options: List[str] = []
