"""日历数据归一化

把 排班 -> 工序 -> 工单 -> 订单 的嵌套查询结果拆成三个扁平集合：
- assignments: 每行一条，去掉嵌套字段，保持输入顺序
- stages: 按工序ID去重，先出现的为准
- orders: 按订单ID去重，只保留第一次遇到的工单；经同一工单到达的工序挂在该工单下

嵌套链任何一层缺失都不会报错，排班本身始终保留。
"""

from typing import Dict, Iterable, List

from ..schemas import (
    AssignmentRead,
    CalendarData,
    CalendarRow,
    OrderDetailWithStages,
    OrderWithDetails,
    StageRead,
)

_ASSIGNMENT_FIELDS = set(AssignmentRead.model_fields)
_STAGE_FIELDS = set(StageRead.model_fields)


def _strip(row, fields) -> dict:
    return {name: getattr(row, name) for name in fields}


def normalize_calendar_data(rows: Iterable[CalendarRow]) -> CalendarData:
    """归一化日历数据，结果只取决于输入顺序"""
    assignments: List[AssignmentRead] = []
    stages: Dict[int, StageRead] = {}
    orders: Dict[int, OrderWithDetails] = {}

    for row in rows or []:
        assignments.append(AssignmentRead(**_strip(row, _ASSIGNMENT_FIELDS)))

        stage_row = row.order_stages
        if stage_row is None:
            continue
        stage = stages.get(stage_row.id)
        if stage is None:
            stage = StageRead(**_strip(stage_row, _STAGE_FIELDS))
            stages[stage.id] = stage

        detail_row = stage_row.order_details
        if detail_row is None or detail_row.orders is None:
            continue
        order_row = detail_row.orders

        order = orders.get(order_row.id)
        if order is None:
            detail = OrderDetailWithStages(
                **detail_row.model_dump(exclude={"orders"}),
                stages=[stage],
            )
            orders[order_row.id] = OrderWithDetails(**order_row.model_dump(), order_details=[detail])
            continue

        first_detail = order.order_details[0]
        if first_detail.detail_id == detail_row.detail_id and all(s.id != stage.id for s in first_detail.stages):
            first_detail.stages.append(stage)

    return CalendarData(
        assignments=assignments,
        stages=list(stages.values()),
        orders=list(orders.values()),
    )
