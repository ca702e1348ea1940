"""排班筛选

沿 排班 -> 工序 -> 工单 -> 订单 的关系链解析每条排班，按订单、员工、工序状态做合取筛选。
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class AssignmentFilters:
    """日历筛选条件"""
    order_id: Optional[int] = None
    employee_names: List[str] = field(default_factory=list)
    statuses: List[str] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.order_id is not None or bool(self.employee_names) or bool(self.statuses)

    def reset(self) -> None:
        self.order_id = None
        self.employee_names = []
        self.statuses = []


def _is_list(value) -> bool:
    return isinstance(value, (list, tuple))


def resolve_stage(assignment, stages):
    """根据 order_stage_id 找到工序"""
    if assignment is None or assignment.order_stage_id is None:
        return None
    for stage in stages:
        if stage is not None and stage.id == assignment.order_stage_id:
            return stage
    return None


def resolve_order(stage, orders):
    """找到工序所属的订单

    优先匹配订单工单下挂着的工序，其次用工序的 order_detail_id 匹配工单ID。
    """
    if stage is None:
        return None
    for order in orders:
        if order is None:
            continue
        details = order.order_details or []
        if any(s.id == stage.id for detail in details for s in (detail.stages or [])):
            return order
        if stage.order_detail_id is not None and any(d.detail_id == stage.order_detail_id for d in details):
            return order
    return None


def filter_assignments(assignments, stages, orders, filters: AssignmentFilters):
    """返回满足全部已启用筛选条件的排班

    输入不是列表时返回空列表；没有启用任何筛选时原样返回全部排班。
    """
    if not _is_list(assignments) or not _is_list(stages) or not _is_list(orders):
        return []
    if filters is None or not filters.is_active:
        return list(assignments)

    result = []
    for assignment in assignments:
        if assignment is None:
            continue
        if filters.employee_names and assignment.employee_name not in filters.employee_names:
            continue

        needs_stage = filters.order_id is not None or bool(filters.statuses)
        if needs_stage:
            stage = resolve_stage(assignment, stages)
            if stage is None:
                continue
            if filters.statuses and stage.status not in filters.statuses:
                continue
            if filters.order_id is not None:
                order = resolve_order(stage, orders)
                if order is None or order.id != filters.order_id:
                    continue

        result.append(assignment)
    return result


def unique_statuses(stages) -> List[str]:
    """工序状态去重排序，用作状态筛选的选项"""
    if not _is_list(stages):
        return []
    return sorted({stage.status for stage in stages if stage is not None and stage.status})
