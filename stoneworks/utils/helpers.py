"""工具函数模块

订单编号、电话校验、物料金额等通用计算
"""

import re

from ..constants import EMPLOYEE_RATES, WORK_TYPE_CODES
from ..exceptions import ValidationFailed

PHONE_PATTERN = re.compile(r"^01[0125][0-9]{8}$")


def generate_order_code(work_types, order_id) -> str:
    """生成订单编号

    格式：{排序后的工种代码}-{订单ID}，例如 kitchen + walls, 42 -> KW-42。
    未知工种取首字母大写。
    """
    codes = []
    for work_type in work_types or []:
        code = WORK_TYPE_CODES.get(work_type)
        if code is None:
            code = str(work_type)[:1].upper()
        codes.append(code)
    return f"{''.join(sorted(codes))}-{order_id}"


def validate_phone_number(phone) -> bool:
    """校验手机号：01 开头，第三位为 0/1/2/5，共 11 位"""
    if not phone:
        return False
    return bool(PHONE_PATTERN.match(str(phone).strip()))


def measurement_total(quantity, cost) -> float:
    """物料总价 = 数量 * 单价"""
    return float(quantity or 0) * float(cost or 0)


def apply_measurement_edit(measurement: dict, field: str, value) -> dict:
    """修改物料明细的某个字段，返回新的字典

    修改数量或单价时同步重新计算 total_cost；total_cost 不允许直接修改。
    """
    if field == "total_cost":
        raise ValidationFailed("total_cost is derived from quantity and cost")
    updated = dict(measurement)
    updated[field] = value
    if field in ("quantity", "cost"):
        updated["total_cost"] = measurement_total(updated.get("quantity"), updated.get("cost"))
    return updated


def validate_measurements(measurements) -> None:
    """校验物料明细：至少一条，数量大于0，单价不为负，至少一条带单位"""
    if not measurements:
        raise ValidationFailed("at least one measurement is required")
    for index, item in enumerate(measurements, start=1):
        if item.quantity is None or item.quantity <= 0:
            raise ValidationFailed(f"measurement {index}: quantity must be greater than 0")
        if item.cost is None or item.cost < 0:
            raise ValidationFailed(f"measurement {index}: cost must not be negative")
    if not any(item.unit for item in measurements):
        raise ValidationFailed("at least one measurement must have a unit")


def validate_assignment_fields(employee_name, work_date, order_stage_id, employee_rate=None) -> None:
    """校验新建排班的必填项"""
    if not employee_name or not str(employee_name).strip():
        raise ValidationFailed("employee_name is required")
    if work_date is None:
        raise ValidationFailed("work_date is required")
    if order_stage_id is None:
        raise ValidationFailed("order_stage_id is required")
    if employee_rate is not None and employee_rate not in EMPLOYEE_RATES:
        raise ValidationFailed(f"employee_rate must be one of {EMPLOYEE_RATES}")


def order_totals(price, measurements) -> dict:
    """汇总物料成本并计算利润和利润率（%）"""
    total_cost = sum(measurement_total(m.quantity, m.cost) for m in measurements or [])
    price = float(price or 0)
    profit = price - total_cost
    profit_margin = (profit / price * 100) if price > 0 else 0.0
    return {"total_cost": total_cost, "profit": profit, "profit_margin": profit_margin}


def validate_assignment_update(changes) -> None:
    """校验排班修改：只检查显式给出的字段，必填项不能被清空，费率必须在可选范围内"""
    fields = changes.model_fields_set
    if "employee_name" in fields and (changes.employee_name is None or not changes.employee_name.strip()):
        raise ValidationFailed("employee_name is required")
    if "work_date" in fields and changes.work_date is None:
        raise ValidationFailed("work_date is required")
    if "order_stage_id" in fields and changes.order_stage_id is None:
        raise ValidationFailed("order_stage_id is required")
    if "is_done" in fields and changes.is_done is None:
        raise ValidationFailed("is_done must be true or false")
    if "employee_rate" in fields and changes.employee_rate is not None and changes.employee_rate not in EMPLOYEE_RATES:
        raise ValidationFailed(f"employee_rate must be one of {EMPLOYEE_RATES}")


def validate_measurement_update(changes) -> None:
    """校验物料明细修改：数量、单价显式给出时不能为空，数量大于0，单价不为负"""
    fields = changes.model_fields_set
    if "quantity" in fields and (changes.quantity is None or changes.quantity <= 0):
        raise ValidationFailed("quantity must be greater than 0")
    if "cost" in fields and (changes.cost is None or changes.cost < 0):
        raise ValidationFailed("cost must not be negative")
