"""销售单转工单 / 新建销售单

转换流程依次写入：客户（查找或新建）-> 订单（新建或更新）-> 物料明细（整体替换）
-> 工单 -> 工序。所有校验在第一次写入前完成；中途失败时按相反顺序删除本次新建的
工单、订单、客户，清理失败只记录日志，最后抛出原始异常。
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from .. import schemas
from ..constants import (
    DEFAULT_PROCESS_STAGE,
    SALE_ORDER_DRAFT,
    SALE_ORDER_STATUS,
    WORK_ORDER_DRAFT,
    WORKING_ORDER_STATUS,
)
from ..exceptions import NotFound, ValidationFailed
from ..utils.helpers import generate_order_code, order_totals, validate_measurements, validate_phone_number

logger = logging.getLogger(__name__)


@dataclass
class CreatedRows:
    """本次流程新建的记录ID，用于失败后的清理"""
    customer_id: Optional[int] = None
    order_id: Optional[int] = None
    detail_id: Optional[int] = None
    # 转换前已存在、被本次流程修改过的订单，失败后不会回滚
    modified_order_id: Optional[int] = None


@dataclass
class WorkOrderCreated:
    order: Any
    detail: Any
    stages: List[Any] = field(default_factory=list)
    customer_id: Optional[int] = None
    total_cost: float = 0
    profit: float = 0
    profit_margin: float = 0


def _validate_new_customer(customer: Optional[schemas.CustomerCreate]) -> None:
    if customer is None or not customer.name or not customer.name.strip():
        raise ValidationFailed("customer name is required")
    if not customer.phone_number:
        raise ValidationFailed("phone number is required for new customers")
    if not validate_phone_number(customer.phone_number):
        raise ValidationFailed("invalid phone number (e.g. 01012345678)")


def _upsert_customer(repo, customer: schemas.CustomerCreate, created: CreatedRows):
    """按姓名 + 电话查找客户，地址或公司变化时更新；找不到则新建"""
    existing = repo.find_customer(customer.name, customer.phone_number)
    if existing is None:
        new_customer = repo.create_customer(customer)
        created.customer_id = new_customer.id
        logger.info("[WorkOrderConversion] created customer %s", new_customer.id)
        return new_customer

    changes = {}
    if customer.address and customer.address != existing.address:
        changes["address"] = customer.address
    if customer.company and customer.company != existing.company:
        changes["company"] = customer.company
    if changes:
        existing = repo.update_customer(existing.id, schemas.CustomerUpdate(**changes)) or existing
    return existing


def _compensate(repo, created: CreatedRows, tag: str) -> None:
    """按 工单 -> 订单 -> 客户 的顺序删除本次新建的记录；每一步失败都不影响后续步骤"""
    try:
        repo.reset()
    except Exception:
        logger.exception("[%s] session reset failed", tag)

    steps = [
        ("work order", created.detail_id, repo.delete_order_detail),
        ("order", created.order_id, repo.delete_order),
        ("customer", created.customer_id, repo.delete_customer),
    ]
    for label, key, delete in steps:
        if key is None:
            continue
        logger.info("[%s] cleaning up %s %s", tag, label, key)
        try:
            delete(key)
        except Exception:
            logger.exception("[%s] error during cleanup of %s %s", tag, label, key)
            try:
                repo.reset()
            except Exception:
                logger.exception("[%s] session reset failed", tag)


def validate_conversion(repo, request: schemas.WorkOrderConversionCreate):
    """写入前的全部校验；返回已有订单和已有客户（没有则为 None）"""
    if not request.work_order.assigned_to or not request.work_order.assigned_to.strip():
        raise ValidationFailed("assigned engineer is required")
    if not request.work_types:
        raise ValidationFailed("at least one work type is required")
    validate_measurements(request.measurements)

    order = None
    customer = None
    if request.order_id is not None:
        order = repo.get_order(request.order_id)
        if order is None:
            raise NotFound("order", request.order_id)
    elif request.customer_id is not None:
        customer = repo.get_customer(request.customer_id)
        if customer is None:
            raise NotFound("customer", request.customer_id)
    else:
        _validate_new_customer(request.customer)
    return order, customer


def convert_to_work_order(repo, request: schemas.WorkOrderConversionCreate, drafts=None,
                          created_by: str = "system") -> WorkOrderCreated:
    """把销售单转换为工单（或直接新建工单）"""
    order, customer = validate_conversion(repo, request)
    info = request.work_order
    totals = order_totals(info.price, request.measurements)
    created = CreatedRows()

    try:
        if order is None and customer is None:
            customer = _upsert_customer(repo, request.customer, created)

        order_fields = {
            "work_types": list(request.work_types),
            "order_price": info.price,
            "order_status": WORKING_ORDER_STATUS,
        }
        if request.customer is not None:
            order_fields.update(
                customer_name=request.customer.name,
                company=request.customer.company,
                address=request.customer.address,
            )
        elif customer is not None:
            order_fields.update(
                customer_name=customer.name,
                company=customer.company,
                address=customer.address,
            )
        if request.sales_person is not None:
            order_fields["sales_person"] = request.sales_person
        if request.discount is not None:
            order_fields["discount"] = request.discount

        if order is None:
            order = repo.create_order(
                code="TEMP",
                customer_id=customer.id,
                created_by=request.created_by or created_by,
                **order_fields,
            )
            created.order_id = order.id
            logger.info("[WorkOrderConversion] created order %s", order.id)
        else:
            created.modified_order_id = order.id
            order = repo.update_order(order.id, **order_fields)
            logger.info("[WorkOrderConversion] updated order %s", order.id)
        order = repo.set_order_code(order.id, generate_order_code(request.work_types, order.id))

        repo.replace_measurements(order.id, request.measurements)

        detail = repo.create_order_detail(
            order.id,
            assigned_to=info.assigned_to,
            due_date=info.due_date,
            price=info.price,
            total_cost=totals["total_cost"],
            notes=info.notes,
            img_url=info.img_url or "",
            process_stage=DEFAULT_PROCESS_STAGE,
            updated_date=datetime.now(),
        )
        created.detail_id = detail.detail_id
        logger.info("[WorkOrderConversion] created work order %s", detail.detail_id)

        stages = repo.create_stages(detail.detail_id)
    except Exception as exc:
        logger.error("[WorkOrderConversion] failed: %s", exc)
        if created.modified_order_id is not None:
            logger.error(
                "[WorkOrderConversion] order %s was modified before the failure and needs manual repair",
                created.modified_order_id,
            )
        _compensate(repo, created, "WorkOrderConversion")
        raise

    if drafts is not None:
        drafts.clear(WORK_ORDER_DRAFT)

    return WorkOrderCreated(
        order=order,
        detail=detail,
        stages=list(stages),
        customer_id=order.customer_id,
        **totals,
    )


def create_sale_order(repo, payload: schemas.SaleOrderCreate, drafts=None, created_by: str = "system"):
    """新建销售单：查找或新建客户，写入占位编号的订单后回写正式编号，再写入物料明细"""
    _validate_new_customer(payload.customer)
    validate_measurements(payload.measurements)

    created = CreatedRows()
    try:
        customer = _upsert_customer(repo, payload.customer, created)
        order = repo.create_order(
            code="TEMP",
            customer_id=customer.id,
            customer_name=customer.name,
            company=payload.customer.company,
            address=payload.customer.address,
            order_status=SALE_ORDER_STATUS,
            order_price=payload.order_price,
            work_types=list(payload.work_types),
            sales_person=payload.sales_person,
            discount=payload.discount,
            created_by=payload.created_by or created_by,
        )
        created.order_id = order.id
        order = repo.set_order_code(order.id, generate_order_code(payload.work_types, order.id))
        repo.replace_measurements(order.id, payload.measurements)
    except Exception as exc:
        logger.error("[SaleOrder] failed: %s", exc)
        _compensate(repo, created, "SaleOrder")
        raise

    if drafts is not None:
        drafts.clear(SALE_ORDER_DRAFT)
    return order
