"""订单写入流程使用的数据访问对象

把 crud 函数绑定到同一个会话上，转换流程只依赖这里的方法，测试时可以替换成假实现。
"""

from sqlalchemy.orm import Session

from .. import crud, schemas


class ShopRepository:
    def __init__(self, db: Session):
        self.db = db

    def reset(self) -> None:
        """写入失败后回滚会话，保证后续清理语句可以执行"""
        self.db.rollback()

    # 客户
    def get_customer(self, customer_id: int):
        return crud.get_customer(self.db, customer_id)

    def find_customer(self, name: str, phone_number: str):
        return crud.find_customer(self.db, name, phone_number)

    def create_customer(self, customer: schemas.CustomerCreate):
        return crud.create_customer(self.db, customer)

    def update_customer(self, customer_id: int, changes: schemas.CustomerUpdate):
        return crud.update_customer(self.db, customer_id, changes)

    def delete_customer(self, customer_id: int):
        return crud.delete_customer(self.db, customer_id)

    # 订单
    def get_order(self, order_id: int):
        return crud.get_order(self.db, order_id)

    def create_order(self, **fields):
        return crud.create_order(self.db, **fields)

    def update_order(self, order_id: int, **fields):
        return crud.update_order(self.db, order_id, **fields)

    def set_order_code(self, order_id: int, code: str):
        return crud.set_order_code(self.db, order_id, code)

    def delete_order(self, order_id: int):
        return crud.delete_order(self.db, order_id)

    # 物料明细
    def replace_measurements(self, order_id: int, measurements):
        return crud.replace_measurements(self.db, order_id, measurements)

    # 工单
    def create_order_detail(self, order_id: int, **fields):
        return crud.create_order_detail(self.db, order_id, **fields)

    def create_stages(self, detail_id: int):
        return crud.create_stages(self.db, detail_id)

    def delete_order_detail(self, detail_id: int):
        return crud.delete_order_detail(self.db, detail_id)
