"""日历数据的远程访问层

SchedulingBackend 在线程池中执行同步的 SQLAlchemy 操作，每次调用使用一个独立的短会话，
并在会话关闭前把 ORM 对象转换成 Pydantic 模型。
"""

import logging
from datetime import date
from typing import List

from starlette.concurrency import run_in_threadpool

from .. import crud, schemas
from ..exceptions import NotFound

logger = logging.getLogger(__name__)


class SchedulingBackend:
    def __init__(self, session_factory, log_api_calls: bool = False, verbose: bool = False):
        self.session_factory = session_factory
        self.log_api_calls = log_api_calls
        self.verbose = verbose

    def _call(self, name: str, fn, *args):
        if self.log_api_calls:
            logger.debug("[SchedulingBackend] %s %s", name, args)
        db = self.session_factory()
        try:
            return fn(db, *args)
        except NotFound as exc:
            logger.warning("[SchedulingBackend] %s: %s", name, exc)
            raise
        except Exception:
            logger.exception("[SchedulingBackend] %s failed", name)
            raise
        finally:
            db.close()

    async def _run(self, name: str, fn, *args):
        return await run_in_threadpool(self._call, name, fn, *args)

    async def fetch_calendar_rows(self, week_start: date, week_end: date) -> List[schemas.CalendarRow]:
        def query(db, start, end):
            rows = crud.get_calendar_rows(db, start, end)
            return [schemas.CalendarRow.model_validate(row) for row in rows]

        rows = await self._run("fetch_calendar_rows", query, week_start, week_end)
        if self.verbose:
            logger.debug("[SchedulingBackend] raw calendar rows: %s", [row.model_dump() for row in rows])
        return rows

    async def fetch_assignments(self, week_start: date, week_end: date) -> List[schemas.AssignmentRead]:
        def query(db, start, end):
            return [schemas.AssignmentRead.model_validate(row) for row in crud.get_assignments(db, start, end)]

        return await self._run("fetch_assignments", query, week_start, week_end)

    async def insert_assignment(self, payload: schemas.AssignmentCreate) -> schemas.AssignmentRead:
        def insert(db, data):
            return schemas.AssignmentRead.model_validate(crud.create_assignment(db, data))

        return await self._run("insert_assignment", insert, payload)

    async def update_assignment(self, assignment_id: int, changes: schemas.AssignmentUpdate) -> schemas.AssignmentRead:
        """只写入 changes 中显式设置的字段；没有任何字段时返回当前记录"""
        def update(db, key, data):
            if data.model_fields_set:
                row = crud.update_assignment(db, key, data)
            else:
                row = crud.get_assignment(db, key)
            if row is None:
                raise NotFound("assignment", key)
            return schemas.AssignmentRead.model_validate(row)

        return await self._run("update_assignment", update, assignment_id, changes)

    async def delete_assignment(self, assignment_id: int) -> None:
        def delete(db, key):
            if crud.delete_assignment(db, key) is None:
                raise NotFound("assignment", key)

        await self._run("delete_assignment", delete, assignment_id)
