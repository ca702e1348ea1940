"""FastAPI主应用入口

create_app 显式创建数据库引擎、会话工厂和草稿存储并挂到 app.state 上，
路由通过依赖从 app.state 取用。启动方式：

    uvicorn stoneworks.main:create_app --factory
"""

import logging

from fastapi import Depends, FastAPI, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from .api.v1 import (
    calendar_router,
    assignments_router,
    orders_router,
    work_orders_router,
    customers_router,
    measurements_router,
    employees_router,
    drafts_router,
)
from .config.logging_setup import configure_logging
from .config.settings import Settings, get_settings
from .core.drafts import JsonFileDraftRepository
from .database.connection import Base, build_engine, build_session_factory, get_db
from . import crud, models  # noqa: F401  注册所有模型

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None, session_factory=None, drafts=None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    if session_factory is None:
        engine = build_engine(settings.DATABASE_URL, echo=settings.ECHO_SQL)
        session_factory = build_session_factory(engine)
        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
            db = session_factory()
            try:
                crud.ensure_employees(db)
            finally:
                db.close()

    app = FastAPI(title=settings.APP_TITLE, description=settings.APP_DESCRIPTION, version=settings.APP_VERSION)
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.drafts = drafts if drafts is not None else JsonFileDraftRepository(settings.DRAFTS_DIR)

    # 挂载API路由
    app.include_router(calendar_router, prefix="/api/v1")
    app.include_router(assignments_router, prefix="/api/v1")
    app.include_router(orders_router, prefix="/api/v1")
    app.include_router(work_orders_router, prefix="/api/v1")
    app.include_router(customers_router, prefix="/api/v1")
    app.include_router(measurements_router, prefix="/api/v1")
    app.include_router(employees_router, prefix="/api/v1")
    app.include_router(drafts_router, prefix="/api/v1")

    @app.get("/health/db")
    def health_db(db: Session = Depends(get_db)):
        """数据库连接检查"""
        try:
            db.execute(text("SELECT 1"))
        except Exception as exc:
            logger.error("[Health] database check failed: %s", exc)
            raise HTTPException(status_code=503, detail="database unavailable")
        return {"status": "ok"}

    @app.get("/")
    def root():
        return {"name": settings.APP_TITLE, "version": settings.APP_VERSION, "docs": "/docs"}

    logger.info("[App] %s %s started", settings.APP_TITLE, settings.APP_VERSION)
    return app
