"""数据库连接模块

统一管理数据库引擎、会话工厂和模型基类的创建。
引擎和会话工厂由应用入口显式创建并挂到 app.state 上，不在模块级别创建。
"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# 创建模型基类
Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """根据URL创建数据库引擎"""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # 内存库需要共用同一个连接，否则每个会话看到的是不同的空库
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(database_url, pool_pre_ping=True, echo=echo)


def build_session_factory(engine: Engine) -> sessionmaker:
    """创建会话工厂"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """获取数据库会话的依赖函数"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
