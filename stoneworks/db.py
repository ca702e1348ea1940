"""
数据库模块入口

此模块作为数据库相关功能的统一入口，实际功能在database包中实现
"""

from .database.connection import Base, build_engine, build_session_factory, get_db

__all__ = ["Base", "build_engine", "build_session_factory", "get_db"]
