"""应用模块入口

提供统一的模块导入接口
"""

from . import (
    config,
    constants,
    crud,
    db,
    models,
    schemas,
    core,
)

from .db import get_db, Base
from .exceptions import ValidationFailed, NotFound

__all__ = [
    "config",
    "constants",
    "crud",
    "db",
    "models",
    "schemas",
    "core",
    "get_db",
    "Base",
    "ValidationFailed",
    "NotFound",
]
