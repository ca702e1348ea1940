"""日志配置"""

import logging

from .settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """按配置的级别初始化根日志器；重复调用不会重复添加handler"""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)
    # SQL 日志交给 ECHO_SQL 控制
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.ECHO_SQL else logging.WARNING)
