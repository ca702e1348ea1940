"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
import os


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # 应用配置
    APP_TITLE: str = "石材加工排程系统"
    APP_DESCRIPTION: str = "客户、销售单、工单与周排程API"
    APP_VERSION: str = "1.0.0"

    # MySQL 配置 - 从环境变量加载
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = "yourrootpw"
    MYSQL_HOST: str = "127.0.0.1"
    MYSQL_PORT: str = "3306"
    MYSQL_DB: str = "stoneworks"

    # 数据库配置 - 优先使用DATABASE_URL，否则从MySQL配置构建
    DATABASE_URL: str = ""
    ECHO_SQL: bool = False  # 是否打印SQL日志
    AUTO_CREATE_TABLES: bool = False  # 启动时自动建表（开发用）

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_API_CALLS: bool = True  # 记录每次远程调用
    VERBOSE: bool = False  # 打印原始查询结果

    # 草稿存储目录（下单表单自动保存）
    DRAFTS_DIR: str = ".drafts"

    # 创建订单时默认的创建人
    DEFAULT_ORDER_CREATOR: str = "system"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # 如果没有显式设置DATABASE_URL，从MySQL配置构建
        if not self.DATABASE_URL:
            if os.path.exists("dev.db"):  # 检查开发数据库文件是否存在
                self.DATABASE_URL = "sqlite:///./dev.db"
            else:
                self.DATABASE_URL = f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"


@lru_cache
def get_settings() -> Settings:
    """返回缓存的全局配置（只在应用入口处调用）"""
    return Settings()
