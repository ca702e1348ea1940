from logging.config import fileConfig
from sqlalchemy import engine_from_config, pool
from alembic import context
from stoneworks.config.settings import get_settings
from stoneworks.db import Base
# Import all models to ensure they are registered with SQLAlchemy
from stoneworks.models import (
    Customer, Order, Measurement, OrderDetail, OrderStage, OrderStageAssignment, Employee
)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
target_metadata = Base.metadata


def run_migrations_online():
    connectable = engine_from_config(
        {"sqlalchemy.url": get_settings().DATABASE_URL},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


run_migrations_online()
