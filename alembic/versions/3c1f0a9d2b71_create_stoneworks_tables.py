"""create customers, orders, measurements, work order and scheduling tables

Revision ID: 3c1f0a9d2b71
Revises:
Create Date: 2026-10-19 09:12:40.118203

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3c1f0a9d2b71'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # 客户表
    op.create_table('customers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('company', sa.String(length=255), nullable=True),
        sa.Column('phone_number', sa.String(length=32), nullable=True),
        sa.Column('address', sa.String(length=512), nullable=True),
        sa.Column('paid_total', sa.Float(), nullable=False),
        sa.Column('to_be_paid', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_customers_id'), 'customers', ['id'], unique=False)
    op.create_index(op.f('ix_customers_phone_number'), 'customers', ['phone_number'], unique=False)

    # 订单表
    op.create_table('orders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=64), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=True),
        sa.Column('customer_name', sa.String(length=255), nullable=True),
        sa.Column('company', sa.String(length=255), nullable=True),
        sa.Column('address', sa.String(length=512), nullable=True),
        sa.Column('order_status', sa.String(length=32), nullable=False),
        sa.Column('order_price', sa.Float(), nullable=False),
        sa.Column('work_types', sa.JSON(), nullable=False),
        sa.Column('sales_person', sa.String(length=255), nullable=True),
        sa.Column('discount', sa.Float(), nullable=True),
        sa.Column('created_by', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_orders_id'), 'orders', ['id'], unique=False)
    op.create_index(op.f('ix_orders_customer_id'), 'orders', ['customer_id'], unique=False)
    op.create_index(op.f('ix_orders_order_status'), 'orders', ['order_status'], unique=False)

    # 物料明细表
    op.create_table('measurements',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('material_name', sa.String(length=255), nullable=True),
        sa.Column('material_type', sa.String(length=64), nullable=True),
        sa.Column('unit', sa.String(length=64), nullable=True),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('cost', sa.Float(), nullable=False),
        sa.Column('total_cost', sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_measurements_id'), 'measurements', ['id'], unique=False)
    op.create_index(op.f('ix_measurements_order_id'), 'measurements', ['order_id'], unique=False)

    # 工单表
    op.create_table('order_details',
        sa.Column('detail_id', sa.Integer(), nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('assigned_to', sa.String(length=255), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('total_cost', sa.Float(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('img_url', sa.String(length=1024), nullable=True),
        sa.Column('process_stage', sa.String(length=64), nullable=True),
        sa.Column('updated_date', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id'], ),
        sa.PrimaryKeyConstraint('detail_id')
    )
    op.create_index(op.f('ix_order_details_detail_id'), 'order_details', ['detail_id'], unique=False)
    op.create_index(op.f('ix_order_details_order_id'), 'order_details', ['order_id'], unique=False)

    # 工序表
    op.create_table('order_stages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('order_detail_id', sa.Integer(), nullable=True),
        sa.Column('stage_name', sa.String(length=64), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('planned_start_date', sa.Date(), nullable=True),
        sa.Column('planned_finish_date', sa.Date(), nullable=True),
        sa.Column('actual_start_date', sa.Date(), nullable=True),
        sa.Column('actual_finish_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['order_detail_id'], ['order_details.detail_id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_order_stages_id'), 'order_stages', ['id'], unique=False)
    op.create_index(op.f('ix_order_stages_order_detail_id'), 'order_stages', ['order_detail_id'], unique=False)

    # 排班表
    op.create_table('order_stage_assignments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('order_stage_id', sa.Integer(), nullable=True),
        sa.Column('employee_name', sa.String(length=255), nullable=False),
        sa.Column('work_date', sa.Date(), nullable=False),
        sa.Column('is_done', sa.Boolean(), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('employee_rate', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.ForeignKeyConstraint(['order_stage_id'], ['order_stages.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_order_stage_assignments_id'), 'order_stage_assignments', ['id'], unique=False)
    op.create_index(op.f('ix_order_stage_assignments_order_stage_id'), 'order_stage_assignments', ['order_stage_id'], unique=False)
    op.create_index(op.f('ix_order_stage_assignments_work_date'), 'order_stage_assignments', ['work_date'], unique=False)

    # 员工表
    op.create_table('employees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index(op.f('ix_employees_id'), 'employees', ['id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_employees_id'), table_name='employees')
    op.drop_table('employees')
    op.drop_index(op.f('ix_order_stage_assignments_work_date'), table_name='order_stage_assignments')
    op.drop_index(op.f('ix_order_stage_assignments_order_stage_id'), table_name='order_stage_assignments')
    op.drop_index(op.f('ix_order_stage_assignments_id'), table_name='order_stage_assignments')
    op.drop_table('order_stage_assignments')
    op.drop_index(op.f('ix_order_stages_order_detail_id'), table_name='order_stages')
    op.drop_index(op.f('ix_order_stages_id'), table_name='order_stages')
    op.drop_table('order_stages')
    op.drop_index(op.f('ix_order_details_order_id'), table_name='order_details')
    op.drop_index(op.f('ix_order_details_detail_id'), table_name='order_details')
    op.drop_table('order_details')
    op.drop_index(op.f('ix_measurements_order_id'), table_name='measurements')
    op.drop_index(op.f('ix_measurements_id'), table_name='measurements')
    op.drop_table('measurements')
    op.drop_index(op.f('ix_orders_order_status'), table_name='orders')
    op.drop_index(op.f('ix_orders_customer_id'), table_name='orders')
    op.drop_index(op.f('ix_orders_id'), table_name='orders')
    op.drop_table('orders')
    op.drop_index(op.f('ix_customers_phone_number'), table_name='customers')
    op.drop_index(op.f('ix_customers_id'), table_name='customers')
    op.drop_table('customers')
