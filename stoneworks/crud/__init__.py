from .assignment import (
    get_calendar_rows,
    get_assignments,
    get_assignment,
    create_assignment,
    update_assignment,
    delete_assignment,
)

from .customer import (
    get_customer,
    find_customer,
    list_customers,
    create_customer,
    update_customer,
    delete_customer,
)

from .order import (
    create_order,
    update_order,
    set_order_code,
    get_order,
    get_order_with_details,
    list_orders,
    list_working_orders,
    delete_order,
)

from .measurement import (
    list_measurements,
    get_measurement,
    replace_measurements,
    update_measurement,
)

from .work_order import (
    create_order_detail,
    get_order_detail,
    create_stages,
    get_stages,
    get_stage,
    update_stage,
    delete_order_detail,
)

from .employee import list_employees, ensure_employees

__all__ = [
    # Assignment functions
    "get_calendar_rows",
    "get_assignments",
    "get_assignment",
    "create_assignment",
    "update_assignment",
    "delete_assignment",

    # Customer functions
    "get_customer",
    "find_customer",
    "list_customers",
    "create_customer",
    "update_customer",
    "delete_customer",

    # Order functions
    "create_order",
    "update_order",
    "set_order_code",
    "get_order",
    "get_order_with_details",
    "list_orders",
    "list_working_orders",
    "delete_order",

    # Measurement functions
    "list_measurements",
    "get_measurement",
    "replace_measurements",
    "update_measurement",

    # Work order functions
    "create_order_detail",
    "get_order_detail",
    "create_stages",
    "get_stages",
    "get_stage",
    "update_stage",
    "delete_order_detail",

    # Employee functions
    "list_employees",
    "ensure_employees",
]
