from .get_employee import EmployeeQueryService as EmployeeQueryService
from .get_employee import parse_employee_id as parse_employee_id
from .register_employee import RegisterEmployeeService as RegisterEmployeeService
from .update_employee import EmployeeUpdate as EmployeeUpdate
from .update_employee import UpdateEmployeeService as UpdateEmployeeService
