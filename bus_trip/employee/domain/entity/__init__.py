from .employee import DEFAULT_ROLE as DEFAULT_ROLE
from .employee import Employee as Employee
from .employee import EmployeeChanges as EmployeeChanges
