from .employee_id import EmployeeId as EmployeeId
from .employee_name import EmployeeName as EmployeeName
