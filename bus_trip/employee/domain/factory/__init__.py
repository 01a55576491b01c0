from .employee_factory import EmployeeDetails as EmployeeDetails
from .employee_factory import EmployeeFactory as EmployeeFactory
