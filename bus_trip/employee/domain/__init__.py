from .entity import Employee as Employee
from .entity import EmployeeChanges as EmployeeChanges
from .factory import EmployeeDetails as EmployeeDetails
from .factory import EmployeeFactory as EmployeeFactory
from .repository import EmployeeRepository as EmployeeRepository
from .value_object import EmployeeId as EmployeeId
from .value_object import EmployeeName as EmployeeName
