from .dynamodb_employee_repository import (
    DynamoDBEmployeeRepository as DynamoDBEmployeeRepository,
)
from .in_memory_employee_repository import (
    InMemoryEmployeeRepository as InMemoryEmployeeRepository,
)
