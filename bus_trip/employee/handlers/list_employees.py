from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_trip.bootstrap import get_employee_query_service
from bus_trip.employee.handlers.response_models import to_employee_data
from bus_trip.shared.utils import api_response, get_logger, internal_error_response

logger = get_logger("employee")

service = get_employee_query_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """従業員一覧取得 Lambda Handler"""

    logger.info("Listing all employees")

    try:
        employees = [to_employee_data(e) for e in service.list_employees()]
        return api_response(200, {"employees": employees, "count": len(employees)})

    except Exception:
        logger.exception("Failed to list employees")
        return internal_error_response()
