from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_trip.bootstrap import get_employee_query_service
from bus_trip.employee.handlers.response_models import to_employee_data
from bus_trip.shared.domain.exception import DomainException
from bus_trip.shared.utils import (
    api_response,
    error_response,
    get_logger,
    internal_error_response,
)

logger = get_logger("employee")

service = get_employee_query_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """従業員取得 Lambda Handler"""

    path_params = event.path_parameters or {}
    employee_id = path_params.get("id", "")

    logger.info("Fetching employee", extra={"employee_id": employee_id})

    try:
        employee = service.get_employee(employee_id)
        return api_response(200, to_employee_data(employee))

    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch employee")
        return internal_error_response()
