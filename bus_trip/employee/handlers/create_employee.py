from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_trip.bootstrap import get_register_employee_service
from bus_trip.employee.domain.factory import EmployeeDetails
from bus_trip.employee.handlers.request_models import CreateEmployeeRequest
from bus_trip.employee.handlers.response_models import to_employee_data
from bus_trip.shared.domain.exception import DomainException
from bus_trip.shared.utils import (
    api_response,
    error_response,
    get_logger,
    internal_error_response,
    parse_json_body,
)

logger = get_logger("employee")

service = get_register_employee_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """従業員登録 Lambda Handler"""

    logger.info("Received create employee request")

    try:
        request = CreateEmployeeRequest.model_validate(parse_json_body(event))
        employee = service.register(_to_employee_details(request))
        logger.info("Employee registered", extra={"employee_id": str(employee.id)})
        return api_response(201, to_employee_data(employee))

    except (DomainException, ValidationError) as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to register employee")
        return internal_error_response()


def _to_employee_details(request: CreateEmployeeRequest) -> EmployeeDetails:
    """リクエストボディから EmployeeDetails を構築する"""

    return {
        "name": request.name,
        "email": request.email,
        "phone": request.phone,
        "role": request.role,
        "commission_percent": request.commission_percent,
        "active": request.active,
    }
