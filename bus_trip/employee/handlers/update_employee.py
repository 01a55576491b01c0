from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_trip.bootstrap import get_update_employee_service
from bus_trip.employee.applications import EmployeeUpdate, parse_employee_id
from bus_trip.employee.handlers.request_models import UpdateEmployeeRequest
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

service = get_update_employee_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """従業員更新 Lambda Handler（PATCH、送られた項目だけ更新する）"""

    path_params = event.path_parameters or {}
    raw_id = path_params.get("id", "")

    logger.info("Received update employee request", extra={"employee_id": raw_id})

    try:
        employee_id = parse_employee_id(raw_id)
        request = UpdateEmployeeRequest.model_validate(parse_json_body(event))
        update: EmployeeUpdate = request.model_dump(include=request.model_fields_set)
        employee = service.update(employee_id, update)
        return api_response(200, to_employee_data(employee))

    except (DomainException, ValidationError) as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to update employee")
        return internal_error_response()
