from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_trip.booking.applications import SeatPatch
from bus_trip.booking.domain.value_object import (
    CommissionAttribution,
    EmployeeAttribution,
    ManualAttribution,
)
from bus_trip.booking.handlers.request_models import UpdateSeatRequest
from bus_trip.booking.handlers.response_models import to_seat_data
from bus_trip.bootstrap import get_update_seat_service
from bus_trip.employee.domain.value_object import EmployeeId
from bus_trip.shared.domain.exception import DomainException
from bus_trip.shared.utils import (
    api_response,
    error_response,
    get_logger,
    internal_error_response,
    parse_json_body,
)

logger = get_logger("booking")

service = get_update_seat_service()

_PATCH_FIELDS = frozenset(SeatPatch.__optional_keys__)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """座席更新 Lambda Handler（PATCH、送られた項目だけ更新する）"""

    path_params = event.path_parameters or {}
    date = path_params.get("date", "")
    seat_id = path_params.get("seat_id", "")

    logger.info(
        "Received update seat request", extra={"date": date, "seat_id": seat_id}
    )

    try:
        request = UpdateSeatRequest.model_validate(parse_json_body(event))
        seat = service.update_on_date(
            date, seat_id, _to_patch(request), _to_attribution(request)
        )
        return api_response(200, to_seat_data(seat))

    except (DomainException, ValidationError) as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to update seat")
        return internal_error_response()


def _to_patch(request: UpdateSeatRequest) -> SeatPatch:
    """送られた項目だけを SeatPatch に詰める"""
    fields = request.model_fields_set & _PATCH_FIELDS
    return request.model_dump(include=fields)


def _to_attribution(request: UpdateSeatRequest) -> CommissionAttribution | None:
    """employee_id / agent_name から手数料の帰属先を決める

    employee_id が指定されていれば従業員、そうでなく agent_name か
    employee_id: null が送られていれば手入力の担当者名として扱う。
    """
    if request.employee_id is not None:
        return EmployeeAttribution(employee_id=EmployeeId(value=request.employee_id))
    if {"agent_name", "employee_id"} & request.model_fields_set:
        return ManualAttribution(agent_name=request.agent_name)
    return None
