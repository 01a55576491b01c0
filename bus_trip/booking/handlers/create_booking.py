from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_trip.booking.handlers.request_models import CreateBookingRequest
from bus_trip.booking.handlers.response_models import to_booking_data
from bus_trip.bootstrap import get_create_booking_service
from bus_trip.shared.domain.exception import (
    BookingAlreadyExistsException,
    DomainException,
)
from bus_trip.shared.utils import (
    api_response,
    error_response,
    get_logger,
    internal_error_response,
    parse_json_body,
)

logger = get_logger("booking")

service = get_create_booking_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler

    同じ運行日の予約が既にある場合は 409 と既存の予約を返す。
    """

    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate(parse_json_body(event))
        booking = service.create(request.date)
        logger.info(
            "Booking created",
            extra={"booking_id": str(booking.id), "date": str(booking.trip_date)},
        )
        return api_response(201, to_booking_data(booking))

    except BookingAlreadyExistsException as e:
        if e.existing is None:
            return error_response(e)
        return error_response(e, {"booking": to_booking_data(e.existing)})
    except (DomainException, ValidationError) as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to create booking")
        return internal_error_response()
