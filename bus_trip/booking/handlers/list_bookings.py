from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_trip.booking.handlers.response_models import to_booking_data
from bus_trip.bootstrap import get_booking_query_service
from bus_trip.shared.utils import api_response, get_logger, internal_error_response

logger = get_logger("booking")

service = get_booking_query_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler"""

    logger.info("Listing all bookings")

    try:
        bookings = [to_booking_data(booking) for booking in service.list_bookings()]
        return api_response(200, {"bookings": bookings, "count": len(bookings)})

    except Exception:
        logger.exception("Failed to list bookings")
        return internal_error_response()
