from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_trip.booking.handlers.response_models import to_upcoming_trip_data
from bus_trip.bootstrap import get_booking_query_service
from bus_trip.shared.utils import api_response, get_logger, internal_error_response

logger = get_logger("booking")

service = get_booking_query_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """今後の運行一覧取得 Lambda Handler（今日以降、日付の昇順）"""

    logger.info("Listing upcoming trips")

    try:
        trips = [to_upcoming_trip_data(trip) for trip in service.list_upcoming()]
        return api_response(200, {"trips": trips, "count": len(trips)})

    except Exception:
        logger.exception("Failed to list upcoming trips")
        return internal_error_response()
