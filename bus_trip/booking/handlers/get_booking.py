from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_trip.booking.handlers.response_models import to_booking_data
from bus_trip.bootstrap import get_booking_query_service
from bus_trip.shared.domain.exception import DomainException
from bus_trip.shared.utils import (
    api_response,
    error_response,
    get_logger,
    internal_error_response,
)

logger = get_logger("booking")

service = get_booking_query_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """運行日指定の予約取得 Lambda Handler"""

    path_params = event.path_parameters or {}
    date = path_params.get("date", "")

    logger.info("Fetching booking", extra={"date": date})

    try:
        booking = service.get_by_date(date)
        return api_response(200, to_booking_data(booking))

    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch booking")
        return internal_error_response()
