from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_trip.bootstrap import get_report_service
from bus_trip.reporting.handlers.response_models import to_stats_data
from bus_trip.shared.utils import api_response, get_logger, internal_error_response

logger = get_logger("reporting")

service = get_report_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """全体統計 Lambda Handler"""

    logger.info("Computing global stats")

    try:
        return api_response(200, to_stats_data(service.global_stats()))

    except Exception:
        logger.exception("Failed to compute global stats")
        return internal_error_response()
