from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from bus_trip.bootstrap import get_report_service
from bus_trip.reporting.handlers.response_models import to_summary_data
from bus_trip.shared.domain.exception import DomainException
from bus_trip.shared.utils import (
    api_response,
    error_response,
    get_logger,
    internal_error_response,
)

logger = get_logger("reporting")

service = get_report_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """運行日集計 Lambda Handler（予約がない日も空の集計を返す）"""

    path_params = event.path_parameters or {}
    date = path_params.get("date", "")

    logger.info("Summarizing booking", extra={"date": date})

    try:
        return api_response(200, to_summary_data(service.summarize(date)))

    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to summarize booking")
        return internal_error_response()
