from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from bus_trip.bootstrap import get_report_service
from bus_trip.reporting.handlers.request_models import MonthlyProfitQuery
from bus_trip.reporting.handlers.response_models import to_monthly_profit_data
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
    """月次利益レポート Lambda Handler（?year=YYYY&month=M）"""

    query = event.query_string_parameters or {}

    logger.info("Computing monthly profit", extra={"query": query})

    try:
        params = MonthlyProfitQuery.model_validate(query)
        report = service.monthly_profit(month=params.month, year=params.year)
        return api_response(200, to_monthly_profit_data(report))

    except (DomainException, ValidationError) as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to compute monthly profit")
        return internal_error_response()
