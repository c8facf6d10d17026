from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.domain import DomainException, TourId
from services.shared.utils import (
    domain_error_response,
    internal_error_response,
    path_parameter,
    success_response,
)
from services.tour.applications.get_tour import GetTourService
from services.tour.handlers.response_models import to_tour_data
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

repository = DynamoDBTourRepository()
service = GetTourService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ツアー詳細取得 Lambda Handler"""
    try:
        tour_id = TourId(value=path_parameter(event, "tourId"))
        logger.info("Fetching tour", extra={"tour_id": str(tour_id)})
        tour = service.get(tour_id)
        return success_response(200, data=to_tour_data(tour))
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to fetch tour")
        return internal_error_response("Server error fetching tour", e)
