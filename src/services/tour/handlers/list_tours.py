from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.utils import internal_error_response, success_response
from services.tour.applications.list_tours import ListToursService
from services.tour.handlers.response_models import to_tour_data
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

repository = DynamoDBTourRepository()
service = ListToursService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """公開中ツアー一覧 Lambda Handler"""
    logger.info("Listing active tours")

    try:
        tours = service.list_active()
        return success_response(
            200, count=len(tours), data=[to_tour_data(tour) for tour in tours]
        )
    except Exception as e:
        logger.exception("Failed to list tours")
        return internal_error_response("Server error fetching tours", e)
