from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.domain import DomainException
from services.shared.utils import (
    domain_error_response,
    internal_error_response,
    path_parameter,
    success_response,
)
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
    """カテゴリ別ツアー一覧 Lambda Handler"""
    category = path_parameter(event, "category") or ""
    logger.info("Listing tours by category", extra={"category": category})

    try:
        tours = service.list_by_category(category)
        return success_response(
            200, count=len(tours), data=[to_tour_data(tour) for tour in tours]
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to list tours by category")
        return internal_error_response("Server error fetching tours by category", e)
