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
from services.tour.applications.get_tour_ratings import GetTourRatingsService
from services.tour.handlers.response_models import to_rating_with_user_data
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = GetTourRatingsService(
    tour_repository=DynamoDBTourRepository(),
    user_repository=DynamoDBUserRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ツアー評価一覧 Lambda Handler"""
    try:
        tour_id = TourId(value=path_parameter(event, "tourId"))
        logger.info("Fetching tour ratings", extra={"tour_id": str(tour_id)})
        result = service.get(tour_id)
        return success_response(
            200,
            data={
                "ratings": [to_rating_with_user_data(r) for r in result.ratings],
                "averageRating": result.summary.average,
                "totalRatings": result.summary.count,
            },
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to fetch tour ratings")
        return internal_error_response("Error getting tour ratings", e)
