from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.domain import DomainException, TourId, UserId
from services.shared.utils import (
    domain_error_response,
    internal_error_response,
    path_parameter,
    success_response,
)
from services.tour.applications.get_user_rating import GetUserRatingService
from services.tour.handlers.response_models import to_rating_data
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

repository = DynamoDBTourRepository()
service = GetUserRatingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザーのツアー評価取得 Lambda Handler（未評価なら data は null）"""
    try:
        tour_id = TourId(value=path_parameter(event, "tourId"))
        user_id = UserId(value=path_parameter(event, "userId"))
        rating = service.get(tour_id, user_id)
        return success_response(
            200, data=to_rating_data(rating) if rating is not None else None
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to fetch user rating")
        return internal_error_response("Error getting user rating", e)
