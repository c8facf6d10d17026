from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.saved.applications.remove_saved_tour import RemoveSavedTourService
from services.saved.infrastructure.dynamodb_saved_tour_repository import (
    DynamoDBSavedTourRepository,
)
from services.shared.domain import DomainException, TourId, UserId
from services.shared.utils import (
    domain_error_response,
    internal_error_response,
    path_parameter,
    success_response,
)

logger = Logger()

repository = DynamoDBSavedTourRepository()
service = RemoveSavedTourService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """保存済みツアー削除 Lambda Handler"""
    try:
        user_id = UserId(value=path_parameter(event, "userId"))
        tour_id = TourId(value=path_parameter(event, "tourId"))
        logger.info(
            "Removing saved tour",
            extra={"user_id": str(user_id), "tour_id": str(tour_id)},
        )

        service.remove(user_id, tour_id)
        return success_response(200, message="Tour removed from saved list")
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to remove saved tour")
        return internal_error_response("Server error removing saved tour", e)
