from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.saved.applications.list_saved_tours import ListSavedToursService
from services.saved.handlers.response_models import to_saved_tour_data
from services.saved.infrastructure.dynamodb_saved_tour_repository import (
    DynamoDBSavedTourRepository,
)
from services.shared.domain import DomainException, UserId
from services.shared.utils import (
    domain_error_response,
    internal_error_response,
    path_parameter,
    success_response,
)
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

service = ListSavedToursService(
    saved_tour_repository=DynamoDBSavedTourRepository(),
    tour_repository=DynamoDBTourRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """保存済みツアー一覧 Lambda Handler"""
    try:
        user_id = UserId(value=path_parameter(event, "userId"))
        logger.info("Listing saved tours", extra={"user_id": str(user_id)})

        views = service.list(user_id)
        return success_response(200, data=[to_saved_tour_data(view) for view in views])
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to list saved tours")
        return internal_error_response("Server error fetching saved tours", e)
