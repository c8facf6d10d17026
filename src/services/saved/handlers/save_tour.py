from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.saved.applications.save_tour import SaveTourService
from services.saved.handlers.request_models import SaveTourRequest
from services.saved.handlers.response_models import to_saved_tour_data
from services.saved.infrastructure.dynamodb_saved_tour_repository import (
    DynamoDBSavedTourRepository,
)
from services.shared.domain import DomainException, TourId, UserId
from services.shared.utils import (
    domain_error_response,
    internal_error_response,
    parse_model,
    read_json_body,
    success_response,
)
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

service = SaveTourService(
    saved_tour_repository=DynamoDBSavedTourRepository(),
    tour_repository=DynamoDBTourRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ツアー保存 Lambda Handler"""
    try:
        request = parse_model(SaveTourRequest, read_json_body(event))
        user_id = UserId(value=request.user_id)
        tour_id = TourId(value=request.tour_id)

        view = service.save(user_id, tour_id)
        return success_response(
            201, message="Tour saved successfully", data=to_saved_tour_data(view)
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to save tour")
        return internal_error_response("Server error saving tour", e)
