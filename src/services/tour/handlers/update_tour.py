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
    parse_model,
    path_parameter,
    read_json_body,
    success_response,
)
from services.tour.applications.update_tour import UpdateTourService
from services.tour.handlers.request_models import TourRequest
from services.tour.handlers.response_models import to_tour_data
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

repository = DynamoDBTourRepository()
service = UpdateTourService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ツアー更新 Lambda Handler"""
    try:
        tour_id = TourId(value=path_parameter(event, "tourId"))
        logger.info("Received update tour request", extra={"tour_id": str(tour_id)})
        request = parse_model(TourRequest, read_json_body(event))
        tour = service.update(tour_id, request.to_details())
        return success_response(
            200,
            message="Tour updated successfully",
            data=to_tour_data(tour),
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to update tour")
        return internal_error_response("Error updating tour", e)
