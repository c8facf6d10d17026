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
from services.tour.applications.delete_tour import DeleteTourService
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

repository = DynamoDBTourRepository()
service = DeleteTourService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ツアー削除 Lambda Handler"""
    try:
        tour_id = TourId(value=path_parameter(event, "tourId"))
        logger.info("Deleting tour", extra={"tour_id": str(tour_id)})
        service.delete(tour_id)
        return success_response(200, message="Tour deleted successfully")
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to delete tour")
        return internal_error_response("Server error deleting tour", e)
