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
    parse_model,
    read_json_body,
    success_response,
)
from services.tour.applications.create_tour import CreateTourService
from services.tour.domain.factory import TourFactory
from services.tour.handlers.request_models import TourRequest
from services.tour.handlers.response_models import to_tour_data
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

repository = DynamoDBTourRepository()
factory = TourFactory()
service = CreateTourService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ツアー登録 Lambda Handler"""
    logger.info("Received create tour request")

    try:
        request = parse_model(TourRequest, read_json_body(event))
        tour = service.create(request.to_details())
        return success_response(
            201,
            message="Tour created successfully",
            data=to_tour_data(tour),
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to create tour")
        return internal_error_response("Error creating tour", e)
