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
    parse_model,
    path_parameter,
    read_json_body,
    success_response,
)
from services.tour.applications.rate_tour import RateTourService
from services.tour.handlers.request_models import RateTourRequest
from services.tour.handlers.response_models import to_rating_data
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)

logger = Logger()

repository = DynamoDBTourRepository()
service = RateTourService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ツアー評価 Lambda Handler

    同じユーザーの再評価は上書き扱いとなり、件数は増えない。
    """
    try:
        tour_id = TourId(value=path_parameter(event, "tourId"))
        request = parse_model(RateTourRequest, read_json_body(event))
        user_id = UserId(value=request.user_id)
        logger.info(
            "Received rate tour request",
            extra={"tour_id": str(tour_id), "user_id": str(user_id)},
        )

        result = service.rate(tour_id, user_id, request.rating, request.review or "")
        message = (
            "Rating updated successfully"
            if result.updated
            else "Rating added successfully"
        )
        return success_response(
            200,
            message=message,
            data={
                "averageRating": result.tour.average_rating,
                "totalRatings": result.tour.total_ratings,
                "rating": to_rating_data(result.rating),
            },
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to rate tour")
        return internal_error_response("Error rating tour", e)
