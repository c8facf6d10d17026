from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_created_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException
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
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = CreateBookingService(
    booking_repository=DynamoDBBookingRepository(),
    tour_repository=DynamoDBTourRepository(),
    user_repository=DynamoDBUserRepository(),
    factory=BookingFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler

    Args:
        event: API Gateway プロキシイベント（body に予約内容）
        context: Lambda コンテキスト

    Returns:
        dict: 201 + 予約ビュー、または 400 / 404 / 500
    """
    try:
        request = parse_model(CreateBookingRequest, read_json_body(event))
        logger.info(
            "Received create booking request",
            extra={"tour_id": request.tour_id, "user_id": request.user_id},
        )

        view = service.create(request.to_details())
        return success_response(
            201,
            message="Booking created successfully",
            data=to_created_booking_data(view),
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to create booking")
        return internal_error_response("Server error while creating booking", e)
