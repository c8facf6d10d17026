from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.booking_view import BookingViewAssembler
from services.booking.applications.list_bookings import ListBookingsService
from services.booking.handlers.response_models import to_user_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException, UserId
from services.shared.utils import (
    domain_error_response,
    error_response,
    internal_error_response,
    path_parameter,
    success_response,
)
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

service = ListBookingsService(
    repository=DynamoDBBookingRepository(),
    assembler=BookingViewAssembler(
        tour_repository=DynamoDBTourRepository(),
        user_repository=DynamoDBUserRepository(),
    ),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー別予約一覧 Lambda Handler"""
    raw_user_id = path_parameter(event, "userId")
    if raw_user_id is None:
        return error_response(400, "User ID is required")

    try:
        user_id = UserId(value=raw_user_id)
        logger.info("Listing user bookings", extra={"user_id": str(user_id)})

        result = service.list_for_user(user_id)
        return success_response(
            200,
            count=result.count,
            confirmedCount=result.confirmed_count,
            data=[to_user_booking_data(view) for view in result.views],
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to list user bookings", extra={"user_id": raw_user_id})
        return internal_error_response("Server error fetching user bookings", e)
