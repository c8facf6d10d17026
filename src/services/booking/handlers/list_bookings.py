from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.booking_view import BookingViewAssembler
from services.booking.applications.list_bookings import ListBookingsService
from services.booking.handlers.response_models import to_booking_list_item_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.utils import internal_error_response, success_response
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
    """全予約一覧 Lambda Handler（管理者向け）"""
    logger.info("Listing all bookings")

    try:
        result = service.list_all()
        return success_response(
            200,
            count=result.count,
            confirmedCount=result.confirmed_count,
            data=[to_booking_list_item_data(view) for view in result.views],
        )
    except Exception as e:
        logger.exception("Failed to list bookings")
        return internal_error_response("Server error fetching bookings", e)
