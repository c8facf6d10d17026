from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.booking_view import BookingViewAssembler
from services.booking.applications.get_booking import GetBookingService
from services.booking.domain.value_object import BookingId
from services.booking.handlers.response_models import to_user_booking_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    domain_error_response,
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

service = GetBookingService(
    repository=DynamoDBBookingRepository(),
    assembler=BookingViewAssembler(
        tour_repository=DynamoDBTourRepository(),
        user_repository=DynamoDBUserRepository(),
    ),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約詳細 Lambda Handler"""
    try:
        booking_id = BookingId(value=path_parameter(event, "id"))
        logger.info("Fetching booking", extra={"booking_id": str(booking_id)})

        view = service.get(booking_id)
        return success_response(200, data=to_user_booking_data(view))
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to fetch booking")
        return internal_error_response("Server error fetching booking", e)
