from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.delete_booking import DeleteBookingService
from services.booking.domain.value_object import BookingId
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

logger = Logger()

repository = DynamoDBBookingRepository()
service = DeleteBookingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約削除 Lambda Handler"""
    try:
        booking_id = BookingId(value=path_parameter(event, "id"))
        logger.info("Deleting booking", extra={"booking_id": str(booking_id)})

        service.delete(booking_id)
        return success_response(200, message="Booking deleted successfully")
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to delete booking")
        return internal_error_response("Server error deleting booking", e)
