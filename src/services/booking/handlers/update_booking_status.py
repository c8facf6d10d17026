from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.update_booking_status import (
    UpdateBookingStatusService,
)
from services.booking.domain.value_object import BookingId
from services.booking.handlers.request_models import UpdateBookingStatusRequest
from services.booking.handlers.response_models import to_booking_status_data
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    domain_error_response,
    internal_error_response,
    parse_model,
    path_parameter,
    read_json_body,
    success_response,
)

logger = Logger()

repository = DynamoDBBookingRepository()
service = UpdateBookingStatusService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約ステータス更新 Lambda Handler"""
    try:
        booking_id = BookingId(value=path_parameter(event, "id"))
        request = parse_model(UpdateBookingStatusRequest, read_json_body(event))
        logger.info(
            "Received booking status update",
            extra={"booking_id": str(booking_id), "status": request.status},
        )

        booking = service.update(booking_id, request.status)
        return success_response(
            200,
            message=f"Booking {booking.status.value} successfully",
            data=to_booking_status_data(booking),
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception as e:
        logger.exception("Failed to update booking status")
        return internal_error_response("Server error updating booking status", e)
