import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# (Construct ID, handler モジュール, 読み取りのみか)
TOUR_HANDLERS = [
    ("ListToursLambda", "tour.handlers.list_tours", True),
    ("ListToursByCategoryLambda", "tour.handlers.list_by_category", True),
    ("GetTourLambda", "tour.handlers.get_tour", True),
    ("CreateTourLambda", "tour.handlers.create_tour", False),
    ("UpdateTourLambda", "tour.handlers.update_tour", False),
    ("DeleteTourLambda", "tour.handlers.delete_tour", False),
    ("RateTourLambda", "tour.handlers.rate", False),
    ("GetTourRatingsLambda", "tour.handlers.get_ratings", True),
    ("GetUserRatingLambda", "tour.handlers.get_user_rating", True),
]

BOOKING_HANDLERS = [
    ("CreateBookingLambda", "booking.handlers.create_booking", False),
    ("ListBookingsLambda", "booking.handlers.list_bookings", True),
    ("ListUserBookingsLambda", "booking.handlers.list_user_bookings", True),
    ("GetBookingLambda", "booking.handlers.get_booking", True),
    ("UpdateBookingStatusLambda", "booking.handlers.update_booking_status", False),
    ("DeleteBookingLambda", "booking.handlers.delete_booking", False),
]

SAVED_HANDLERS = [
    ("SaveTourLambda", "saved.handlers.save_tour", False),
    ("RemoveSavedTourLambda", "saved.handlers.remove_saved_tour", False),
    ("ListSavedToursLambda", "saved.handlers.list_saved_tours", True),
]


class Functions(Construct):
    """Lambda 関数を管理する Construct

    関数は Construct ID で self.functions から参照する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        environment_name: str = "production",
    ) -> None:
        super().__init__(scope, id)
        self._environment_name = environment_name

        self.functions: dict[str, _lambda.Function] = {}
        for service_name, handlers in [
            ("tour-service", TOUR_HANDLERS),
            ("booking-service", BOOKING_HANDLERS),
            ("saved-service", SAVED_HANDLERS),
        ]:
            for fn_id, module, read_only in handlers:
                fn = self._create_function(
                    fn_id,
                    f"services.{module}.lambda_handler",
                    service_name,
                    table,
                    common_layer,
                )
                if read_only:
                    table.grant_read_data(fn)
                else:
                    table.grant_read_write_data(fn)
                self.functions[fn_id] = fn

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "ENVIRONMENT": self._environment_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
