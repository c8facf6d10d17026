from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# (リソースパス, HTTP メソッド, Lambda の Construct ID)
ROUTES = [
    ("tours", "GET", "ListToursLambda"),
    ("tours", "POST", "CreateTourLambda"),
    ("tours/category/{category}", "GET", "ListToursByCategoryLambda"),
    ("tours/{tourId}", "GET", "GetTourLambda"),
    ("tours/{tourId}", "PUT", "UpdateTourLambda"),
    ("tours/{tourId}", "DELETE", "DeleteTourLambda"),
    ("tours/{tourId}/rate", "POST", "RateTourLambda"),
    ("tours/{tourId}/ratings", "GET", "GetTourRatingsLambda"),
    ("tours/{tourId}/rating/{userId}", "GET", "GetUserRatingLambda"),
    ("bookings", "POST", "CreateBookingLambda"),
    ("bookings", "GET", "ListBookingsLambda"),
    ("bookings/user/{userId}", "GET", "ListUserBookingsLambda"),
    ("bookings/{id}", "GET", "GetBookingLambda"),
    ("bookings/{id}", "PUT", "UpdateBookingStatusLambda"),
    ("bookings/{id}", "DELETE", "DeleteBookingLambda"),
    ("saved", "POST", "SaveTourLambda"),
    ("saved/{userId}", "GET", "ListSavedToursLambda"),
    ("saved/{userId}/{tourId}", "DELETE", "RemoveSavedTourLambda"),
]


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: dict[str, _lambda.Function],
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "TourBookingRestApi",
            rest_api_name="Tour Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
            ),
        )

        resources: dict[str, apigw.IResource] = {"": self.rest_api.root}
        for path, method, fn_id in ROUTES:
            resource = self._resource(resources, path)
            resource.add_method(method, apigw.LambdaIntegration(functions[fn_id]))

    def _resource(
        self, resources: dict[str, apigw.IResource], path: str
    ) -> apigw.IResource:
        """パスのリソースを取得する（途中のリソースも必要に応じて作る）"""
        if path in resources:
            return resources[path]
        parent_path, _, part = path.rpartition("/")
        resource = self._resource(resources, parent_path).add_resource(part)
        resources[path] = resource
        return resource
