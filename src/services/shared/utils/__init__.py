from .http_response import api_response as api_response
from .http_response import domain_error_response as domain_error_response
from .http_response import error_response as error_response
from .http_response import internal_error_response as internal_error_response
from .http_response import success_response as success_response
from .logger import get_logger as get_logger
from .request_parser import parse_model as parse_model
from .request_parser import path_parameter as path_parameter
from .request_parser import read_json_body as read_json_body
from .camel_model import CamelModel as CamelModel
