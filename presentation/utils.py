from typing import TypeVar
from aiohttp import web
from pydantic import BaseModel, ValidationError
from app.domain.exceptions import InvalidRequestError
from presentation.messages import MISSING_FIELDS_MSG, INVALID_FIELDS_MSG, INVALID_JSON_MSG


RequestT = TypeVar('RequestT', bound=BaseModel)

# Errors that mean the client left a field out or sent it empty
MISSING_ERROR_TYPES = ('missing', 'string_too_short')


def required_fields(model: type[BaseModel]) -> list[str]:
    """
    Lists the required fields of a request model by their JSON names.

    :param model: The pydantic request model.
    :return: A list of field names, using aliases where the model defines them.
    """
    return [field.alias or name for name, field in model.model_fields.items() if field.is_required()]


async def parse_body(request: web.Request, model: type[RequestT]) -> RequestT:
    """
    Reads the JSON body of the request and validates it against the model.

    :param request: The incoming request.
    :param model: The pydantic model the body should match.
    :return: The validated model instance.
    :raises InvalidRequestError: If the body isn't a JSON object or fails validation.
    """
    try:
        data = await request.json()
    except ValueError:
        raise InvalidRequestError(INVALID_JSON_MSG) from None
    if not isinstance(data, dict):
        raise InvalidRequestError(INVALID_JSON_MSG)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        if all(error['type'] in MISSING_ERROR_TYPES for error in errors):
            message = MISSING_FIELDS_MSG.format(fields=', '.join(required_fields(model)))
        else:
            fields = dict.fromkeys(str(error['loc'][0]) for error in errors if error['loc'])
            message = INVALID_FIELDS_MSG.format(fields=', '.join(fields))
        raise InvalidRequestError(message) from None


def json_response(data: BaseModel | list[BaseModel], status: int = 200) -> web.Response:
    """
    Serializes one entity or a list of entities with camelCase keys.
    """
    if isinstance(data, list):
        payload = [item.model_dump(by_alias=True) for item in data]
    else:
        payload = data.model_dump(by_alias=True)
    return web.json_response(payload, status=status)


def client_of(request: web.Request) -> dict:
    # Extra fields for log records, see config.logging_config
    return {'client': request.remote or 'UNKNOWN'}
