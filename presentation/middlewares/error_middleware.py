import logging
from aiohttp import web
from app.domain.exceptions import EntityNotFoundError, InvalidRequestError
from presentation.messages import INTERNAL_ERROR_MSG
from presentation.utils import client_of


logger = logging.getLogger('handlers')


@web.middleware
async def error_middleware(request: web.Request, handler):
    """
    Turns exceptions raised by handlers into JSON error responses.

    Missing entities become 404 and invalid requests become 400. Anything unexpected is logged
    with its traceback and answered with 500, the client never sees the exception details.
    """
    try:
        return await handler(request)
    except EntityNotFoundError as e:
        logger.info(f"{e.entity} {e.entity_id} not found", extra=client_of(request))
        return web.json_response({'error': str(e)}, status=404)
    except InvalidRequestError as e:
        logger.info(f"Invalid request to {request.path}: {e.message}", extra=client_of(request))
        return web.json_response({'error': e.message}, status=400)
    except web.HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error in {request.method} {request.path}: {e}", exc_info=True, extra=client_of(request))
        return web.json_response({'error': INTERNAL_ERROR_MSG}, status=500)
