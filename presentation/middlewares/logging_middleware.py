import logging
from aiohttp import web
from presentation.utils import client_of


logger = logging.getLogger('handlers')


@web.middleware
async def logging_middleware(request: web.Request, handler):
    try:
        response = await handler(request)
    except web.HTTPException as e:
        logger.info(f"{request.method} {request.path} {e.status}", extra=client_of(request))
        raise
    logger.info(f"{request.method} {request.path} {response.status}", extra=client_of(request))
    return response
