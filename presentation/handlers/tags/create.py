import logging
from aiohttp import web
from presentation.routers import router_tags
from app.use_cases.tags.tag_use_cases import TagUseCases
from infrastructure.services.repo_service import RepoService
from presentation.request_models import TagRequest
from presentation.utils import parse_body, json_response, client_of


logger = logging.getLogger('handlers')


@router_tags.post('/addTag')
async def create_tag(request: web.Request) -> web.Response:
    body = await parse_body(request, TagRequest)
    logger.info("CREATE TAG", extra=client_of(request))

    repo_service: RepoService = request['repo_service']
    use_case = TagUseCases(tag_repo=repo_service.tag_repo)
    tag = await use_case.create(name=body.name, tag_color=body.tag_color)
    return json_response(tag, status=201)
