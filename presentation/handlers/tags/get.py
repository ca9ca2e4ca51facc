from aiohttp import web
from presentation.routers import router_tags
from app.use_cases.tags.tag_use_cases import TagUseCases
from infrastructure.services.repo_service import RepoService
from presentation.utils import json_response


@router_tags.get('/getTags')
async def get_tags(request: web.Request) -> web.Response:
    repo_service: RepoService = request['repo_service']
    use_case = TagUseCases(tag_repo=repo_service.tag_repo)
    return json_response(await use_case.get_all())


@router_tags.get('/getTag/{tag_id}')
async def get_tag(request: web.Request) -> web.Response:
    repo_service: RepoService = request['repo_service']
    use_case = TagUseCases(tag_repo=repo_service.tag_repo)
    return json_response(await use_case.get(request.match_info['tag_id']))
