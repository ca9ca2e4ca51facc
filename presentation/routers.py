from aiohttp import web


router_songs = web.RouteTableDef()
router_playlists = web.RouteTableDef()
router_tags = web.RouteTableDef()
