from .ping import Ping


async def init_views(app):
    app.router.add_route("GET", "/ping", Ping)
