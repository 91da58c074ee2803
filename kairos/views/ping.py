from aiohttp import web


class Ping(web.View):
    async def get(self):
        bot = self.request.app.get("bot")
        if bot is None or not bot.is_ready():
            return web.Response(text="Pong! The bot is not connected yet.", status=503)

        return web.Response(
            text=f"Pong! I am connected to {len(bot.guilds)} guilds. "
            f"Latency: {round(bot.latency * 1000)}ms."
        )
