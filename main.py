from aiohttp import web

from config.logger import logger
from config.settings import Settings, parse_flag, parse_positive_int
from core.pipeline import build_waitlist
from services.feed import FeedUnavailableError
from services.renderer import render_games, render_page

SETTINGS_KEY = web.AppKey("settings", Settings)
PIPELINE_KEY = web.AppKey("pipeline", object)

# --- Opções por requisição ---

def request_options(query, settings: Settings) -> dict:
    """
    Lê os toggles da query string, caindo nos defaults do processo.

    ?thumbnails=0       desliga a busca de og:image
    ?collapse=3         recolhe ofertas a partir da 4ª
    ?full=1             devolve a página completa em vez do fragmento
    """
    return {
        "show_thumbnails": parse_flag(query.get("thumbnails"), settings.show_thumbnails),
        "collapse_after": parse_positive_int(query.get("collapse"), settings.collapse_after),
        "full_page": parse_flag(query.get("full"), False),
    }

# --- Handlers HTTP ---

async def handle_index(request: web.Request) -> web.Response:
    settings = request.app[SETTINGS_KEY]
    pipeline = request.app[PIPELINE_KEY]
    options = request_options(request.query, settings)

    try:
        games = await pipeline(settings, show_thumbnails=options["show_thumbnails"])
    except FeedUnavailableError as e:
        logger.error(f"❌ Erro ao buscar o feed RSS: {e}")
        return web.Response(status=500, text="Failed to fetch RSS feed")

    body = render_games(games, collapse_after=options["collapse_after"])
    if options["full_page"]:
        body = render_page(body)
    return web.Response(text=body, content_type="text/html", charset="utf-8")

async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})

def create_app(settings: Settings, pipeline=build_waitlist) -> web.Application:
    app = web.Application()
    app[SETTINGS_KEY] = settings
    app[PIPELINE_KEY] = pipeline
    app.router.add_get("/", handle_index)
    app.router.add_get("/health", handle_health)
    return app

if __name__ == "__main__":
    settings = Settings.from_env()
    if not settings.rss_token:
        raise RuntimeError("WAITLIST_RSS_TOKEN must be set in the environment")

    logger.info(f"🔥 Iniciando servidor em http://{settings.host}:{settings.port}")
    try:
        web.run_app(create_app(settings), host=settings.host, port=settings.port, print=None)
    except KeyboardInterrupt:
        logger.info("Servidor parado pelo usuário.")
