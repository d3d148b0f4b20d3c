import aiohttp
from typing import List, Optional

from config.logger import logger
from config.settings import Settings
from core.aggregator import merge_games
from core.ranking import rank_games
from models.deal import GameDeals
from scrapers.waitlist import extract_games
from services.feed import fetch_feed, parse_feed


async def collect_games(
    fragments: List[str],
    session: Optional[aiohttp.ClientSession],
    settings: Settings,
    show_thumbnails: Optional[bool] = None,
) -> List[GameDeals]:
    """
    Extrai, junta e ordena os jogos de vários fragmentos HTML.

    Os fragmentos são processados na ordem do feed para que a ordem das
    ofertas dentro de cada jogo seja item a item, linha a linha.
    """
    if show_thumbnails is None:
        show_thumbnails = settings.show_thumbnails

    per_fragment = []
    for html_content in fragments:
        per_fragment.append(await extract_games(
            html_content,
            session,
            show_thumbnails=show_thumbnails,
            default_image=settings.default_thumbnail_url,
            timeout=settings.request_timeout,
        ))

    merged = merge_games(per_fragment)
    ranked = rank_games(merged)
    logger.info(f"📋 {len(ranked)} jogos únicos em {len(fragments)} itens do feed")
    return ranked


async def build_waitlist(settings: Settings, show_thumbnails: Optional[bool] = None) -> List[GameDeals]:
    """
    Pipeline completo de uma requisição: feed -> extração -> junção -> ranking.

    Raises:
        FeedUnavailableError: se o feed não puder ser baixado ou lido
    """
    timeout = aiohttp.ClientTimeout(total=settings.request_timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        raw = await fetch_feed(session, settings.feed_url)
        fragments = parse_feed(raw, limit=settings.feed_item_limit)
        return await collect_games(fragments, session, settings, show_thumbnails=show_thumbnails)
