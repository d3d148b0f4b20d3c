import asyncio
import io
import aiohttp
import feedparser
from feedparser.exceptions import CharacterEncodingOverride
from typing import List
from config.logger import logger


class FeedUnavailableError(Exception):
    """Feed de waitlist não pôde ser baixado ou lido. Aborta a requisição inteira."""


async def fetch_feed(session: aiohttp.ClientSession, url: str) -> bytes:
    """Baixa o RSS bruto. Sem retry: falhou, a requisição falha."""
    try:
        async with session.get(url) as response:
            if response.status != 200:
                logger.error(f"❌ Feed Error: status {response.status}")
                raise FeedUnavailableError(f"feed returned HTTP {response.status}")
            return await response.read()
    except aiohttp.ClientError as e:
        logger.error(f"❌ Feed Exception: {e!r}")
        raise FeedUnavailableError(str(e)) from e
    except asyncio.TimeoutError as e:
        logger.error("❌ Feed Exception: timeout")
        raise FeedUnavailableError("timeout fetching feed") from e


def parse_feed(raw: bytes, limit: int = 2) -> List[str]:
    """
    Lê o envelope RSS e devolve o HTML da descrição dos primeiros `limit` itens.

    O sanitizador do feedparser fica desligado: ele reescreve o atributo style,
    e é justamente por ele que os extratores encontram os elementos.

    Raises:
        FeedUnavailableError: se o conteúdo não for um RSS/Atom legível
    """
    feed = feedparser.parse(io.BytesIO(raw), sanitize_html=False, resolve_relative_uris=False)

    # XML quebrado ou truncado: o parser tolerante do feedparser ainda devolve
    # parte dos itens, mas resultado parcial não serve. Só a troca de encoding passa.
    error = feed.get("bozo_exception")
    if feed.bozo and not isinstance(error, CharacterEncodingOverride):
        logger.error(f"❌ RSS inválido: {error!r}")
        raise FeedUnavailableError("could not parse RSS envelope") from error

    # Canal vazio é válido; sem versão reconhecida e sem itens, não é RSS
    if not feed.entries and not feed.get("version"):
        logger.error("❌ RSS inválido: formato não reconhecido")
        raise FeedUnavailableError("could not parse RSS envelope")

    fragments = []
    for entry in feed.entries[:limit]:
        description = entry.get("description") or entry.get("summary")
        if description:
            fragments.append(description)
        else:
            logger.warning(f"⚠️ Item sem descrição: {entry.get('title', '?')}")
    return fragments
