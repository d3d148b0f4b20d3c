import asyncio
from dataclasses import dataclass, field
from typing import Iterable, List, Optional
from urllib.parse import urljoin

import aiohttp
from bs4 import Tag

from config.logger import logger
from config.settings import DEFAULT_THUMBNAIL_URL, SITE_BASE_URL
from models.deal import Deal, GameDeals
from scrapers import markup
from scrapers.thumbnail import resolve_thumbnail
from utils.extraction import (
    NOT_AVAILABLE, NO_LINK, UNKNOWN_STORE, UNKNOWN_GAME, NO_HISTORICAL_LOW,
    text_or_default, attr_or_default,
)

STORE_MARKER = "on"


@dataclass
class ParsedBlock:
    name: str
    historical_low: str
    detail_url: Optional[str] = None
    deals: List[Deal] = field(default_factory=list)


def store_from_segments(segments: Iterable[str]) -> str:
    """
    Nome da loja a partir dos trechos de texto de uma linha de oferta.

    A linha segue o modelo "R$ 10,00 -50% on Steam": a loja é o trecho logo
    depois do primeiro "on". Frágil por natureza: se o template mudar, ou se o
    nome da loja tiver "on" como primeiro token, o resultado muda junto.
    """
    tokens = [s.strip() for s in segments if s and s.strip()]
    try:
        on_index = tokens.index(STORE_MARKER)
    except ValueError:
        return UNKNOWN_STORE
    if on_index + 1 < len(tokens):
        return tokens[on_index + 1]
    return UNKNOWN_STORE


def parse_deal_row(row: Tag) -> Deal:
    price_link = markup.PRICE_LINK.first(row)
    return Deal(
        price=text_or_default(price_link, NOT_AVAILABLE),
        link=attr_or_default(price_link, "href", NO_LINK),
        discount=text_or_default(markup.DISCOUNT.first(row), NOT_AVAILABLE),
        store=store_from_segments(row.stripped_strings),
    )


def _strip_label(text: str) -> str:
    return text.replace(markup.HISTORICAL_LOW_LABEL, "")


def parse_game_block(block: Tag) -> ParsedBlock:
    name_link = markup.GAME_NAME.first(block)
    # O nome é a chave de agrupamento: mantido exatamente como veio
    name = text_or_default(name_link, UNKNOWN_GAME, strip=False)

    href = attr_or_default(name_link, "href", "").strip()
    detail_url = urljoin(SITE_BASE_URL, href) if href else None

    historical_low = text_or_default(
        markup.HISTORICAL_LOW.first(block),
        NO_HISTORICAL_LOW,
        transform=_strip_label,
    )

    deals = [parse_deal_row(row) for row in markup.deal_rows(block)]
    return ParsedBlock(name=name, historical_low=historical_low, detail_url=detail_url, deals=deals)


def parse_game_blocks(html_content: str) -> List[ParsedBlock]:
    """Extrai todos os blocos de jogo de um fragmento HTML, em ordem de documento."""
    soup = markup.parse_html(html_content)
    return [parse_game_block(block) for block in markup.GAME_BLOCK.all(soup)]


async def extract_games(
    html_content: str,
    session: Optional[aiohttp.ClientSession],
    show_thumbnails: bool = True,
    default_image: str = DEFAULT_THUMBNAIL_URL,
    timeout: float = 15,
) -> List[GameDeals]:
    """
    Extrai os jogos de um fragmento e resolve os thumbnails em paralelo.

    Cada bloco tem sua própria busca de og:image; todas são disparadas juntas
    (gather) e o resultado volta na mesma ordem dos blocos.
    """
    blocks = parse_game_blocks(html_content)
    if not blocks:
        return []

    async def _no_image():
        return None

    tasks = []
    for block in blocks:
        if show_thumbnails and session is not None and block.detail_url:
            tasks.append(resolve_thumbnail(session, block.detail_url, timeout=timeout))
        else:
            tasks.append(_no_image())

    images = await asyncio.gather(*tasks)
    logger.info(f"🎮 {len(blocks)} jogos extraídos ({sum(1 for i in images if i)} com thumbnail)")

    return [
        GameDeals(
            name=block.name,
            image_url=image or default_image,
            historical_low=block.historical_low,
            deals=block.deals,
        )
        for block, image in zip(blocks, images)
    ]
