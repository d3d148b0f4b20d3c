import aiohttp
from typing import Optional
from bs4 import BeautifulSoup
from config.logger import logger

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml",
}

# Ordem de preferência das meta tags de preview
PREVIEW_META = [
    {"property": "og:image"},
    {"name": "twitter:image"},
]


def extract_preview_image(html_content: str) -> Optional[str]:
    """Retorna o content da primeira meta tag de preview social, se houver."""
    soup = BeautifulSoup(html_content, 'html.parser')
    for attrs in PREVIEW_META:
        meta = soup.find("meta", attrs=attrs)
        if meta and meta.get("content"):
            return meta["content"].strip()
    return None


async def resolve_thumbnail(session: aiohttp.ClientSession, url: str, timeout: float = 15) -> Optional[str]:
    """
    Busca a página de detalhes do jogo e extrai a imagem de preview (og:image).

    Qualquer falha (rede, status, resposta que não é HTML, tag ausente) vira None.
    Nunca levanta exceção: quem chama usa a imagem padrão.

    Args:
        session: Sessão aiohttp compartilhada pela requisição
        url: URL da página de detalhes do jogo
        timeout: Timeout total em segundos

    Returns:
        URL da imagem ou None
    """
    try:
        async with session.get(
            url,
            headers=HEADERS,
            timeout=aiohttp.ClientTimeout(total=timeout)
        ) as response:
            if response.status >= 400:
                logger.warning(f"⚠️ Thumbnail: status {response.status} em {url}")
                return None
            if "html" not in (response.content_type or ""):
                logger.warning(f"⚠️ Thumbnail: resposta não é HTML ({response.content_type}) em {url}")
                return None
            html_content = await response.text()
    except Exception as e:
        logger.warning(f"⚠️ Thumbnail: falha ao buscar {url}: {e!r}")
        return None

    try:
        image_url = extract_preview_image(html_content)
    except Exception as e:
        logger.warning(f"⚠️ Thumbnail: HTML inválido em {url}: {e!r}")
        return None

    if not image_url:
        logger.info(f"Sem og:image em {url}")
    return image_url
