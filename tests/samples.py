"""HTML no formato do feed de waitlist e sessões aiohttp falsas para os testes."""

from models.deal import Deal, GameDeals


def deal_row(price="R$ 10,00", discount="-50%", store="Steam", href="https://store.example/deal"):
    return (
        "<div style='display:flex;gap:5px'>"
        f"<a href='{href}' style='font-size:1.1em;font-weight:bold'>{price}</a> "
        f"<span style='display:inline-block;min-width:2.8em'>{discount}</span> "
        f"on <a href='https://shop.example/{store}'>{store}</a>"
        "</div>"
    )


def game_block(name, rows, historical_low="R$ 5,00", href="/game/some-game/info/"):
    name_link = f"<a href='{href}' style='font-size:1.2em;font-weight:bold'>{name}</a>" if name else ""
    return (
        "<div style='margin-bottom:30px'>"
        f"{name_link}"
        f"<div style='font-size: 0.9em;color:#888'>Historical low: {historical_low}</div>"
        "<div style='padding-left:15px'>" + "".join(rows) + "</div>"
        "</div>"
    )


def fragment(*blocks):
    return "<div>" + "".join(blocks) + "</div>"


def game(name, *prices):
    return GameDeals(
        name=name,
        image_url="https://img.example/default.png",
        deals=[Deal(price=p) for p in prices],
    )


def detail_page(image="https://img.example/cover.jpg"):
    return (
        "<html><head>"
        f"<meta property='og:image' content='{image}'>"
        "</head><body></body></html>"
    )


class FakeResponse:
    def __init__(self, status=200, body="", content_type="text/html", error=None):
        self.status = status
        self.body = body
        self.content_type = content_type
        self.error = error

    async def text(self):
        return self.body

    async def read(self):
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    async def __aenter__(self):
        if self.error:
            raise self.error
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Responde por URL; URLs desconhecidas dão 404."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append(url)
        response = self.responses.get(url)
        if isinstance(response, Exception):
            raise response
        return response or FakeResponse(status=404)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False
