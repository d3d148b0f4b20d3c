import asyncio

from bs4 import BeautifulSoup

from scrapers.waitlist import (
    extract_games, parse_deal_row, parse_game_blocks, store_from_segments,
)
from utils.extraction import attr_or_default, text_or_default
from samples import FakeResponse, FakeSession, deal_row, detail_page, fragment, game_block

DEFAULT_IMAGE = "https://img.example/default.png"


def _row(html):
    return BeautifulSoup(html, "html.parser").div


def test_deal_row_fields():
    deal = parse_deal_row(_row(deal_row("R$ 29,99", "-40%", "GOG", "https://gog.example/x")))

    assert deal.price == "R$ 29,99"
    assert deal.discount == "-40%"
    assert deal.store == "GOG"
    assert deal.link == "https://gog.example/x"


def test_deal_row_without_price_anchor():
    deal = parse_deal_row(_row(
        "<div><span style='min-width:2.8em'>-10%</span> on <b>Steam</b></div>"
    ))

    assert deal.price == "N/A"
    assert deal.link == "#"
    assert deal.discount == "-10%"
    assert deal.store == "Steam"


def test_deal_row_price_anchor_without_href():
    deal = parse_deal_row(_row("<div><a style='font-size:1.1em'> R$ 5,00 </a></div>"))

    assert deal.price == "R$ 5,00"
    assert deal.link == "#"
    assert deal.discount == "N/A"
    assert deal.store == "Unknown Store"


def test_store_follows_first_on_token():
    assert store_from_segments(["Best", "price", "on", "Steam"]) == "Steam"
    assert store_from_segments(["R$ 1,00", "on", "GOG", "on", "Steam"]) == "GOG"


def test_store_unknown_without_on_token():
    assert store_from_segments(["Best", "price", "at", "Steam"]) == "Unknown Store"
    assert store_from_segments(["R$ 1,00", "on"]) == "Unknown Store"
    assert store_from_segments([]) == "Unknown Store"


def test_store_tokens_are_trimmed_and_blank_ones_skipped():
    assert store_from_segments(["  ", " on ", "\n", " Humble Store "]) == "Humble Store"


def test_field_helpers_defaults():
    assert text_or_default(None, "N/A") == "N/A"
    assert attr_or_default(None, "href", "#") == "#"

    link = BeautifulSoup("<a> x </a>", "html.parser").a
    assert text_or_default(link, "N/A") == "x"
    assert text_or_default(link, "N/A", strip=False) == " x "
    assert attr_or_default(link, "href", "#") == "#"


def test_game_block_fields():
    html = fragment(game_block(
        "Hades II",
        [deal_row("R$ 50,00", store="Steam"), deal_row("R$ 45,00", store="GOG")],
        historical_low="R$ 39,90 (Steam)",
        href="/game/hades-ii/info/",
    ))

    [block] = parse_game_blocks(html)

    assert block.name == "Hades II"
    assert block.historical_low == "R$ 39,90 (Steam)"
    assert block.detail_url == "https://isthereanydeal.com/game/hades-ii/info/"
    assert [d.store for d in block.deals] == ["Steam", "GOG"]
    assert [d.price for d in block.deals] == ["R$ 50,00", "R$ 45,00"]


def test_game_block_defaults():
    html = "<div style='margin-bottom:30px'><p>nothing here</p></div>"

    [block] = parse_game_blocks(html)

    assert block.name == "Unknown Game"
    assert block.historical_low == ""
    assert block.detail_url is None
    assert block.deals == []


def test_blocks_in_document_order():
    html = fragment(
        game_block("B", [deal_row()]),
        game_block("A", [deal_row()]),
        game_block("C", []),
    )

    assert [b.name for b in parse_game_blocks(html)] == ["B", "A", "C"]


def test_empty_document_has_no_games():
    assert parse_game_blocks("") == []
    assert parse_game_blocks("<html><body></body></html>") == []
    assert asyncio.run(extract_games("", FakeSession())) == []


def test_only_direct_child_rows_are_deals():
    html = fragment(
        "<div style='margin-bottom:30px'>"
        "<a style='font-size:1.2em'>Nested</a>"
        "<div style='padding-left:15px'>"
        + deal_row("R$ 1,00") +
        "<p><div>not a row</div></p>"
        "</div></div>"
    )

    [block] = parse_game_blocks(html)
    assert [d.price for d in block.deals] == ["R$ 1,00"]


def test_nested_deal_lists_keep_document_order():
    html = fragment(
        "<div style='margin-bottom:30px'>"
        "<a style='font-size:1.2em'>Nested lists</a>"
        "<div style='padding-left:15px'>"
        + deal_row("R$ 1,00")
        + "<div style='padding-left:15px'>" + deal_row("R$ 2,00") + "</div>"
        + deal_row("R$ 3,00") +
        "</div></div>"
    )

    [block] = parse_game_blocks(html)

    # linha 1, container aninhado (é um div filho), linha 2, linha 3
    assert [d.price for d in block.deals] == ["R$ 1,00", "R$ 2,00", "R$ 2,00", "R$ 3,00"]


def test_extract_games_resolves_thumbnails_per_block():
    html = fragment(
        game_block("Hades II", [deal_row()], href="https://isthereanydeal.com/game/hades-ii/info/"),
        game_block("Celeste", [deal_row()], href="https://isthereanydeal.com/game/celeste/info/"),
    )
    session = FakeSession({
        "https://isthereanydeal.com/game/hades-ii/info/": FakeResponse(body=detail_page("https://img.example/hades.jpg")),
    })

    games = asyncio.run(extract_games(html, session, default_image=DEFAULT_IMAGE))

    assert [g.name for g in games] == ["Hades II", "Celeste"]
    assert games[0].image_url == "https://img.example/hades.jpg"
    assert games[1].image_url == DEFAULT_IMAGE
    assert len(session.calls) == 2


def test_extract_games_without_thumbnails_skips_network():
    html = fragment(game_block("Hades II", [deal_row()]))
    session = FakeSession()

    games = asyncio.run(extract_games(html, session, show_thumbnails=False, default_image=DEFAULT_IMAGE))

    assert games[0].image_url == DEFAULT_IMAGE
    assert session.calls == []


def test_block_without_detail_link_uses_default_image():
    html = fragment(game_block("Hades II", [deal_row()], href=""))
    session = FakeSession()

    games = asyncio.run(extract_games(html, session, default_image=DEFAULT_IMAGE))

    assert games[0].image_url == DEFAULT_IMAGE
    assert session.calls == []
