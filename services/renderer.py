import html
from typing import List
from models.deal import Deal, GameDeals

PAGE_STYLE = """
    body { font-family: sans-serif; line-height: 1.6; }
    .game { border: 1px solid #ccc; border-radius: 8px; margin: 15px; padding: 15px; display: flex; gap: 15px; }
    .game img { width: 120px; height: auto; border-radius: 4px; align-self: flex-start; }
    .game h2 { margin-top: 0; font-size: 1.1em; }
    .game ul { padding-left: 20px; margin: 0; }
    .game li { margin-bottom: 5px; }
    .game details summary { cursor: pointer; color: #555; }
"""


def _render_deal(deal: Deal) -> str:
    return (
        f"<li><a href='{html.escape(deal.link, quote=True)}'>{html.escape(deal.price)}</a> "
        f"({html.escape(deal.discount)}) - <strong>{html.escape(deal.store)}</strong></li>"
    )


def _render_game(game: GameDeals, collapse_after: int) -> str:
    parts = ["<div class='game'>"]
    parts.append(f"<img src='{html.escape(game.image_url, quote=True)}' alt='' loading='lazy'>")
    parts.append("<div>")
    parts.append(f"<h2>{html.escape(game.name)}</h2>")
    if game.historical_low:
        parts.append(f"<p><strong>Historical Low:</strong> {html.escape(game.historical_low)}</p>")

    if not game.deals:
        parts.append("<p>No current deals available.</p>")
    else:
        visible = game.deals[:collapse_after]
        hidden = game.deals[collapse_after:]
        parts.append("<ul>")
        parts.extend(_render_deal(deal) for deal in visible)
        parts.append("</ul>")
        if hidden:
            # Ofertas além do limite ficam recolhidas
            parts.append(f"<details><summary>+{len(hidden)} more</summary><ul>")
            parts.extend(_render_deal(deal) for deal in hidden)
            parts.append("</ul></details>")

    parts.append("</div></div>")
    return "".join(parts)


def render_games(games: List[GameDeals], collapse_after: int = 5) -> str:
    """Fragmento HTML do widget: um card por jogo, na ordem recebida."""
    if not games:
        return "<div class='waitlist'><p>No deals on your waitlist right now.</p></div>"

    cards = "\n".join(_render_game(game, collapse_after) for game in games)
    return f"<div class='waitlist'>\n{cards}\n</div>"


def render_page(fragment: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Waitlist RSS Feed</title>
<style>{PAGE_STYLE}</style>
</head>
<body>
<h1>Waitlist RSS Feed</h1>
{fragment}
</body>
</html>"""
