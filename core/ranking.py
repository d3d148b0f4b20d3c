import math
from typing import List
from models.deal import GameDeals
from core.pricing import parse_price

def min_price(game: GameDeals) -> float:
    """Menor preço atual do jogo; infinito se nenhuma oferta tiver preço legível."""
    prices = [parse_price(deal.price) for deal in game.deals]
    prices = [p for p in prices if p is not None]
    return min(prices) if prices else math.inf

def rank_games(games: List[GameDeals]) -> List[GameDeals]:
    # sorted é estável: empates (inclusive dois "infinitos") mantêm a ordem de entrada
    return sorted(games, key=min_price)
