"""
Junção dos jogos vindos de vários itens do feed.
Um mesmo jogo aparece em mais de um item quando tem ofertas novas em dias diferentes.
"""

from typing import Dict, Iterable, List
from models.deal import GameDeals

def merge_games(fragments: Iterable[List[GameDeals]]) -> List[GameDeals]:
    """
    Agrupa os jogos pelo nome (comparação exata), concatenando as ofertas.

    Nome, imagem e menor preço histórico ficam os da primeira ocorrência.
    A ordem de saída é a ordem em que cada nome apareceu pela primeira vez.

    Args:
        fragments: Lista de jogos de cada item do feed, na ordem do feed

    Returns:
        Jogos únicos, na ordem da primeira aparição
    """
    games: Dict[str, GameDeals] = {}
    for fragment_games in fragments:
        for game in fragment_games:
            existing = games.get(game.name)
            if existing is None:
                games[game.name] = game.model_copy(update={"deals": list(game.deals)})
            else:
                existing.deals.extend(game.deals)
    return list(games.values())
