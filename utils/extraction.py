"""
Extração de campos com valor padrão documentado.

Todo campo lido do HTML do feed passa por aqui: se o elemento (ou o atributo)
não existir, devolve o default em vez de levantar erro. Um campo faltando nunca
derruba o bloco inteiro.
"""

from typing import Callable, Optional
from bs4 import Tag

# Defaults usados pelos extratores de jogo e de oferta
NOT_AVAILABLE = "N/A"
NO_LINK = "#"
UNKNOWN_STORE = "Unknown Store"
UNKNOWN_GAME = "Unknown Game"
NO_HISTORICAL_LOW = ""


def text_or_default(element: Optional[Tag], default: str, strip: bool = True,
                    transform: Optional[Callable[[str], str]] = None) -> str:
    """
    Texto visível de um elemento, ou o default se o elemento não existir.

    Args:
        element: Resultado de um find() (pode ser None)
        default: Valor devolvido quando o elemento está ausente
        strip: Remove espaços nas pontas
        transform: Função aplicada ao texto antes do strip (ex: remover um rótulo)
    """
    if element is None:
        return default
    text = element.get_text()
    if transform:
        text = transform(text)
    return text.strip() if strip else text


def attr_or_default(element: Optional[Tag], attr: str, default: str) -> str:
    """Valor de um atributo, ou o default se o elemento ou o atributo não existir."""
    if element is None:
        return default
    value = element.get(attr)
    if value is None:
        return default
    if isinstance(value, list):
        # bs4 devolve lista para atributos multi-valor (ex: class)
        value = " ".join(value)
    return value
