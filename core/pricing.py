import re
from typing import Optional

def parse_price(price_text: Optional[str]) -> Optional[float]:
    """
    Converte um preço formatado em pt-BR ("R$ 1.234,56") para float.

    Ponto é separador de milhar e vírgula é decimal. Retorna None quando o
    texto não é um número (ex: "N/A"); isso é esperado, não é erro.
    """
    if not price_text:
        return None

    clean_text = re.sub(r'[^\d,.]', '', price_text)
    clean_text = clean_text.replace('.', '').replace(',', '.').strip()
    if not clean_text:
        return None

    try:
        return float(clean_text)
    except ValueError:
        return None
