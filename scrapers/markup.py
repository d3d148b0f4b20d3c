"""
Predicados de marcação do feed de waitlist do IsThereAnyDeal.

O HTML da descrição de cada item não tem classes nem ids: os elementos só se
distinguem pelo atributo `style` inline. Cada predicado abaixo casa uma tag por
um trecho exato desse style. Se o IsThereAnyDeal mudar a formatação, é só aqui
que precisa mexer.
"""

from typing import Iterator, Optional
from bs4 import BeautifulSoup, Tag


class StyleMatch:
    """Casa elementos `tag` cujo atributo style contém `fragment`."""

    def __init__(self, tag: str, fragment: str):
        self.tag = tag
        self.fragment = fragment

    def matches(self, element) -> bool:
        if not isinstance(element, Tag) or element.name != self.tag:
            return False
        style = element.get("style")
        return bool(style) and self.fragment in style

    def first(self, root: Tag) -> Optional[Tag]:
        return root.find(self.matches)

    def all(self, root: Tag) -> Iterator[Tag]:
        return iter(root.find_all(self.matches))

    def __repr__(self):
        return f"{self.tag}[style*='{self.fragment}']"


GAME_BLOCK = StyleMatch("div", "margin-bottom:30px")
GAME_NAME = StyleMatch("a", "font-size:1.2em")
HISTORICAL_LOW = StyleMatch("div", "font-size: 0.9em")
DEAL_LIST = StyleMatch("div", "padding-left:15px")
PRICE_LINK = StyleMatch("a", "font-size:1.1em")
DISCOUNT = StyleMatch("span", "min-width:2.8em")

HISTORICAL_LOW_LABEL = "Historical low: "


def deal_rows(block: Tag) -> Iterator[Tag]:
    """
    Todo `div` filho direto de um container de ofertas, em ordem de documento.

    Uma única passada pelo bloco: com containers aninhados, as linhas saem
    intercaladas na ordem em que aparecem, não agrupadas por container.
    """
    for element in block.find_all("div"):
        if DEAL_LIST.matches(element.parent):
            yield element


def parse_html(html_content: str) -> BeautifulSoup:
    return BeautifulSoup(html_content or "", "html.parser")
