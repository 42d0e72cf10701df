"""
Flyweight pattern: documents sharing font objects.

A font's family and style (intrinsic state) live in one shared, immutable
:class:`FontFlyweight` per ``(family, style)`` key. Size, colour and text
(extrinsic state) stay on each :class:`Document`.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from utils.logging_config import get_logger

logger = get_logger(__name__)

FontKey = Tuple[str, str]

DEFAULT_FONTS: List[FontKey] = [
    ("Arial", "Regular"),
    ("Arial", "Bold"),
    ("Times New Roman", "Regular"),
    ("Times New Roman", "Italic"),
    ("Verdana", "Regular"),
]


@dataclass(frozen=True)
class FontFlyweight:
    family: str
    style: str


class DocumentFontFactory:
    """Creates each font once and hands out the shared instance afterwards."""

    def __init__(self, preload: Optional[Iterable[Sequence[str]]] = None):
        self._fonts: Dict[FontKey, FontFlyweight] = {}
        self.logger = get_logger(self.__class__.__name__)
        for family, style in (DEFAULT_FONTS if preload is None else preload):
            self.get_font(family, style)

    def __len__(self) -> int:
        return len(self._fonts)

    def __contains__(self, key: FontKey) -> bool:
        return key in self._fonts

    @property
    def keys(self) -> List[FontKey]:
        return list(self._fonts)

    def get_font(self, family: str, style: str) -> FontFlyweight:
        key = (family, style)
        font = self._fonts.get(key)
        if font is None:
            font = FontFlyweight(family, style)
            self._fonts[key] = font
            self.logger.debug(f"Created font flyweight {family} {style}")
        return font


class Document:
    """Text plus extrinsic formatting, pointing at a shared font."""

    def __init__(
        self,
        text: str,
        font_family: str,
        font_style: str,
        font_size: int,
        font_color: str,
        font_factory: DocumentFontFactory
    ):
        self.text = text
        self.font_size = font_size
        self.font_color = font_color
        self.font = font_factory.get_font(font_family, font_style)

    def render(self) -> List[str]:
        return [
            f"Rendering text: {self.text}",
            f"Font Family: {self.font.family}",
            f"Font Style: {self.font.style}",
            f"Font Size: {self.font_size}",
            f"Font Color: {self.font_color}",
        ]


def main(preload: Optional[Iterable[Sequence[str]]] = None):
    font_factory = DocumentFontFactory(preload)

    documents = [
        Document("Document 1: Introduction", "Arial", "Regular", 12, "Black", font_factory),
        Document("Document 2: Conclusion", "Times New Roman", "Italic", 14, "Blue", font_factory),
        Document("Document 3: Summary", "Arial", "Bold", 10, "Red", font_factory),
    ]

    print("Rendering Documents:")
    for index, document in enumerate(documents):
        if index:
            print("---")
        for line in document.render():
            print(line)

    print(f"Shared fonts: {len(font_factory)}")


if __name__ == "__main__":
    main()
