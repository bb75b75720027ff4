# File: sitemap_reader/parser/sitemap_parser.py
"""sitemap_reader.parser.sitemap_parser: Разбор sitemap.xml (<urlset>) в ленивую последовательность UrlEntry.

Пример:
```python
from sitemap_reader.parser.sitemap_parser import Document

doc = Document.parse(xml_content)
for entry in doc.iterate():
    print(entry.location, entry.priority)
```
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from lxml import etree

from sitemap_reader.errors import InvalidFrequency, ParseError, UrlsetMissing
from sitemap_reader.logger import logger
from sitemap_reader.models import UrlEntry
from sitemap_reader.parser.frequency import Frequency

__all__ = ["Document", "UrlEntries", "parse_sitemap"]


def _local_name(element: etree._Element) -> str:
    """Имя тега без пространства имён: ``{ns}loc`` -> ``loc``."""
    return etree.QName(element).localname


def _child_elements(element: etree._Element) -> Iterator[etree._Element]:
    """Дочерние элементы без комментариев и processing instructions."""
    return (child for child in element if isinstance(child.tag, str))


def _make_parser(encoding: Optional[str] = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        recover=False,
        resolve_entities="internal",
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def _parse_priority(text: str) -> float:
    """Строгий разбор числа: без пробелов по краям и без '_', которые допускает float()."""
    if "_" in text or text != text.strip():
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)


def _scan_entry(element: etree._Element) -> Optional[UrlEntry]:
    """Собирает UrlEntry из дочерних элементов одной записи.

    Возвращает ``None``, если запись отбрасывается (нет <loc> или их несколько).
    """
    loc: Optional[str] = None
    lastmod: Optional[str] = None
    changefreq: Optional[Frequency] = None
    priority: Optional[float] = None

    for child in _child_elements(element):
        text = child.text
        if not text:
            continue
        name = _local_name(child)

        if name == "loc":
            if loc is not None:
                logger.error("Multiple <loc> in entry.")
                return None
            loc = text
        elif name == "lastmod":
            if lastmod is not None:
                logger.warning("Multiple <lastmod> in entry.")
            lastmod = text
        elif name == "changefreq":
            if changefreq is not None:
                logger.warning("Multiple <changefreq> in entry.")
            try:
                changefreq = Frequency.parse(text)
            except InvalidFrequency:
                logger.warning("<changefreq> has invalid format: %r", text)
        elif name == "priority":
            if priority is not None:
                logger.warning("Multiple <priority> in entry.")
            try:
                value = _parse_priority(text)
            except ValueError:
                logger.warning(
                    "<priority> has invalid format: %r. Expected floating-point number.", text
                )
                continue
            # NaN is rejected here as well
            if 0.0 <= value <= 1.0:
                priority = value
            else:
                logger.warning("<priority> %s is out of range", value)

    if loc is None:
        logger.error("Expected <loc>, but found none.")
        return None

    return UrlEntry(
        location=loc,
        last_modified=lastmod,
        change_frequency=changefreq,
        priority=priority,
    )


class UrlEntries:
    """Ленивая последовательность записей <urlset>.

    Каждый обход заново разбирает дерево: результаты не кешируются, поэтому
    повторный обход даёт те же записи (и те же сообщения в логе). Поддерживает
    ``iter()`` и ``reversed()``; обходы независимы друг от друга.
    """

    __slots__ = ("_urlset",)

    def __init__(self, urlset: etree._Element) -> None:
        self._urlset = urlset

    def _entries(self, candidates: Iterable[etree._Element]) -> Iterator[UrlEntry]:
        for candidate in candidates:
            entry = _scan_entry(candidate)
            if entry is not None:
                yield entry

    def __iter__(self) -> Iterator[UrlEntry]:
        return self._entries(_child_elements(self._urlset))

    def __reversed__(self) -> Iterator[UrlEntry]:
        return self._entries(reversed(list(_child_elements(self._urlset))))

    def __repr__(self) -> str:
        candidates = sum(1 for _ in _child_elements(self._urlset))
        return f"<UrlEntries candidates={candidates}>"


class Document:
    """Разобранный sitemap-документ. Дерево lxml не изменяется после разбора."""

    __slots__ = ("_root",)

    def __init__(self, root: Optional[etree._Element]) -> None:
        self._root = root

    @classmethod
    def parse(cls, xml_content: Union[str, bytes]) -> Document:
        """Разбирает XML по протоколу https://www.sitemaps.org/protocol.html.

        Args:
            xml_content: содержимое sitemap.xml (str или bytes).

        Returns:
            Document с деревом lxml.

        Raises:
            ParseError: XML некорректен (незакрытые теги, неверная кодировка...).
        """
        if isinstance(xml_content, str):
            try:
                data = xml_content.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise ParseError(f"Invalid encoding: {exc.reason} at position {exc.start}") from exc
            parser = _make_parser("utf-8")
        else:
            data = xml_content
            parser = _make_parser()

        try:
            root = etree.fromstring(data, parser=parser)
        except etree.XMLSyntaxError as exc:
            line, column = exc.position
            raise ParseError(f"Invalid XML: {exc.msg}", line=line, column=column) from exc
        return cls(root)

    @property
    def root_name(self) -> Optional[str]:
        """Локальное имя корневого элемента, если он есть."""
        if self._root is None:
            return None
        return _local_name(self._root)

    def iterate(self) -> UrlEntries:
        """Возвращает ленивую последовательность UrlEntry.

        Ошибки отдельных записей не прерывают обход: они пишутся в лог
        (:mod:`sitemap_reader.logger`), а сама запись пропускается.

        Raises:
            UrlsetMissing: нет корневого элемента или он не <urlset>.
        """
        if self._root is None:
            raise UrlsetMissing()
        name = _local_name(self._root)
        if name != "urlset":
            logger.error("Expected <urlset> but got <%s>", self._root.tag)
            raise UrlsetMissing(name)
        return UrlEntries(self._root)


def parse_sitemap(xml_content: Union[str, bytes]) -> UrlEntries:
    """Shortcut: ``Document.parse(xml_content).iterate()``."""
    return Document.parse(xml_content).iterate()
