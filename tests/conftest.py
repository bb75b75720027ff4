# File: tests/conftest.py
import logging

import pytest

from sitemap_reader.logger import LOGGER_NAME

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


@pytest.fixture(autouse=True)
def reset_logger():
    """
    The CLI attaches its own handlers and disables propagation;
    restore the library defaults so that caplog sees every record.
    """
    lg = logging.getLogger(LOGGER_NAME)
    yield lg
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
    lg.propagate = True
    lg.setLevel(logging.NOTSET)


@pytest.fixture()
def make_sitemap():
    """
    Build a <urlset> document from raw <url> bodies.
    """

    def _make(*bodies: str, namespace: bool = True) -> str:
        xmlns = f' xmlns="{SITEMAP_NS}"' if namespace else ""
        urls = "\n".join(f"  <url>{body}</url>" for body in bodies)
        return f'<?xml version="1.0" encoding="UTF-8"?>\n<urlset{xmlns}>\n{urls}\n</urlset>\n'

    return _make


@pytest.fixture()
def sample_sitemap(make_sitemap) -> str:
    """
    Three valid entries with various optional fields.
    """
    return make_sitemap(
        "<loc>https://example.com/</loc><lastmod>2024-01-01</lastmod>"
        "<changefreq>daily</changefreq><priority>1.0</priority>",
        "<loc>https://example.com/about</loc><changefreq>monthly</changefreq>",
        "<loc>https://example.com/blog</loc><priority>0.5</priority>",
    )


@pytest.fixture()
def sitemap_file(tmp_path, sample_sitemap):
    path = tmp_path / "sitemap.xml"
    path.write_text(sample_sitemap, encoding="utf-8")
    return path
