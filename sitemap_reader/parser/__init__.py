"""sitemap_reader.parser: Разбор sitemap-документов (<urlset>) и значений <changefreq>."""
