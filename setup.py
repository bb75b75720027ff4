# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemap_reader",
    version="0.1.0",
    description="Разбор sitemap.xml (<urlset>) в ленивую последовательность записей",
    packages=find_packages(exclude=["tests", "tests.*"]),  # найдёт sitemap_reader и подпакеты
    package_data={"sitemap_reader": ["templates/*.j2"]},
    install_requires=[
        "lxml>=5.0",
        "click>=8.2",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "aiohttp>=3.9",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["sitemap-reader=sitemap_reader.cli:cli"],
    },
    python_requires=">=3.11",
)
