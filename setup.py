# setup.py
from setuptools import setup, find_packages

setup(
    name="site_ingest",
    version="0.1.0",
    description="Асинхронный обход sitemap и извлечение текста из веб-страниц и документов",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"site_ingest": ["report/templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.2",
        "jinja2>=3.1",
        "lxml>=5.0",
        "pillow>=10.0",
        "pydantic>=2.5",
        "pypdf>=4.0",
        "pytesseract>=0.3.10",
        "python-docx>=1.1",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["site-ingest=site_ingest.cli:cli"],
    },
    python_requires=">=3.11",
)
