"""Crawler-facing sitemap and robots content built from the calculator catalog."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional
from xml.sax.saxutils import escape

from .calculator_catalog import CALCULATOR_CATALOG

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, changefreq, priority)
STATIC_PAGES: tuple[tuple[str, str, float], ...] = (
    ("/", "weekly", 1.0),
    ("/about-us", "yearly", 0.5),
    ("/contact-us", "yearly", 0.5),
    ("/faq", "monthly", 0.6),
    ("/privacy-policy", "yearly", 0.3),
    ("/terms-and-conditions", "yearly", 0.3),
    ("/disclaimer", "yearly", 0.3),
)
CALCULATOR_CHANGEFREQ = "monthly"
CALCULATOR_PRIORITY = 0.8


@dataclass(frozen=True)
class SitemapEntry:
    loc: str
    lastmod: str
    changefreq: str
    priority: float


def _join(base_url: str, path: str) -> str:
    base = (base_url or "").rstrip("/")
    if path == "/":
        return base or "/"
    return f"{base}{path}"


def build_sitemap_entries(base_url: str, *, today: Optional[date] = None) -> List[SitemapEntry]:
    """Static pages first, then every catalog calculator, all stamped with ``today``."""
    stamp = (today or date.today()).isoformat()
    entries = [
        SitemapEntry(_join(base_url, path), stamp, changefreq, priority)
        for path, changefreq, priority in STATIC_PAGES
    ]
    entries.extend(
        SitemapEntry(_join(base_url, f"/{tool['slug']}"), stamp, CALCULATOR_CHANGEFREQ, CALCULATOR_PRIORITY)
        for tool in CALCULATOR_CATALOG
    )
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    lines = ['<?xml version="1.0" encoding="UTF-8"?>', f'<urlset xmlns="{SITEMAP_NAMESPACE}">']
    for entry in entries:
        lines.extend(
            [
                "  <url>",
                f"    <loc>{escape(entry.loc)}</loc>",
                f"    <lastmod>{entry.lastmod}</lastmod>",
                f"    <changefreq>{entry.changefreq}</changefreq>",
                f"    <priority>{entry.priority:.1f}</priority>",
                "  </url>",
            ]
        )
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def render_robots_txt(base_url: str) -> str:
    return "\n".join(
        [
            "User-agent: *",
            "Allow: /",
            "Disallow: /api/",
            "",
            f"Sitemap: {_join(base_url, '/sitemap.xml')}",
            "",
        ]
    )
