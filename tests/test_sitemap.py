from datetime import date

from allwayscalc.services.calculator_catalog import CALCULATOR_CATALOG
from allwayscalc.services.sitemap_service import (
    STATIC_PAGES,
    SitemapEntry,
    build_sitemap_entries,
    render_robots_txt,
    render_sitemap_xml,
)


def test_entries_cover_static_pages_and_every_calculator():
    entries = build_sitemap_entries("https://www.allwayscalc.com/", today=date(2024, 6, 1))

    assert len(entries) == len(STATIC_PAGES) + len(CALCULATOR_CATALOG)
    assert entries[0] == SitemapEntry("https://www.allwayscalc.com", "2024-06-01", "weekly", 1.0)
    locs = {entry.loc for entry in entries}
    assert "https://www.allwayscalc.com/privacy-policy" in locs
    assert "https://www.allwayscalc.com/modulo-calculator" in locs
    calculator = next(e for e in entries if e.loc.endswith("/bmi-calculator"))
    assert (calculator.changefreq, calculator.priority) == ("monthly", 0.8)


def test_render_sitemap_xml_escapes_and_formats():
    xml = render_sitemap_xml([SitemapEntry("https://example.com/?a=1&b=2", "2024-06-01", "yearly", 0.3)])

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<loc>https://example.com/?a=1&amp;b=2</loc>" in xml
    assert "<priority>0.3</priority>" in xml
    assert xml.endswith("</urlset>\n")


def test_robots_txt():
    robots = render_robots_txt("https://www.allwayscalc.com")

    assert "Disallow: /api/" in robots
    assert "Sitemap: https://www.allwayscalc.com/sitemap.xml" in robots


def test_sitemap_route(client):
    response = client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.mimetype == "application/xml"
    body = response.get_data(as_text=True)
    assert f"<lastmod>{date.today().isoformat()}</lastmod>" in body
    assert "<loc>https://www.allwayscalc.com/tip-calculator</loc>" in body
    assert "/api/" not in body


def test_sitemap_route_uses_cache(make_app):
    app = make_app(CACHE_TYPE="SimpleCache")
    from allwayscalc.blueprints.core.routes import SITEMAP_CACHE_KEY
    from allwayscalc.extensions import cache

    with app.app_context():
        cache.set(SITEMAP_CACHE_KEY, "<urlset>cached</urlset>")

    response = app.test_client().get("/sitemap.xml")

    assert response.get_data(as_text=True) == "<urlset>cached</urlset>"


def test_robots_route(client):
    response = client.get("/robots.txt")

    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    assert "Sitemap: https://www.allwayscalc.com/sitemap.xml" in response.get_data(as_text=True)
