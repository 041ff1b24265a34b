"""
Crawl policy (robots.txt) rendering.
"""

from typing import Optional

from app.config import settings

DISALLOWED_PREFIXES = ("/api/", "/_next/", "/admin/")
ALLOWED_PAGES = ("/", "/resume-builder", "/resume-tips", "/ats-optimization")


def build_robots_txt(base_url: str, crawl_delay: Optional[int] = None) -> str:
    """Render the crawl policy with a sitemap reference under `base_url`."""
    if crawl_delay is None:
        crawl_delay = settings.robots_crawl_delay_sec

    lines = [
        "User-agent: *",
        "Allow: /",
        "",
        "# Sitemap",
        f"Sitemap: {base_url}/sitemap.xml",
        "",
        "# Crawl-delay",
        f"Crawl-delay: {crawl_delay}",
        "",
        "# Disallow admin and API routes",
        *(f"Disallow: {prefix}" for prefix in DISALLOWED_PREFIXES),
        "",
        "# Allow important pages",
        *(f"Allow: {page}" for page in ALLOWED_PAGES),
    ]
    return "\n".join(lines)
