"""Scraping of element tiers and recipes from the wiki element list."""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass, field
from typing import Optional

import requests
from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)

ELEMENTS_URL = "https://little-alchemy.fandom.com/wiki/Elements_(Little_Alchemy_2)"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
BASE_ELEMENT_NAMES = ("air", "earth", "fire", "water")

_WHITESPACE = re.compile(r"\s+")
_TIER = re.compile(r"Tier_(\d+)")


class ScrapeError(RuntimeError):
    """Raised when the element page cannot be fetched or parsed."""


@dataclass
class ElementInfo:
    """Tier of an element and the ingredient pairs that produce it."""

    tier: int
    recipes: list[list[str]] = field(default_factory=list)


def clean_text(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def extract_tier(heading_id: str) -> int:
    """Return the tier number in a heading id such as ``Tier_3_elements``."""
    match = _TIER.search(heading_id)
    if match is None:
        raise ValueError(f"no tier number found in: {heading_id}")
    return int(match.group(1))


def parse_recipes(recipe_cell: Tag) -> list[list[str]]:
    """Return the two-ingredient recipes listed in a table cell."""
    recipes = []
    for item in recipe_cell.find_all("li"):
        ingredients = [
            name
            for name in (clean_text(link.get_text()).lower() for link in item.find_all("a"))
            if name
        ]
        if len(ingredients) == 2:
            recipes.append(ingredients)
    return recipes


def _table_after(heading: Tag) -> Optional[Tag]:
    for sibling in heading.find_next_siblings():
        if sibling.name == "table":
            return sibling
        if sibling.name in ("h2", "h3"):
            return None
    return None


def _element_name(cell: Tag) -> str:
    links = cell.find_all("a")
    if links:
        text = "".join(link.get_text() for link in links)
    else:
        text = cell.get_text()
    return clean_text(text).lower()


def parse_elements(html: str) -> dict[str, ElementInfo]:
    """Extract every element, its tier and recipes from the page's HTML."""
    soup = BeautifulSoup(html, "html.parser")
    elements = {name: ElementInfo(tier=0, recipes=[]) for name in BASE_ELEMENT_NAMES}

    for heading in soup.find_all(["h2", "h3"]):
        headline = heading.select_one("span.mw-headline")
        if headline is None:
            continue
        heading_id = headline.get("id")
        if not heading_id or not heading_id.startswith("Tier_"):
            continue

        try:
            tier = extract_tier(heading_id)
        except ValueError as exc:
            logger.warning("%s", exc)
            continue

        logger.info("Processing Tier %d elements...", tier)

        table = _table_after(heading)
        if table is None:
            logger.warning("No table found for Tier %d", tier)
            continue

        for row in table.find_all("tr")[1:]:
            cells = row.find_all("td")
            if len(cells) < 2:
                continue
            name = _element_name(cells[0])
            if not name:
                continue
            recipes = parse_recipes(cells[1])
            if recipes:
                elements[name] = ElementInfo(tier=tier, recipes=recipes)

    return elements


def scrape_alchemy_elements(
    session: Optional[requests.Session] = None,
) -> dict[str, ElementInfo]:
    """Fetch the element page and return every element found on it."""
    start = time.perf_counter()
    client = session if session is not None else requests.Session()

    try:
        response = client.get(ELEMENTS_URL, headers={"User-Agent": USER_AGENT}, timeout=60)
    except requests.RequestException as exc:
        raise ScrapeError(f"error fetching URL: {exc}") from exc

    if response.status_code != 200:
        raise ScrapeError(f"status code error: {response.status_code} {response.reason}")

    try:
        elements = parse_elements(response.text)
    except Exception as exc:
        raise ScrapeError(f"error parsing HTML: {exc}") from exc

    logger.info("Scraping completed in %.3fs", time.perf_counter() - start)
    logger.info(
        "Found %d elements (including %d base elements)",
        len(elements),
        len(BASE_ELEMENT_NAMES),
    )
    return elements