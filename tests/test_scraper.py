import pytest
import requests
from bs4 import BeautifulSoup

from alchemypath.scraper import (
    ElementInfo,
    ScrapeError,
    clean_text,
    extract_tier,
    parse_elements,
    parse_recipes,
    scrape_alchemy_elements,
)

PAGE = """
<html><body>
<h2><span class="mw-headline" id="Starting_elements">Starting elements</span></h2>
<h3><span class="mw-headline" id="Tier_1_elements">Tier 1 elements</span></h3>
<table>
<tr><th>Element</th><th>Recipes</th></tr>
<tr><td><a href="/wiki/Steam">Steam</a></td>
<td><ul><li><a>Water</a> + <a>Fire</a></li><li><a>Air</a></li></ul></td></tr>
<tr><td>  Mud  </td><td><ul><li><a>Water</a> + <a>Earth</a></li></ul></td></tr>
<tr><td><a>Nothing</a></td><td><ul></ul></td></tr>
<tr><td>Lonely</td></tr>
</table>
<h3><span class="mw-headline" id="Tier_2_elements">Tier 2 elements</span></h3>
<p>Some text</p>
<table>
<tr><th>Element</th><th>Recipes</th></tr>
<tr><td><a>Cloud</a></td>
<td><ul><li><a>Steam</a> + <a>Air</a></li><li><a>Water</a> + <a>Air</a></li></ul></td></tr>
</table>
<h3><span class="mw-headline" id="Tier_3_elements">Tier 3 elements</span></h3>
<h3>Unrelated</h3>
<table>
<tr><th>Element</th><th>Recipes</th></tr>
<tr><td>Ghost</td><td><ul><li><a>Mud</a> + <a>Cloud</a></li></ul></td></tr>
</table>
</body></html>
"""


class _FakeResponse:
    def __init__(self, status_code, text="", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.reason = reason


class _FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def test_clean_text_collapses_whitespace():
    assert clean_text("  Water \n\t  Fire  ") == "Water Fire"


def test_extract_tier_reads_number():
    assert extract_tier("Tier_12_elements") == 12


def test_extract_tier_without_number_raises():
    with pytest.raises(ValueError):
        extract_tier("Starting_elements")


def test_parse_recipes_keeps_only_pairs():
    cell = BeautifulSoup(
        "<td><ul><li><a> Big  Water</a><a>Fire</a></li>"
        "<li><a>Air</a></li><li><a>A</a><a>B</a><a>C</a></li></ul></td>",
        "html.parser",
    ).td
    assert parse_recipes(cell) == [["big water", "fire"]]


def test_parse_elements_keeps_base_elements():
    elements = parse_elements(PAGE)
    for base in ("air", "earth", "fire", "water"):
        assert elements[base] == ElementInfo(tier=0, recipes=[])


def test_parse_elements_reads_tiers_and_recipes():
    elements = parse_elements(PAGE)
    assert elements["steam"] == ElementInfo(tier=1, recipes=[["water", "fire"]])
    assert elements["mud"] == ElementInfo(tier=1, recipes=[["water", "earth"]])
    assert elements["cloud"] == ElementInfo(
        tier=2, recipes=[["steam", "air"], ["water", "air"]]
    )


def test_parse_elements_skips_rows_without_recipes():
    elements = parse_elements(PAGE)
    assert "nothing" not in elements
    assert "lonely" not in elements


def test_parse_elements_stops_at_next_heading():
    elements = parse_elements(PAGE)
    assert "ghost" not in elements
    assert set(elements) == {"air", "earth", "fire", "water", "steam", "mud", "cloud"}


def test_scrape_uses_session_and_parses():
    session = _FakeSession(_FakeResponse(200, PAGE))
    elements = scrape_alchemy_elements(session)
    assert elements == parse_elements(PAGE)
    url, kwargs = session.calls[0]
    assert "Elements_(Little_Alchemy_2)" in url
    assert kwargs["headers"]["User-Agent"].startswith("Mozilla/5.0")


def test_scrape_bad_status_raises():
    session = _FakeSession(_FakeResponse(404, "", "Not Found"))
    with pytest.raises(ScrapeError, match="404"):
        scrape_alchemy_elements(session)


def test_scrape_network_failure_raises():
    session = _FakeSession(error=requests.ConnectionError("down"))
    with pytest.raises(ScrapeError, match="error fetching URL"):
        scrape_alchemy_elements(session)