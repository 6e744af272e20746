"""
Tests for SVG card sheet rendering.
"""
import csv

import pytest

from songcards.card_renderer import CARDS_PER_SHEET, CardRenderer, read_asset
from songcards.exceptions import AssetError, ConfigurationError


class TestAssets:

    @pytest.mark.unit
    def test_missing_asset_is_fatal(self, tmp_path):
        with pytest.raises(AssetError):
            CardRenderer(icon_path=str(tmp_path / "missing.svg"))

    @pytest.mark.unit
    def test_asset_error_is_configuration_error(self):
        assert issubclass(AssetError, ConfigurationError)

    @pytest.mark.unit
    def test_xml_declaration_stripped(self, tmp_path):
        icon = tmp_path / "icon.svg"
        icon.write_text('<?xml version="1.0" encoding="UTF-8"?>\n<circle r="5"/>\n', encoding="utf-8")
        assert read_asset(str(icon)) == '<circle r="5"/>'

    @pytest.mark.unit
    def test_no_asset_configured(self):
        assert read_asset(None) == ""


class TestRender:

    @pytest.mark.unit
    def test_card_front_escapes_text(self, make_song):
        svg = CardRenderer().card_front(make_song(artist="Simon & Garfunkel", title="<Mrs. Robinson>", year=1968))
        assert "Simon &amp; Garfunkel" in svg
        assert "&lt;Mrs. Robinson&gt;" in svg
        assert ">1968</text>" in svg

    @pytest.mark.unit
    def test_icon_embedded(self, tmp_path, make_song):
        icon = tmp_path / "icon.svg"
        icon.write_text('<circle r="5"/>', encoding="utf-8")
        svg = CardRenderer(icon_path=str(icon)).card_front(make_song())
        assert '<circle r="5"/>' in svg

    @pytest.mark.unit
    def test_sheets_and_index(self, tmp_path, make_song):
        songs = [make_song(source_id=f"v{i}", year=1960 + i) for i in range(CARDS_PER_SHEET + 1)]
        sheets = CardRenderer().render(songs, tmp_path / "out")

        assert [p.name for p in sheets] == ["cards_001.svg", "cards_002.svg"]
        first = sheets[0].read_text(encoding="utf-8")
        assert first.startswith('<svg viewBox="0 0 210 297"')
        assert first.count('<svg viewBox="0 0 100 100">') == CARDS_PER_SHEET
        assert sheets[1].read_text(encoding="utf-8").count('<svg viewBox="0 0 100 100">') == 1

        with (tmp_path / "out" / "cards.csv").open(encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == len(songs)
        assert rows[0]["link"] == "https://music.youtube.com/watch?v=v0"
