"""
Unit tests for songcards/text_utils.py

Tests video title and channel name normalization.
"""

import pytest

from songcards.text_utils import (
    clean_artist,
    clean_title,
    normalize,
    pre_clean,
    strip_topic_suffix,
)


class TestNormalize:
    """Tests for the (artist, title) split."""

    @pytest.mark.unit
    def test_separator_title_keeps_edit_parenthetical(self):
        raw = "Artist Name - Song Title (Radio Edit) [Official Video]"
        assert normalize(raw, "Some Channel") == ("Artist Name", "Song Title (Radio Edit)")

    @pytest.mark.unit
    def test_topic_channel_supplies_artist(self):
        assert normalize("Cool Song [Lyrics]", "SomeArtist - Topic") == ("SomeArtist", "Cool Song")

    @pytest.mark.unit
    def test_plain_channel_supplies_artist(self):
        assert normalize("Song (Official Audio)", "Band Name") == ("Band Name", "Song")

    @pytest.mark.unit
    def test_splits_on_first_separator_only(self):
        assert normalize("A - B - C", "x") == ("A", "B - C")

    @pytest.mark.unit
    def test_empty_input_is_valid(self):
        assert normalize("", "") == ("", "")
        assert normalize(None, None) == ("", "")

    @pytest.mark.unit
    def test_channel_handle_prefix_dropped(self):
        assert normalize("Trap Nation | Artist - Song", "Trap Nation") == ("Artist", "Song")

    @pytest.mark.unit
    def test_idempotent_on_clean_titles(self):
        for raw in [
            "Song Title (Radio Edit) [Official Video]",
            'Track "Name" (Official Video) | Label',
            "Another   Track (VIP)",
            "Plain",
        ]:
            clean = clean_title(raw)
            assert clean_title(clean) == clean
            assert normalize(clean, "Artist - Topic") == ("Artist", clean)


class TestCleanArtist:

    @pytest.mark.unit
    def test_removes_brackets(self):
        assert clean_artist("[NCS] Artist Name") == "Artist Name"

    @pytest.mark.unit
    def test_keeps_text_after_first_dash_or_pipe(self):
        assert clean_artist("TrapNation | Artist Name") == "Artist Name"
        assert clean_artist("Label - Artist") == "Artist"
        assert clean_artist("a|b-c") == "b-c"

    @pytest.mark.unit
    def test_plain_name_untouched(self):
        assert clean_artist("  Son Lux ") == "Son Lux"


class TestCleanTitle:

    @pytest.mark.unit
    def test_drops_noise_parentheses(self):
        assert clean_title("Song (Official Video) [HD]") == "Song"
        assert clean_title("Song (feat. Someone)") == "Song"

    @pytest.mark.unit
    def test_keeps_version_parentheses(self):
        assert clean_title("Track (Extended Remix)") == "Track (Extended Remix)"
        assert clean_title("Track (VIP Mix) (Official Audio)") == "Track (VIP Mix)"
        assert clean_title("Track (Radio EDIT)") == "Track (Radio EDIT)"

    @pytest.mark.unit
    def test_drops_trailing_metadata_and_quotes(self):
        assert clean_title('Song "Title" | Label Records') == "Song Title"
        assert clean_title("“Quoted” Song") == "Quoted Song"

    @pytest.mark.unit
    def test_apostrophes_survive(self):
        assert clean_title("Don't Stop Me Now") == "Don't Stop Me Now"


class TestHelpers:

    @pytest.mark.unit
    def test_pre_clean_removes_invisible_characters(self):
        assert pre_clean("Art\u200bist  Name\ufeff") == "Artist Name"
        assert pre_clean("Ｓｏｎｇ") == "Song"

    @pytest.mark.unit
    def test_strip_topic_suffix_only_at_end(self):
        assert strip_topic_suffix("Queen - Topic") == "Queen"
        assert strip_topic_suffix("Topic - Topical") == "Topic - Topical"
