import pytest

from songcards.models import Entry, RecordingMatch, Song


class TestSong:

    @pytest.mark.unit
    def test_from_entry_defaults_to_publish_year(self):
        entry = Entry(id="abc", raw_title="A - B", channel_name="A", published_year=2016)
        song = Song.from_entry(entry, "A", "B")
        assert song.release_year == 2016
        assert song.fallback_year == 2016
        assert song.source_id == "abc"
        assert song.raw_title == "A - B"
        assert song.matched_title is None

    @pytest.mark.unit
    def test_source_id_and_raw_title_are_write_once(self, make_song):
        song = make_song()
        with pytest.raises(AttributeError):
            song.source_id = "other"
        with pytest.raises(AttributeError):
            song.raw_title = "other"

    @pytest.mark.unit
    def test_other_fields_are_editable(self, make_song):
        song = make_song()
        song.artist = "New"
        song.title = "Newer"
        song.release_year = 1999
        assert (song.artist, song.title, song.release_year) == ("New", "Newer", 1999)

    @pytest.mark.unit
    def test_apply_match_and_fallback(self, make_song):
        song = make_song(year=2015, fallback=2015)
        song.apply_match(RecordingMatch(1977, "ABBA - Take a Chance on Me"))
        assert (song.release_year, song.matched_title) == (1977, "ABBA - Take a Chance on Me")
        song.use_fallback_year()
        assert song.release_year == 2015

    @pytest.mark.unit
    def test_link(self, make_song):
        assert make_song(source_id="dQw4w9WgXcQ").link == "https://music.youtube.com/watch?v=dQw4w9WgXcQ"


class TestRecordingMatch:

    @pytest.mark.unit
    def test_sort_key_orders_by_year_then_title(self):
        matches = [RecordingMatch(2001, "B"), RecordingMatch(2000, "Z"), RecordingMatch(2001, "A")]
        assert [m.canonical_title for m in sorted(matches, key=RecordingMatch.sort_key)] == ["Z", "A", "B"]
