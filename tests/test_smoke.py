import importlib


def test_package_importable():
    songcards = importlib.import_module('songcards')
    assert hasattr(songcards, 'normalize')
    assert hasattr(songcards, 'MusicBrainzClient')
    for name in ('browser', 'card_renderer', 'pipeline', 'review', 'song_store', 'youtube_client'):
        importlib.import_module(f'songcards.{name}')


def _load_cli():
    import sys
    from pathlib import Path
    sys.path.insert(0, str(Path(__file__).parent.parent / 'scripts'))
    return importlib.import_module('build_song_cards')


def test_cli_parses_arguments():
    build_song_cards = _load_cli()

    args = build_song_cards.parse_args(['--resume', 'songs.txt', '--no-browse', '--page-size', '30'])
    assert str(args.resume) == 'songs.txt'
    assert args.no_browse is True
    assert args.page_size == 30


def test_cli_missing_resume_file_exits_cleanly(tmp_path, monkeypatch, caplog):
    import logging
    from songcards.config_manager import Config

    build_song_cards = _load_cli()

    def offline_config():
        config = Config()
        config.musicbrainz_delay = 1.05
        config.page_size = 20
        config.card_icon_path = None
        config.card_background_path = None
        return config

    monkeypatch.setattr(build_song_cards, 'Config', offline_config)
    missing = tmp_path / 'missing.txt'

    with caplog.at_level(logging.ERROR):
        status = build_song_cards.main(['--resume', str(missing), '--output', str(tmp_path / 'cards')])

    assert status == 1
    assert "Aborting" in caplog.text
    assert not (tmp_path / 'cards').exists()
