import logging

import pytest

import songkick.client
from songkick.__main__ import _main_cli

from .conftest import make_response, results_page


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_url_command(capsys):
    exit_code = _main_cli(
        [
            'url',
            '--api-key', 'DUMMY',
            '--min-date', '2017-06-06',
            '--artist-name', 'Radiohead',
            '--page', '2',
            '--per-page', '25',
            '--order', 'desc',
        ]
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        'http://api.songkick.com/api/3.0/events.json?apikey=DUMMY'
        '&min_date=2017%2D06%2D06&artist_name=Radiohead'
        '&page=2&per_page=25&order=desc'
    )


def test_url_command_without_options(capsys, monkeypatch):
    monkeypatch.setenv('SONGKICK_API_KEY', 'FROM_ENV')

    assert _main_cli(['url']) == 0
    assert capsys.readouterr().out.strip() == (
        'http://api.songkick.com/api/3.0/events.json?apikey=FROM_ENV'
    )


def test_missing_api_key(capsys, monkeypatch):
    monkeypatch.delenv('SONGKICK_API_KEY', raising=False)

    assert _main_cli(['url']) == 1
    assert capsys.readouterr().out == ''


def test_events_command(capsys, monkeypatch, session, event_json):
    session.get.return_value = make_response(
        results_page({'event': [event_json]}, totalEntries=1)
    )
    monkeypatch.setattr(songkick.client.requests, 'Session', lambda: session)

    assert _main_cli(['events', '-k', 'DUMMY', '-a', 'Radiohead']) == 0
    assert capsys.readouterr().out.strip() == (
        '2017-06-06 Radiohead at O2 Arena (June 6, 2017)'
    )
    session.close.assert_called_once_with()


def test_invalid_order():
    with pytest.raises(SystemExit):
        _main_cli(['url', '-k', 'DUMMY', '--order', 'sideways'])


def test_api_error_logged_once(capsys, monkeypatch, session):
    session.get.return_value = make_response(
        {'resultsPage': {'status': 'error', 'error': 'Invalid apikey'}},
        status_code=403,
        reason='Forbidden',
    )
    monkeypatch.setattr(songkick.client.requests, 'Session', lambda: session)

    assert _main_cli(['events', '-k', 'DUMMY']) == 1

    err = capsys.readouterr().err
    assert err.count(', ERROR, ') == 1
    assert 'Invalid apikey' in err
    assert 'DUMMY' not in err


def test_missing_api_key_is_logged(capsys, monkeypatch):
    monkeypatch.delenv('SONGKICK_API_KEY', raising=False)

    assert _main_cli(['events']) == 1
    assert 'SONGKICK_API_KEY is not set' in capsys.readouterr().err
