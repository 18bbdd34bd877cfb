import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from songkick.config import SongKickOpts

BASE_PATH = 'http://api.songkick.com/api/3.0'


def make_response(
    body: Any,
    status_code: int = 200,
    url: str = f'{BASE_PATH}/events.json?apikey=DUMMY',
    reason: str = 'OK',
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response._content = (
        body if isinstance(body, bytes) else json.dumps(body).encode()
    )
    return response


def results_page(results: dict[str, Any], **extra: Any) -> dict[str, Any]:
    return {'resultsPage': {'status': 'ok', 'results': results, **extra}}


@pytest.fixture
def sk_opts() -> SongKickOpts:
    return SongKickOpts('DUMMY', BASE_PATH)


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def event_json() -> dict[str, Any]:
    return {
        'id': 11129128,
        'displayName': 'Radiohead at O2 Arena (June 6, 2017)',
        'type': 'Concert',
        'status': 'ok',
        'uri': 'http://www.songkick.com/concerts/11129128',
        'start': {'date': '2017-06-06', 'time': '19:00:00'},
        'venue': {
            'id': 17522,
            'displayName': 'O2 Arena',
            'lat': 51.5029,
            'lng': 0.00319,
            'metroArea': {'id': 24426, 'displayName': 'London'},
        },
        'performance': [
            {
                'id': 21579303,
                'displayName': 'Radiohead',
                'billing': 'headline',
                'artist': {'id': 253846, 'displayName': 'Radiohead'},
            }
        ],
    }
