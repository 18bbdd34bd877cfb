import re
from string import ascii_letters, digits

from .constants import API_KEY_PARAM

_UNESCAPED = frozenset((ascii_letters + digits).encode())

# Key value ends at the next parameter, quote, whitespace or closing paren.
_API_KEY_REGEX = re.compile(rf"([?&]{API_KEY_PARAM}=)[^&'\"\s)]*")


def encode(value: str) -> str:
    """Percent-encode everything except ascii letters and digits.

    Stricter than :func:`urllib.parse.quote`: punctuation such as ``-``
    and ``.`` is escaped too, so ``2017-06-06`` becomes ``2017%2D06%2D06``.

    :param str value: Raw query value.
    :return str: Escaped query value.
    """
    return ''.join(
        chr(byte) if byte in _UNESCAPED else f'%{byte:02X}'
        for byte in value.encode('utf-8')
    )


def redact_api_key(url: str) -> str:
    """Hide api key value in url so it can be logged.

    :param str url: Request url.
    :return str: Same url with api key value replaced by ``***``.
    """
    return _API_KEY_REGEX.sub(r'\g<1>***', url)
