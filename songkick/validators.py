from typing import Any

import requests

from ._types import ResultsPageJson
from .exceptions import ApiError, UnexpectedResponse
from .util import redact_api_key


def songkick_results_page(response: requests.Response) -> ResultsPageJson:
    """Check api response and extract its results page.

    :raises ApiError: Http error or api reported an error.
    :raises UnexpectedResponse: Response is not a songkick results page.
    """
    url = redact_api_key(str(response.url))

    try:
        body: Any = response.json()
    except ValueError as e:
        if not response.ok:
            raise ApiError(
                response.reason or 'Request failed',
                url,
                response.status_code,
            ) from e
        raise UnexpectedResponse(f'Response is not json: {url}') from e

    if not isinstance(body, dict) or not isinstance(
        page := body.get('resultsPage'), dict
    ):
        raise UnexpectedResponse(f'No resultsPage in response: {url}')

    if page.get('status') == 'error' or not response.ok:
        error = page.get('error')
        if isinstance(error, dict):
            error = error.get('message')
        message = (
            error
            if isinstance(error, str) and error
            else response.reason or 'Request failed'
        )
        raise ApiError(message, url, response.status_code)

    if not isinstance(page.get('results'), dict):
        raise UnexpectedResponse(f'No results in response: {url}')

    return page
