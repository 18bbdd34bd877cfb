import argparse
import logging
import sys
from collections.abc import Sequence

from songkick.client import SongKick
from songkick.config import SongKickOpts
from songkick.constants import DEFAULT_PER_PAGE, SONGKICK_BASE_URL
from songkick.decorators import log_time
from songkick.endpoints import event_search_url
from songkick.enums import Sort
from songkick.exceptions import ApiError, SongKickError, UnexpectedResponse
from songkick.options import FilterBuilder, Options, OptionsBuilder
from songkick.util import redact_api_key

logger = logging.getLogger('songkick')


def _construct_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='songkick')
    parser.add_argument(
        'command',
        choices=('url', 'events'),
        help='Print event search url or run the search',
    )
    parser.add_argument(
        '--api-key',
        '-k',
        help='Songkick api key. Default is $SONGKICK_API_KEY',
    )
    parser.add_argument('--base-path', default=SONGKICK_BASE_URL)
    parser.add_argument('--artist-name', '-a')
    parser.add_argument('--min-date', help='YYYY-MM-DD')
    parser.add_argument('--max-date', help='YYYY-MM-DD')
    parser.add_argument(
        '--location',
        '-l',
        help='clientip, ip:<addr>, geo:<lat>,<lng> or sk:<metro area id>',
    )
    parser.add_argument('--page', '-p', type=int)
    parser.add_argument('--per-page', type=int, default=DEFAULT_PER_PAGE)
    parser.add_argument('--order', choices=[sort.value for sort in Sort])
    parser.add_argument('--verbose', '-v', action='store_true')

    return parser


def _build_options(args: argparse.Namespace) -> Options:
    def _apply_filter(filter_: FilterBuilder) -> None:
        if args.artist_name is not None:
            filter_.artist_name(args.artist_name)
        if args.min_date is not None:
            filter_.min_date(args.min_date)
        if args.max_date is not None:
            filter_.max_date(args.max_date)
        if args.location is not None:
            filter_.location(args.location)

    builder = OptionsBuilder().filter(_apply_filter)
    if args.page is not None:
        builder.paging(args.page, args.per_page)
    if args.order:
        builder.sort(Sort(args.order))

    return builder.build()


def _get_opts(args: argparse.Namespace) -> SongKickOpts:
    if args.api_key:
        return SongKickOpts(args.api_key, args.base_path)
    return SongKickOpts.from_env(args.base_path)


@log_time
def _main_cli(argv: Sequence[str] | None = None) -> int:
    args = _construct_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        handlers=(logging.StreamHandler(),),
        format='%(asctime)s, %(levelname)s, %(message)s, %(name)s',
        force=True,
    )

    try:
        opts = _get_opts(args)
        options = _build_options(args)

        if args.command == 'url':
            print(event_search_url(opts, options))
            return 0

        logger.info(
            f'Searching events: {redact_api_key(event_search_url(opts, options))}'
        )
        with SongKick(opts.api_key(), opts.base_path()) as sk:
            events = sk.search_events(options)
    except (ApiError, UnexpectedResponse):
        # Logged by the client.
        return 1
    except SongKickError as e:
        logger.error(e)
        return 1

    for event in events:
        print(event)

    logger.info(
        f'Page {events.page}: {len(events)}/{events.total_entries} events'
    )
    return 0


if __name__ == '__main__':
    sys.exit(_main_cli())
