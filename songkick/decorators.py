import logging
import time
from functools import wraps
from typing import Any, Callable, ParamSpec, TypeVar

from .util import redact_api_key

P = ParamSpec('P')
T = TypeVar('T')

Decorator = Callable[[Callable[P, T]], Callable[P, T]]

global_logger = logging.getLogger('songkick')


def _describe_call(
    func: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> str:
    # Urls passed as arguments carry the api key.
    return redact_api_key(f'{func.__name__}(args: {args}, kwargs: {kwargs})')


def log_errors(*, logger: logging.Logger | None = None) -> Decorator:
    """Log exceptions raised during function execution, then re-raise.

    :param Logger | None logger: Logger to use.
        Default is the global logger.
    """
    local_logger = logger or global_logger

    def _decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def _wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                local_logger.error(
                    f'{_describe_call(func, args, kwargs)}: '
                    f'{redact_api_key(str(e))}'
                )
                raise

        return _wrapper

    return _decorator


def log_inputs(
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Decorator:
    """Log function's inputs.

    :param Logger | None logger: Logger to use.
        Default is the global logger.
    :param int level: logging level to log messages under. Default is DEBUG.
    """
    local_logger = logger or global_logger

    def _decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def _wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            if local_logger.isEnabledFor(level):
                local_logger.log(level, _describe_call(func, args, kwargs))
            return func(*args, **kwargs)

        return _wrapper

    return _decorator


def log_time(func: Callable[P, T]) -> Callable[P, T]:
    """Log real time elapsed by function call."""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start_time = time.time()
        try:
            return func(*args, **kwargs)
        finally:
            global_logger.info(
                f'{func.__name__} took {time.time() - start_time:.2f} seconds'
            )

    return wrapper
