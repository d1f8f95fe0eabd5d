from functools import wraps
from inspect import getfile, getsourcelines
from os.path import basename
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import ExtraField, custom_logger


MAX_CONTENT_LENGTH = 500

_F = TypeVar('_F', bound=Callable[..., Any])


def build_call_target(func: Callable[..., Any]) -> str:
    lineno = getsourcelines(func)[1]
    return f'{basename(getfile(func))}::{func.__qualname__}:{lineno}'


def truncate_content(content: Any) -> Any:
    content_str = str(content)
    if len(content_str) <= MAX_CONTENT_LENGTH:
        return content
    return (
        f'{content_str[:MAX_CONTENT_LENGTH]}'
        f'...(truncated {len(content_str) - MAX_CONTENT_LENGTH} chars)'
    )


class LoguruIO:
    """Logs arguments and return value at DEBUG and a failure once at ERROR.

    Holds only its options; everything per call is bound on a fresh logger, so a
    decorated function can be called from several threads at once.
    """

    def __init__(self, *, reraise: bool = True, truncate: bool = True) -> None:
        self.reraise = reraise
        self.truncate = truncate

    def _render(self, value: Any) -> Any:
        return truncate_content(value) if self.truncate else value

    @staticmethod
    def _log_failure(log: 'LoguruLogger', e: Exception) -> None:
        # Only the innermost decorated call logs a bubbling exception
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            # Rejected request, not a fault: no traceback
            log.opt(depth=2).error(f'{type(e).__name__}: {e}')
        else:
            log.opt(depth=2, exception=e).error(f'{type(e).__name__}: {e}')

    def __call__(self, func: _F) -> _F:
        call_target = build_call_target(func)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = custom_logger.bind(**{ExtraField.CALL_TARGET: call_target})
            log.opt(depth=1, lazy=True).debug(
                'args: {}, kwargs: {}', lambda: self._render(args), lambda: self._render(kwargs)
            )
            try:
                return_value = func(*args, **kwargs)
            except Exception as e:
                self._log_failure(log, e)
                if self.reraise:
                    raise
                return None
            log.opt(depth=1, lazy=True).debug('return: {}', lambda: self._render(return_value))
            return return_value

        return cast(_F, wrapper)


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        if func:
            return LoguruIO(reraise=reraise, truncate=truncate)(func)
        return LoguruIO(reraise=reraise, truncate=truncate)
