"""Re-prompt decorator for console input that fails validation."""

from functools import wraps
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

from .logger import get_logger
from .error_handler import ValidationError
import config

logger = get_logger()

# Define a generic type variable for the decorated function's return type
F = TypeVar('F', bound=Callable[..., Any])

def reprompt_on_exception(
    exceptions: Tuple[Type[Exception], ...] = (ValidationError,),
    on_error: Optional[Callable[[Exception], None]] = None,
    max_attempts: Optional[int] = None,
) -> Callable[[F], F]:
    """Decorator that calls a prompt function again when it raises one of `exceptions`.

    Args:
        exceptions: A tuple of exception types that mean "ask again".
        on_error: Called with the caught exception before asking again, typically
            to show the message to the user.
        max_attempts: Maximum number of attempts (including the first one).
            None keeps asking until the function succeeds.

    Returns:
        A decorator function.
    """
    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            attempts = 0
            while True:
                attempts += 1
                try:
                    if config.DEBUG and attempts > 1:
                        logger.debug(f"Re-prompting {func.__name__} (Attempt {attempts})...")
                    return func(*args, **kwargs)
                except exceptions as e:
                    if max_attempts is not None and attempts >= max_attempts:
                        logger.error(
                            f"Prompt {func.__name__} rejected after {max_attempts} attempts due to {type(e).__name__}."
                        )
                        raise  # Re-raise the last exception

                    logger.warning(
                        f"Prompt {func.__name__} rejected input with {type(e).__name__}: {e} "
                        f"(Attempt {attempts}). Asking again."
                    )
                    if on_error is not None:
                        on_error(e)

        return wrapper # type: ignore
    return decorator
