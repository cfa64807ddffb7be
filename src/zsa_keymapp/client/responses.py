"""
Response Normalizer.

Every mutating Keymapp RPC answers with a reply carrying a single
`success` flag. `wrap_success_to_error` folds the three possible outcomes
of such a call into one error channel:

- the call itself raised (transport / status error): re-raised unchanged,
- the reply says `success == false`: `UnsuccessfulResponseError`,
- the reply says `success == true`: returns None.
"""
import logging
from typing import Awaitable, Callable, Optional, Protocol, Sequence, Tuple, TypeVar

from zsa_keymapp.errors import UnsuccessfulResponseError

logger = logging.getLogger(__name__)


class SuccessResponse(Protocol):
    success: bool


RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT", bound=SuccessResponse)

Metadata = Sequence[Tuple[str, str]]
UnaryCall = Callable[..., Awaitable[ResponseT]]


async def wrap_success_to_error(
    call: UnaryCall,
    request: RequestT,
    *,
    timeout: Optional[float] = None,
    metadata: Optional[Metadata] = None,
) -> None:
    """
    Invokes a unary RPC and raises if the daemon reported failure.

    No retries: cancellation and deadlines are whatever the caller's task
    and `timeout` provide.
    """
    request_type = type(request).__name__
    logger.debug(f"Calling Keymapp with {request_type}")
    response = await call(request, timeout=timeout, metadata=metadata)
    if not response.success:
        logger.warning(f"Keymapp reported failure for {request_type}")
        raise UnsuccessfulResponseError(request)


def error_matches(error: BaseException, marker: str) -> bool:
    """True if the error text mentions `marker` (used for benign errors)."""
    return marker in str(error)
