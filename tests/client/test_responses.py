import pytest
from unittest.mock import AsyncMock

from zsa_keymapp import api
from zsa_keymapp.client.responses import error_matches, wrap_success_to_error
from zsa_keymapp.errors import KeymappError, UnsuccessfulResponseError

"""
Response Normalizer Tests.
The three outcomes of a unary call (raised, success=false, success=true)
must come out as: the same exception, UnsuccessfulResponseError, None.
"""


@pytest.mark.asyncio
async def test_successful_reply_returns_none():
    call = AsyncMock(return_value=api.SetLayerReply(success=True))
    request = api.SetLayerRequest(layer=2)

    assert await wrap_success_to_error(call, request) is None
    call.assert_awaited_once_with(request, timeout=None, metadata=None)


@pytest.mark.asyncio
@pytest.mark.parametrize("request_message, reply", [
    (api.SetLayerRequest(layer=1), api.SetLayerReply(success=False)),
    (api.SetRGBAllRequest(red=1), api.SetRGBAllReply(success=False)),
    (api.ConnectAnyKeyboardRequest(), api.ConnectKeyboardReply(success=False)),
    (api.DecreaseBrightnessRequest(), api.DecreaseBrightnessReply()),
])
async def test_unsuccessful_reply_names_request_type(request_message, reply):
    call = AsyncMock(return_value=reply)

    with pytest.raises(UnsuccessfulResponseError) as exc_info:
        await wrap_success_to_error(call, request_message)

    request_type = type(request_message).__name__
    assert exc_info.value.request_type == request_type
    assert str(exc_info.value) == f"unsuccessful {request_type}"
    assert isinstance(exc_info.value, KeymappError)


@pytest.mark.asyncio
async def test_transport_failure_propagates_unchanged():
    failure = ConnectionResetError("socket closed")
    call = AsyncMock(side_effect=failure)

    with pytest.raises(ConnectionResetError) as exc_info:
        await wrap_success_to_error(call, api.IncreaseBrightnessRequest())

    assert exc_info.value is failure
    call.assert_awaited_once()


@pytest.mark.asyncio
async def test_timeout_and_metadata_are_forwarded():
    call = AsyncMock(return_value=api.SetStatusLedReply(success=True))
    request = api.SetStatusLedRequest(led=1, on=True)

    await wrap_success_to_error(call, request, timeout=0.5, metadata=[("x-client", "tests")])

    call.assert_awaited_once_with(request, timeout=0.5, metadata=[("x-client", "tests")])


def test_error_matches_on_message_text():
    assert error_matches(RuntimeError("rpc error: keyboard already connected"), "keyboard already connected")
    assert not error_matches(RuntimeError("device busy"), "keyboard already connected")
