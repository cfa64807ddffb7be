"""
Exceptions raised by the Keymapp client.

Transport failures are never wrapped: whatever the gRPC call raised
(usually `grpc.aio.AioRpcError`) reaches the caller unchanged. The classes
below cover only the failures this package synthesizes itself.
"""


class KeymappError(Exception):
    """Base class for errors produced by this package."""


class UnsuccessfulResponseError(KeymappError):
    """The daemon answered, but its reply carried `success == false`."""

    def __init__(self, request):
        self.request_type = type(request).__name__
        super().__init__(f"unsuccessful {self.request_type}")


class MissingEnvironmentError(KeymappError):
    """A required environment variable is unset or empty."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f'environment key "{variable}" not set')


class ConfigError(KeymappError):
    """The configuration file could not be parsed or has invalid values."""
