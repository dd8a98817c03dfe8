"""Custom live client exceptions."""


class LiveConnectionError(Exception):
    """Transport could not be opened or the setup handshake could not be sent.

    Raised from `MultimodalLiveClient.connect`. The transport is torn down before this error is raised, so the
    client is left disconnected and a new connect attempt may be made. No retry is attempted.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        """Initialize error.

        Args:
            message: Description of the failure.
            url: Endpoint the client attempted to reach (without credentials).
        """
        super().__init__(message)

        self.url = url


class LiveConfigError(Exception):
    """No usable configuration reached the handshake."""

    pass


class NotConnectedError(Exception):
    """A send was attempted while no transport is active.

    Messages are never queued while disconnected. Callers must connect first or catch this error.
    """

    def __init__(self, message: str = "websocket is not connected") -> None:
        """Initialize error.

        Args:
            message: Description of the failure.
        """
        super().__init__(message)
