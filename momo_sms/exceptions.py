"""Exception classes for callers that prefer raising over rejection values."""


class MomoSmsError(Exception):
    """Base exception for the SMS parser."""
    pass


class SmsRejectedError(MomoSmsError):
    """A message could not be turned into a transaction."""

    def __init__(self, reason, message: str = None):
        self.reason = reason
        super().__init__(message or f"SMS rejected: {reason.value}")


class DeviceNotRegisteredError(MomoSmsError):
    """No device id is available to attach to a sync request."""
    pass
