"""Errors raised by the award calculation core."""


class AwardsError(ValueError):
    """Base class for invalid input to the award calculation."""


class InvalidAgeGroupError(AwardsError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unrecognized age group: {value!r}")


class InvalidSessionError(AwardsError):
    def __init__(self, message: str, session: object = None):
        self.session = session
        super().__init__(message)
