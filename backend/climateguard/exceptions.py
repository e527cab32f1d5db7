class ClimateGuardError(Exception):
    """Base class for every error the assessment pipeline raises."""


class TransportError(ClimateGuardError):
    """The model service could not be reached, rejected our credentials, or
    returned a response we could not read text out of."""


class LocationRequiredError(ClimateGuardError):
    def __init__(self, message: str = "Please enter a location"):
        super().__init__(message)
        self.message = message


class AssessmentFailedError(ClimateGuardError):
    """A risk or prediction call failed in transport. Carries the alert shown to the user."""

    def __init__(self, alert: str):
        super().__init__(alert)
        self.alert = alert


class PipelineBusyError(ClimateGuardError):
    def __init__(self, message: str = "An assessment is already running. Please wait for it to finish."):
        super().__init__(message)
        self.message = message
