from typing import Dict, Optional


class AssistantError(Exception):
    """Base class for every error raised by the assistant core"""


class ConfigurationError(AssistantError):
    """A required setting (the API key) is missing from the environment"""


class ValidationError(AssistantError):
    """Required input fields are missing or out of range"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid or missing fields: {fields}")


class EndpointError(AssistantError):
    """Transport or HTTP failure while calling the generative endpoint"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(AssistantError):
    """The endpoint answered but candidates[0].content.parts[0].text is missing"""


class ExtractionFailure(AssistantError, ValueError):
    """No parseable JSON object could be located in the model response"""
