## Failure taxonomy for the goal workflow


class WorkflowError(Exception):
    """Base class for every failure that ends a stage request."""


class ConfigurationError(WorkflowError):
    pass


class TransportError(WorkflowError):
    pass


class EmptyOutputError(WorkflowError):
    pass


class UnrecognizedFormatError(WorkflowError):
    pass


class EmptyExtractionError(WorkflowError):
    pass


class InvalidRequestError(WorkflowError):
    """Malformed payload or unknown stage. Raised before any LLM call."""
