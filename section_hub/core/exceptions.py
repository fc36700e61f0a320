# /section_hub/core/exceptions.py

"""Domain exceptions raised by the service layer and mapped to HTTP in the routers."""


class SectionHubError(Exception):
    """Base class for every error this backend raises on purpose."""


class RecordStoreError(SectionHubError):
    """A read or write against the record store failed."""


class UnknownCollectionError(RecordStoreError):
    def __init__(self, collection: str):
        super().__init__(f"Unknown collection: {collection}")
        self.collection = collection


class AggregationFailure(SectionHubError):
    """
    Raised when one of the parallel section reads fails. Wraps the first
    failure (in collection order) and carries its message verbatim.
    """

    def __init__(self, collection: str, cause: BaseException):
        super().__init__(str(cause))
        self.collection = collection
        self.cause = cause


class AIServiceError(SectionHubError):
    """The generative-AI service could not produce a response."""
