class MeilisearchError(Exception):
    """Generic class for mieli error handling."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"MeilisearchError. Error message: {self.message}."


class MeilisearchCommunicationError(MeilisearchError):
    """Error when connecting to Meilisearch."""

    def __str__(self) -> str:
        return f"MeilisearchCommunicationError, {self.message}"


class InvalidResponseBodyError(MeilisearchError):
    """Error when Meilisearch sends a body that is not valid JSON."""

    def __init__(self, message: str, body: bytes) -> None:
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        return f"InvalidResponseBodyError, {self.message}. Raw body: {self.body!r}"


class MeilisearchTaskFailedError(MeilisearchError):
    """Error when a task is in the failed or canceled status."""

    def __str__(self) -> str:
        return f"MeilisearchTaskFailedError, {self.message}"


class MissingInputError(MeilisearchError):
    """Error when a command needs input that was not provided."""

    def __str__(self) -> str:
        return self.message
