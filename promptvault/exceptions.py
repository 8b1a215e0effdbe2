# promptvault/exceptions.py
"""Errors raised by the store services."""


class StorageError(Exception):
    """The persistence layer failed (I/O or constraint violation).

    The message carries the underlying cause verbatim.
    """


class NotFoundError(Exception):
    """A referenced record does not exist where the operation requires it."""


class PromptNotFoundError(NotFoundError):
    def __init__(self, prompt_id: int):
        self.prompt_id = prompt_id
        super().__init__(f"Prompt {prompt_id} not found")


class VersionNotFoundError(NotFoundError):
    def __init__(self, version_id: int, prompt_id: int | None = None):
        self.version_id = version_id
        self.prompt_id = prompt_id
        if prompt_id is None:
            message = f"Version {version_id} not found"
        else:
            message = f"Version {version_id} not found for prompt {prompt_id}"
        super().__init__(message)
