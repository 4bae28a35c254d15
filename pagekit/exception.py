# pagekit/exception.py


class PagekitError(Exception):
    """Base class for errors raised by pagekit."""


class PaginationConfigError(PagekitError):
    """
    Raised when a paginator is configured with invalid settings.

    Not a ValueError so pydantic validators let it through unwrapped.
    """

    def __init__(self, field: str, value) -> None:
        super().__init__(f"invalid {field}: {value!r}")
        self.field = field
        self.value = value
