"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class FormatError(DomainError):
    """Raised when a tag string does not follow the name[:value,...] format."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"invalid format: '{text}' (valid format: 'name[:value,...]')"
        )
