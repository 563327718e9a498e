"""Exceptions raised by Folio."""


class FolioError(Exception):
    """Base class for all Folio errors."""


class TemplateNotFoundError(FolioError, KeyError):
    """Raised when a prototype template is requested under an unknown name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No template registered under '{name}'")

    def __str__(self) -> str:
        return self.args[0]
