"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class MissingQueryError(InterfaceError):
    """A listing request lacks the parameters its mode requires."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing query parameters: {', '.join(fields)}")
