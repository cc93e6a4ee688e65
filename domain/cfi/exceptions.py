"""Errors raised by CFI code construction."""


class InvalidCodeError(ValueError):
    """Raised by strict construction when the input is not a structurally valid CFI code."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__(f"CFI code {code!r} is not valid")
