class PathError(Exception):
    """Fatal failure while parsing one glyph's path data.

    ``remainder`` is the unconsumed text at the point of failure.
    """

    def __init__(self, message: str, remainder: str):
        super().__init__(message)
        self.remainder = remainder


class UnknownPathCommandError(PathError, ValueError):
    """The path text does not start with a recognized command."""

    def __init__(self, remainder: str):
        super().__init__(f"Unknown path command: {remainder!r}", remainder)


class NumericTokenError(PathError, RuntimeError):
    """A numeric run that the command scanner accepted could not be read back.

    This points at a matching inconsistency rather than bad input.
    """

    def __init__(self, remainder: str):
        super().__init__(f"unable to parse {remainder!r}", remainder)


class WebfontError(ValueError):
    pass
