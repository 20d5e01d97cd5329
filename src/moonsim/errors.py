"""Exceptions raised by moonsim."""


class MoonsimError(Exception):
    """Base class for moonsim errors."""


class ParseError(MoonsimError, ValueError):
    """Input text does not describe a list of moon positions."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: cannot parse position {line!r}")


class CycleNotFoundError(MoonsimError, RuntimeError):
    """No repeated state was found within the step limit."""

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"no repeated state within {max_steps} steps")
