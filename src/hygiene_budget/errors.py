"""Errors raised for inputs that pass field validation but cannot be budgeted."""


class ConfigurationError(ValueError):
    """A parameter, or a quantity derived from it, is physically invalid.

    ``parameter`` is the dot-path of the offending input or derived quantity
    (e.g. ``"led.forward_voltage"``).
    """

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(f"{parameter}: {message}")
