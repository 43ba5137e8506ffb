class BubbleBarsError(Exception):
    """Base class for everything this package raises on purpose."""


class OutOfRangeError(BubbleBarsError, IndexError):
    """An index handed to a BarModel mutator is outside the sequence."""


class ConfigError(BubbleBarsError, ValueError):
    pass


class UnknownStrategyError(BubbleBarsError, KeyError):
    pass
