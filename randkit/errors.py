"""randkit exceptions"""


class RandkitError(Exception):
    """Base class for all randkit errors"""
    pass


class InvalidArgumentError(RandkitError, ValueError):
    """Argument that no generator can work with (empty source, NaN bound)"""
    pass
