"""Exceptions raised by routegraph."""


class InputValidationError(ValueError):
    """Raised when an operation receives arguments of the wrong shape, format or range.

    Missing routes are reported as values, not with this error. The one
    exception is a ``start``/``end`` node that is absent from the graph, which
    route enumeration and cheapest-route queries reject with this error.
    """
