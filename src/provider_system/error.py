"""Exceptions with special meanings for provider_system."""


class MetricUnavailable(RuntimeError):
    """A metric could not be read from the metrics source.

    This is the only recoverable error kind. The
    :class:`~provider_system.check.Evaluator` catches it and leaves the
    corresponding check out of the report instead of failing the whole
    evaluation.
    """

    pass


class EvaluationError(RuntimeError):
    """Abort evaluation.

    Reserved for conditions outside metric collection that make it
    impossible to build a report at all. Raising this exception makes
    the console script print the error and exit with status 1.
    """

    pass
