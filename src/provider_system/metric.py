"""Structured representation for data points.

This module contains the :class:`Metric` class whose instances are
passed as value objects from :class:`~.resource.Resource` objects to
the :class:`~.context.Context` that judges them. Each resource emits
exactly one metric from its :meth:`~.resource.Resource.probe` method.
"""

from __future__ import annotations

import typing

from typing_extensions import Self, Unpack

if typing.TYPE_CHECKING:
    from .context import Context
    from .report import CheckResult
    from .resource import Resource


class MetricKwargs(typing.TypedDict, total=False):
    name: str
    value: typing.Any
    uom: str
    context: str
    contextobj: "Context"
    resource: "Resource"


class Metric:
    """Single measured value.

    The value is expressed in the unit the threshold rule compares
    against, so Metric('disk', 93.5, '%') for filesystem usage.
    """

    name: str
    value: typing.Any
    uom: typing.Optional[str] = None
    context: str
    contextobj: typing.Optional["Context"] = None
    resource: typing.Optional["Resource"] = None

    def __init__(
        self,
        name: str,
        value: typing.Any,
        uom: typing.Optional[str] = None,
        context: typing.Optional[str] = None,
        contextobj: typing.Optional["Context"] = None,
        resource: typing.Optional["Resource"] = None,
    ) -> None:
        """Creates new Metric instance.

        :param name: short internal identifier for the value
        :param value: data point, usually numeric
        :param uom: :term:`unit of measure` like "%"
        :param context: name of the associated context (defaults to the
            metric's name if left out)
        :param contextobj: reference to the associated context object
            (set automatically by :class:`~.check.Evaluator`)
        :param resource: reference to the originating
            :class:`~.resource.Resource` (set automatically by
            :class:`~.check.Evaluator`)
        """
        self.name = name
        self.value = value
        self.uom = uom
        if context is not None:
            self.context = context
        else:
            self.context = name
        self.contextobj = contextobj
        self.resource = resource

    def __str__(self) -> str:
        """Value followed by the unit, e.g. "93.5%"."""
        return "%s%s" % (self.value, self.uom or "")

    def __repr__(self) -> str:
        return "Metric(%r, %r, %r)" % (self.name, self.value, self.uom)

    def replace(self, **attr: Unpack[MetricKwargs]) -> Self:
        """Updates attributes in place and returns the metric."""
        for key, value in attr.items():
            setattr(self, key, value)
        return self

    def evaluate(self) -> "CheckResult":
        """Evaluates this instance according to the context.

        :return: :class:`~.report.CheckResult` object
        :raise RuntimeError: if no context or resource has been
            associated yet
        """
        if not self.contextobj:
            raise RuntimeError("no context set for metric", self.name)
        if not self.resource:
            raise RuntimeError("no resource set for metric", self.name)
        return self.contextobj.evaluate(self, self.resource)

