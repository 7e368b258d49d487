from importlib import metadata

__version__: str = metadata.version("provider-system")

from .check import PLUGIN_ID, Evaluator, evaluate
from .context import (
    DISK_USAGE_LIMIT,
    LOAD_PER_CPU_LIMIT,
    Context,
    Contexts,
    DiskUsageContext,
    LoadContext,
)
from .error import EvaluationError, MetricUnavailable
from .metric import Metric
from .metrics import MetricsSource, PsutilMetricsSource
from .provider import Plugin, PluginInfo, SystemProvider
from .report import CheckResult, Report
from .resource import DiskUsage, LoadAverage, Resource
from .runtime import guarded

__all__ = [
    "__version__",
    "CheckResult",
    "Context",
    "Contexts",
    "DISK_USAGE_LIMIT",
    "DiskUsage",
    "DiskUsageContext",
    "EvaluationError",
    "evaluate",
    "Evaluator",
    "guarded",
    "LOAD_PER_CPU_LIMIT",
    "LoadAverage",
    "LoadContext",
    "Metric",
    "MetricsSource",
    "MetricUnavailable",
    "Plugin",
    "PluginInfo",
    "PLUGIN_ID",
    "PsutilMetricsSource",
    "Report",
    "Resource",
    "SystemProvider",
]
