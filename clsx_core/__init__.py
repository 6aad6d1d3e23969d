"""
clsx - conditional class list construction

    clsx("btn", ("btn-active", active))  ->  "btn btn-active"
"""

from clsx_core.builder import ClassListBuilder, Conditional, build_classes, clsx, when
from clsx_core.expression import evaluate, parse_expression, render
from clsx_core.config import ClsxConfig

__version__ = "0.1.0"

__all__ = [
    "clsx",
    "when",
    "build_classes",
    "ClassListBuilder",
    "Conditional",
    "parse_expression",
    "evaluate",
    "render",
    "ClsxConfig",
]
