"""
Evaluation context assembly for clsx CLI commands
"""

import logging
from typing import Any, Dict, Iterable, Optional

from clsx_core.utils import load_context, parse_assignment

logger = logging.getLogger(__name__)


def build_context(context_file: Optional[str], assignments: Iterable[str]) -> Dict[str, Any]:
    """
    Merge a context file with NAME=VALUE assignments (assignments win).

    Args:
        context_file: Optional YAML/JSON context file
        assignments: NAME=VALUE strings from --set

    Returns:
        Context mapping for expression evaluation
    """
    context: Dict[str, Any] = {}
    if context_file:
        context.update(load_context(context_file))
        logger.debug("Loaded %d name(s) from %s", len(context), context_file)

    for assignment in assignments:
        name, value = parse_assignment(assignment)
        context[name] = value

    return context
