"""Line Processor - Splits one script line into trigger key and entry text

Lines look like `[actions.]<key>(+=/|=)<action>[,if=<condition>]`.
"""

import logging
from typing import Optional, Tuple

from .transformer import ConditionTransformer


log = logging.getLogger("apl_formatter.processor")

APPEND_SEPARATOR = "+=/"
ASSIGN_SEPARATOR = "="
CONDITION_SEPARATOR = ",if="
ACTIONS_PREFIX = "actions."


def split_action_line(line: str) -> Optional[Tuple[str, str, Optional[str]]]:
    """Split a line into (key, action body, raw condition or None).

    Returns None when the line has neither `+=/` nor `=`.
    """
    if APPEND_SEPARATOR in line:
        left, right = line.split(APPEND_SEPARATOR, 1)
    elif ASSIGN_SEPARATOR in line:
        left, right = line.split(ASSIGN_SEPARATOR, 1)
    else:
        return None

    key = left.strip()
    if key.startswith(ACTIONS_PREFIX):
        key = key[len(ACTIONS_PREFIX):]

    right = right.strip()
    if CONDITION_SEPARATOR in right:
        body, condition = right.split(CONDITION_SEPARATOR, 1)
        return key, body.strip(), condition.strip()
    return key, right, None


def process_line(line: str,
                 transformer: Optional[ConditionTransformer] = None) -> Optional[Tuple[str, str]]:
    """Return (trigger key, formatted entry) for an action line, else None"""
    parts = split_action_line(line)
    if parts is None:
        log.debug("Ignoring non-action line: %r", line)
        return None

    key, body, condition = parts
    if condition is None:
        return key, body

    transformer = transformer or ConditionTransformer()
    return key, f"{body}:\n{transformer.transform(condition)}"
