import copy
import logging
from typing import Dict

logger = logging.getLogger(__name__)


def deep_merge(parent: Dict, child: Dict) -> Dict:
    """
    Recursively merges a child dictionary into a parent dictionary
        - Dictionaries are merged recursively.
        - A `None` child value drops the key from the result.
        - All other types from the child will overwrite the parent.
    """
    merged = copy.deepcopy(parent)
    for key, child_value in child.items():
        if child_value is None:
            if merged.pop(key, None) is not None:
                logger.debug(f"Dropped key '{key}' during merge")
            continue

        parent_value = merged.get(key)
        if isinstance(parent_value, dict) and isinstance(child_value, dict):
            merged[key] = deep_merge(parent_value, child_value)
        else:
            merged[key] = copy.deepcopy(child_value)

    return merged
