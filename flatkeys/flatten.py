"""
Helper functions for flattening nested dictionaries and lists.
"""
import logging
from typing import Any, Iterator, Tuple

from pydash import map_

from flatkeys.options import KeyFormat

MODULE_LOGGER = logging.getLogger(__name__)


def is_container(value: Any) -> bool:
    """ Check if value is dict, list or tuple """
    return isinstance(value, (dict, list, tuple))


def is_list(value: Any, infer: bool = False) -> bool:
    """
    Check if value is a list container.

    Args:
    - value: The value to check.
    - infer (bool, optional): Treat dict keyed 0..n-1 or "0".."n-1" (in order) as list too.

    Returns:
    - bool: True if value is a list.
    """
    if isinstance(value, (list, tuple)):
        return True
    if infer and isinstance(value, dict):
        keys = list(value.keys())
        indexes = range(len(value))
        # json objects only carry string keys
        return keys == list(indexes) or keys == [str(index) for index in indexes]
    return False


def _frame(container, start: str, options: KeyFormat, infer_lists: bool) -> Tuple[Iterator, str, tuple]:
    """ Create traversal frame: (entries, start key, (prefix, suffix, suffix_end)) """
    if options.list_delimited and is_list(container, infer_lists):
        if not options.suffix_end and options.suffix:
            # deduplicate suffix
            while start.endswith(options.suffix):
                start = start[:-len(options.suffix)]
        framing = (options.prefix_list, options.suffix_list, options.suffix_list_end)
    else:
        framing = (options.prefix, options.suffix, options.suffix_end)
    entries = container.items() if isinstance(container, dict) else enumerate(container)
    return iter(entries), start, framing


def flatten(source: Any,
            options=None,
            start: str = '',
            destination: dict = None,
            infer_lists: bool = False) -> dict:
    """
    Flatten nested dictionaries and lists.

    Example:
        flatten({"assokey": ["Foo"]})
        => {'assokey[0]': 'Foo'}

    Args:
    - source: The container to flatten.
    - options (KeyFormat or dict, optional): Key format. Defaults to KeyFormat().
    - start (str, optional): String every key begins with. Defaults to ''.
    - destination (dict, optional): Dictionary to fill. Defaults to new dict.
    - infer_lists (bool, optional): Frame dicts with keys 0..n-1 as lists.

    Returns:
    - dict: The flattened dictionary, one entry per leaf in depth-first order.
      Empty containers are leaves.
    """
    options = KeyFormat.coerce(options)
    if destination is None:
        destination = {}
    if not is_container(source):
        MODULE_LOGGER.debug('Nothing to flatten in %s', type(source).__name__)
        return destination

    # explicit stack keeps deep nesting within interpreter limits
    stack = [_frame(source, start, options, infer_lists)]
    while stack:
        entries, current_start, (prefix, suffix, suffix_end) = stack[-1]
        try:
            key, value = next(entries)
        except StopIteration:
            stack.pop()
            continue

        name = f'{current_start}{prefix}{key}'
        if is_container(value) and value:
            stack.append(_frame(value, f'{name}{suffix}', options, infer_lists))
        else:
            if suffix_end:
                name += suffix
            destination[name] = value

    MODULE_LOGGER.debug('Flattened into %d keys', len(destination))
    return destination


def flatten_list(array: list, options=None, start: str = '') -> list:
    """ Flatten each item of a list into its own dictionary """
    options = KeyFormat.coerce(options)
    return map_(array, lambda item: flatten(item, options, start))
