""" Convert a flat dictionary with formatted keys into nested dictionaries and lists.

Same options used for flattening are necessary. suffix_end and
suffix_list_end are ignored, keys are split on any configured delimiter.
"""
import logging
from itertools import groupby
from typing import Any, Dict, List

from flatkeys.errors import ConfigurationAmbiguity, StructuralConflict, UnresolvableKey
from flatkeys.flatten import is_container
from flatkeys.options import KeyFormat

MODULE_LOGGER = logging.getLogger(__name__)


class _Branch(dict):
    """ Container created by unflatten """


def splitter(options=None) -> str:
    """ First non-empty of suffix, prefix, prefix_list and suffix_list """
    options = KeyFormat.coerce(options)
    for delimiter in options.delimiters:
        if delimiter:
            return delimiter
    raise ConfigurationAmbiguity('Cannot unflatten without any prefix or suffix delimiter')


def split_key(key: str, options=None, start: str = '') -> List[str]:
    """
    Split flat key into path segments.

    Args:
        key (str): Flat key.
        options (KeyFormat or dict, optional): Key format used for flattening.
        start (str, optional): Characters trimmed from the left of the key.

    Returns:
        List[str]: Path segments.

    Example:
        split_key("properties.collections[0][1]")
        => ['properties', 'collections', '0', '1']
    """
    options = KeyFormat.coerce(options)
    UnresolvableKey.invariant(isinstance(key, str), f"Invalid key type: {type(key)}")
    split = splitter(options)
    delimiters = frozenset(''.join(options.delimiters))

    # any run of delimiter characters becomes one splitter
    collapsed = ''.join(split if is_delimiter else ''.join(chars)
                        for is_delimiter, chars in groupby(key.lstrip(start),
                                                           delimiters.__contains__))
    collapsed = collapsed.strip(split)
    UnresolvableKey.invariant(collapsed, f"Key does not contain any segment: {key!r}")
    return collapsed.split(split)


def _descend(node: dict, segment: str, key: str, strict: bool) -> dict:
    """ Get or create container under node[segment] """
    child = node.get(segment)
    if isinstance(child, _Branch):
        return child
    if isinstance(child, dict):
        child = _Branch(child)
    elif isinstance(child, (list, tuple)):
        child = _Branch((str(index), value) for index, value in enumerate(child))
    else:
        if segment in node:
            StructuralConflict.invariant(
                not strict, f"Key {key!r} descends into leaf value at {segment!r}")
            MODULE_LOGGER.debug('Overwrite leaf %r with container for key %r', segment, key)
        child = _Branch()
    node[segment] = child
    return child


def _materialize(branch: dict, restore_lists: bool):
    """ Turn created branch into plain dict, or list when keys are '0'..'n-1' """
    if not isinstance(branch, _Branch):
        return branch
    if restore_lists and branch and list(branch.keys()) == [str(index) for index in range(len(branch))]:
        return list(branch.values())
    return dict(branch)


def _restore(root: dict, restore_lists: bool):
    """ Replace every created branch with plain containers, top-down """
    result = _materialize(root, restore_lists)
    stack = [result]
    while stack:
        container = stack.pop()
        indexes = range(len(container)) if isinstance(container, list) else list(container)
        for index in indexes:
            child = container[index]
            if isinstance(child, _Branch):
                container[index] = _materialize(child, restore_lists)
                stack.append(container[index])
    return result


def unflatten(source: Dict[str, Any],
              options=None,
              start: str = '',
              destination: dict = None,
              strict: bool = False,
              restore_lists: bool = True):
    """
    Convert a flat dictionary with formatted keys into a nested structure.

    Args:
        source (Dict[str, Any]): Flat dictionary, e.g. from flatten().
        options (KeyFormat or dict, optional): Key format used for flattening.
        start (str, optional): Characters trimmed from the left of every key.
        destination (dict, optional): Dictionary to merge into.
        strict (bool, optional): Raise StructuralConflict instead of overwriting
            when keys disagree whether a path is a leaf or a container.
        restore_lists (bool, optional): Turn created containers with keys
            '0'..'n-1' back into lists.

    Returns:
        Nested dictionary, or list when the top level keys are '0'..'n-1'
        and no destination was given.

    Example:
        unflatten({"id": 1, "properties.geo[0]": "a"})
        => {'id': 1, 'properties': {'geo': ['a']}}
    """
    options = KeyFormat.coerce(options)
    root = _Branch() if destination is None else destination

    for key, value in source.items():
        segments = split_key(key, options, start)
        node = root
        for segment in segments[:-1]:
            node = _descend(node, segment, key, strict)
        last = segments[-1]
        if strict:
            existing = node.get(last)
            StructuralConflict.invariant(
                not (is_container(existing) and existing),
                f"Key {key!r} overwrites container at {last!r}")
        node[last] = value

    MODULE_LOGGER.debug('Unflattened %d keys', len(source))
    return _restore(root, restore_lists)
