"""Cascading merge and redundancy pruning of nested locale data.

Locale data is a tree of JSON-like values. Data for a locale is formed by
overlaying each level of its sublocale chain on top of the levels before it
(merge). The inverse operation strips from a level every value it inherits
unchanged from its parent (prune), which keeps shipped data small.

The central law tying the two together, for every level i >= 1:

    merge(merged[i - 1], prune(merged[i - 1], data[i])) == merged[i]

All functions are pure: inputs are never mutated and results never share
mutable containers with inputs.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from localeloom.constants import MAX_DEPTH
from localeloom.errors import DepthLimitExceededError
from localeloom.specifier import get_sublocales

__all__ = [
    "ChainViews",
    "LocaleViews",
    "deep_equal",
    "merge",
    "merge_and_prune",
    "merge_chain",
    "prune",
]

type LocaleMapping = Mapping[str, object]


@dataclass(frozen=True, slots=True)
class ChainViews:
    """Merged and pruned views of every level in a locale chain.

    Attributes:
        merged: merged[i] is the effective data at level i
        pruned: pruned[i] is level i minus everything inherited from level i-1
    """

    merged: tuple[dict[str, object], ...]
    pruned: tuple[dict[str, object], ...]


@dataclass(frozen=True, slots=True)
class LocaleViews:
    """Raw, merged and pruned data of one locale.

    Attributes:
        data: Raw data as supplied
        merged: Data inherited along the sublocale chain plus the raw data
        pruned: Raw data without the values identical to the parent's merged view
    """

    data: dict[str, object]
    merged: dict[str, object]
    pruned: dict[str, object]


def _check_depth(depth: int) -> None:
    if depth > MAX_DEPTH:
        msg = f"Locale data nesting exceeds maximum depth of {MAX_DEPTH}"
        raise DepthLimitExceededError(msg)


def deep_equal(left: object, right: object, _depth: int = 0) -> bool:
    """Structural equality for JSON-like values.

    Unlike ``==``, booleans never compare equal to numbers, so ``True`` in a
    child does not count as redundant with ``1`` in its parent. Lists and
    tuples never compare equal either, since merge() keeps the child's type.

    Example:
        >>> deep_equal({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}]})
        True
        >>> deep_equal({"a": True}, {"a": 1})
        False
        >>> deep_equal([1, 2], (1, 2))
        False
    """
    _check_depth(_depth)
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[k], right[k], _depth + 1) for k in left)
    if isinstance(left, list | tuple) and isinstance(right, list | tuple):
        if isinstance(left, list) is not isinstance(right, list) or len(left) != len(right):
            return False
        return all(deep_equal(a, b, _depth + 1) for a, b in zip(left, right, strict=True))
    if isinstance(left, Mapping | list | tuple) or isinstance(right, Mapping | list | tuple):
        return False
    return left == right


def merge(
    parent: LocaleMapping | None,
    child: LocaleMapping | None,
    *,
    concat_arrays: bool = False,
) -> dict[str, object]:
    """Overlay child data on top of parent data.

    Keys present on one side only are kept. When both sides hold mappings
    for a key, they are merged recursively; otherwise the child's value wins.

    Args:
        parent: Inherited data (None is treated as empty)
        child: Overriding data (None is treated as empty)
        concat_arrays: Concatenate lists found on both sides instead of
            letting the child's list replace the parent's

    Returns:
        New dictionary holding the merged data

    Raises:
        DepthLimitExceededError: If the data nests deeper than MAX_DEPTH

    Example:
        >>> merge({"a": "b", "c": {"d": 1}}, {"c": {"e": 2}})
        {'a': 'b', 'c': {'d': 1, 'e': 2}}
    """
    return _merge(parent or {}, child or {}, concat_arrays, 0)


def _merge(
    parent: LocaleMapping,
    child: LocaleMapping,
    concat_arrays: bool,
    depth: int,
) -> dict[str, object]:
    _check_depth(depth)
    result: dict[str, object] = {key: copy.deepcopy(value) for key, value in parent.items()}

    for key, value in child.items():
        inherited = parent.get(key)
        match inherited, value:
            case Mapping(), Mapping():
                result[key] = _merge(inherited, value, concat_arrays, depth + 1)
            case list(), list() if concat_arrays:
                result[key] = copy.deepcopy(inherited) + copy.deepcopy(value)
            case _:
                result[key] = copy.deepcopy(value)
    return result


def prune(
    parent_merged: LocaleMapping | None,
    child: LocaleMapping | None,
    *,
    concat_arrays: bool = False,
) -> dict[str, object]:
    """Strip from child every value it would inherit unchanged from its parent.

    A key survives when the parent lacks it or holds a structurally different
    value. When both sides hold mappings that differ, the child's mapping is
    pruned recursively and kept even if nothing is left of it: an empty
    mapping records that this level adds nothing to that branch.

    With concat_arrays, a child list meeting a parent list is always kept
    whole, because merging appends it rather than replacing the parent's.
    Mappings on both sides are then pruned recursively even when equal.

    Args:
        parent_merged: Merged view of the parent level (None is treated as empty)
        child: Raw data of the child level (None is treated as empty)
        concat_arrays: List semantics of the merge() the result is meant for

    Returns:
        New dictionary holding only the values that differ from the parent

    Raises:
        DepthLimitExceededError: If the data nests deeper than MAX_DEPTH

    Example:
        >>> prune({"a": "b", "c": "d"}, {"a": "b", "c": "e"})
        {'c': 'e'}
    """
    return _prune(parent_merged or {}, child or {}, concat_arrays, 0)


def _prune(
    parent: LocaleMapping,
    child: LocaleMapping,
    concat_arrays: bool,
    depth: int,
) -> dict[str, object]:
    _check_depth(depth)
    result: dict[str, object] = {}

    for key, value in child.items():
        if key not in parent:
            result[key] = copy.deepcopy(value)
            continue
        inherited = parent[key]
        match inherited, value:
            case list(), list() if concat_arrays:
                result[key] = copy.deepcopy(value)
            case Mapping(), Mapping() if concat_arrays or not deep_equal(inherited, value):
                result[key] = _prune(inherited, value, concat_arrays, depth + 1)
            case _ if deep_equal(inherited, value):
                continue
            case _:
                result[key] = copy.deepcopy(value)
    return result


def merge_chain(
    chain: Sequence[LocaleMapping | None],
    *,
    concat_arrays: bool = False,
) -> ChainViews:
    """Compute merged and pruned views along an ordered locale chain.

    Args:
        chain: Raw data per level, least specific first (None = no data)
        concat_arrays: Passed through to merge() and prune()

    Returns:
        ChainViews where merged[0] and pruned[0] are copies of chain[0]

    Example:
        >>> views = merge_chain([{"a": "b", "c": "d"}, {"a": "b en"}, {"c": "d en-US"}])
        >>> views.merged[-1]
        {'a': 'b en', 'c': 'd en-US'}
        >>> views.pruned[-1]
        {'c': 'd en-US'}
    """
    if not chain:
        return ChainViews(merged=(), pruned=())

    first = copy.deepcopy(dict(chain[0] or {}))
    merged: list[dict[str, object]] = [first]
    pruned: list[dict[str, object]] = [copy.deepcopy(first)]

    for data in chain[1:]:
        previous = merged[-1]
        pruned.append(prune(previous, data, concat_arrays=concat_arrays))
        merged.append(merge(previous, data, concat_arrays=concat_arrays))

    return ChainViews(merged=tuple(merged), pruned=tuple(pruned))


def merge_and_prune(
    locale_data: Mapping[str, LocaleMapping],
    *,
    concat_arrays: bool = False,
) -> dict[str, LocaleViews]:
    """Merge and prune a set of locales along their sublocale chains.

    Each tag's parent chain is derived from get_sublocales(); levels that are
    missing from the input contribute nothing. Useful when assembling locale
    data for shipping: write out ``pruned`` and the runtime cascade rebuilds
    ``merged``.

    Args:
        locale_data: Raw data keyed by locale tag ("root", "de", "und-DE", ...)
        concat_arrays: Passed through to merge_chain()

    Returns:
        LocaleViews per input tag, keyed by the tag as given

    Example:
        >>> data = {"root": {"a": 1, "b": 2}, "de": {"a": 1, "b": 3}}
        >>> views = merge_and_prune(data)
        >>> views["de"].pruned
        {'b': 3}
    """
    by_tag = {get_sublocales(tag)[-1].tag: tag for tag in locale_data}
    result: dict[str, LocaleViews] = {}

    for canonical, original in by_tag.items():
        chain = [
            locale_data[by_tag[level.tag]] if level.tag in by_tag else None
            for level in get_sublocales(canonical)
        ]
        views = merge_chain(chain, concat_arrays=concat_arrays)
        result[original] = LocaleViews(
            data=copy.deepcopy(dict(locale_data[original] or {})),
            merged=views.merged[-1],
            pruned=views.pruned[-1],
        )
    return result
