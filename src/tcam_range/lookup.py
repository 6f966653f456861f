import numpy as np

from tcam_range.optimize import EncodingChoice
from tcam_range.split_range import ALL_ONES


def _as_keys(keys):
    return np.asarray(keys, dtype=np.uint32)


def match(rules, keys):
    """
    Looks every key up in a rule set the way a TCAM would.

    :param rules: Iterable of (pattern, mask) entries.
    :param keys: Array-like of 32-bit keys.
    :return: Boolean array, True where some entry matches the key.
    """
    keys = _as_keys(keys)
    hit = np.zeros(keys.shape, dtype=bool)
    for patt, mask in rules:
        hit |= (keys & np.uint32(mask)) == np.uint32(patt)
    return hit


def first_match(rules, keys):
    """Index of the highest priority (first) entry matching each key, -1 if none."""
    keys = _as_keys(keys)
    index = np.full(keys.shape, -1, dtype=np.int64)
    entries = list(rules)
    # walk backwards so earlier entries overwrite later ones
    for i in range(len(entries) - 1, -1, -1):
        patt, mask = entries[i]
        index[(keys & np.uint32(mask)) == np.uint32(patt)] = i
    return index


def classify(choice, keys):
    """
    Applies an EncodingChoice to a batch of keys.

    :return: Boolean array, True where the policy accepts the key.
    """
    accepted = match(choice.accept, keys)
    if choice.is_split:
        accepted &= ~match(choice.reject, keys)
    return accepted


class CheckFailed(Exception):
    pass


def boundary_mismatches(result, start, end):
    """
    Looks up the values around both ends of [start, end] and reports the
    ones the rules get wrong.

    :param result: RuleSet or EncodingChoice.
    :return: List of keys whose lookup disagrees with start <= key <= end.
    """
    keys = [k for k in (start - 1, start, end, end + 1) if 0 <= k <= ALL_ONES]
    if isinstance(result, EncodingChoice):
        accepted = classify(result, keys)
    else:
        accepted = match(result, keys)
    return [k for k, hit in zip(keys, accepted.tolist()) if hit != (start <= k <= end)]
