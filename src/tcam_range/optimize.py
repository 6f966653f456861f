from collections import namedtuple

from tcam_range.split_range import MAX_ENTRIES, CapacityExceeded, decompose


class EncodingChoice(namedtuple("EncodingChoice", ["start", "end", "accept", "reject"])):
    """
    Rule sets chosen for the policy "accept [start, end], reject the rest".

    A direct choice has reject=None and accept covering [start, end].
    A split choice rejects [0, start-1] first and then accepts [0, end].
    """

    __slots__ = ()

    @property
    def is_split(self):
        return self.reject is not None

    @property
    def total(self):
        if self.reject is None:
            return len(self.accept)
        return len(self.reject) + len(self.accept)


def choose_best_encoding(start, end, max_entries=MAX_ENTRIES):
    """
    Compares the number of TCAM entries between
      1. start:end (accept)
      2. [0 ... start-1] (reject) followed by [0 ... end] (accept)
    and returns the smaller one. Ties keep the direct form.

    :param start: Starting number of the accepted range.
    :param end: Ending number of the accepted range.
    :param max_entries: Capacity of every RuleSet built.
    :return: An EncodingChoice.
    """
    try:
        direct = decompose(start, end, max_entries)
    except CapacityExceeded:
        # Without a split form there is nothing else to try
        if start == 0:
            raise
        direct = None

    # start - 1 would be negative
    if start == 0:
        return EncodingChoice(start, end, direct, None)

    try:
        reject = decompose(0, start - 1, max_entries)
        accept = decompose(0, end, max_entries)
    except CapacityExceeded:
        if direct is None:
            raise
        return EncodingChoice(start, end, direct, None)

    if direct is None or len(reject) + len(accept) < len(direct):
        return EncodingChoice(start, end, accept, reject)
    return EncodingChoice(start, end, direct, None)
