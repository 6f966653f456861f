from collections import namedtuple

WIDTH = 32
ALL_ONES = (1 << WIDTH) - 1

# Maximum number of TCAM entries a single rule may occupy
MAX_ENTRIES = 32


class DecomposeError(ValueError):
    """Base class for every error raised while turning a range into entries."""


class RangeTooLarge(DecomposeError):
    pass


class CapacityExceeded(DecomposeError):
    pass


class InvalidEncoding(DecomposeError):
    pass


# Function to generate the mask for a given prefix length
def prefix_len_to_mask(plen):
    if not 0 <= plen <= WIDTH:
        raise ValueError(f"prefix length must be in 0..{WIDTH}: {plen}")
    return (ALL_ONES << (WIDTH - plen)) & ALL_ONES


# Function to count the leading one bits of a mask
def mask_to_prefix_len(mask):
    """
    Converts a contiguous-from-MSB mask into a prefix length.

    :param mask: 32-bit mask, ones for the fixed bits.
    :return: The number of leading one bits.
    :raises ValueError: if the one bits are not contiguous from the MSB.
    """
    wildcard = ~mask & ALL_ONES
    # The wildcard bits must form a run of ones starting at bit 0
    if wildcard & (wildcard + 1):
        raise ValueError(f"mask {mask:#010x} is not a prefix mask")
    return WIDTH - wildcard.bit_length()


class PrefixEntry(namedtuple("PrefixEntry", ["pattern", "mask"])):
    """One TCAM entry. Matches every value v with v & mask == pattern."""

    __slots__ = ()

    @property
    def first(self):
        return self.pattern

    @property
    def last(self):
        return self.pattern | (~self.mask & ALL_ONES)

    @property
    def size(self):
        return self.last - self.first + 1

    @property
    def prefix_len(self):
        return mask_to_prefix_len(self.mask)

    def matches(self, value):
        return (value & self.mask) == self.pattern


class RuleSet:
    """
    Ordered, capacity-bounded list of PrefixEntry.

    Filled once by decompose() and only read afterwards.
    """

    def __init__(self, capacity=MAX_ENTRIES):
        self.capacity = capacity
        self._entries = []

    def append(self, entry):
        if len(self._entries) >= self.capacity:
            raise CapacityExceeded(
                f"range needs more than {self.capacity} entries")
        self._entries.append(entry)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __eq__(self, other):
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self):
        return f"RuleSet({self._entries!r})"

    @property
    def entries(self):
        return tuple(self._entries)


def _check_u32(value, name):
    if not 0 <= value <= ALL_ONES:
        raise InvalidEncoding(f"{name} is not an unsigned 32-bit value: {value}")


# Function to convert a range into TCAM pattern/mask entries
def decompose(st, end, max_entries=MAX_ENTRIES):
    """
    Converts the inclusive range [st, end] into the smallest set of
    prefix-aligned (pattern, mask) entries.

    The range is scanned from the top down. At every step the largest
    aligned block whose last element is the current top and whose base
    is not below st is taken.

    :param st: Starting number of the range.
    :param end: Ending number of the range. 0xFFFFFFFF only with st == 0.
    :param max_entries: Capacity of the resulting RuleSet.
    :return: A RuleSet ordered from the highest block to the lowest.
    """
    _check_u32(st, "start")
    _check_u32(end, "end")
    if end == ALL_ONES and st != 0:
        raise RangeTooLarge(
            f"end too big: must be < {ALL_ONES} ({ALL_ONES:#x}) when start is {st}")

    rules = RuleSet(max_entries)
    patt = end
    while patt >= st:
        # First, clear the trailing 1s of patt, one wildcard bit per 1 cleared
        mask = ALL_ONES
        bit = 1
        while bit & patt:
            patt ^= bit
            bit <<= 1
            mask = (mask << 1) & ALL_ONES

        # Second, if the base dropped below st, give wildcard bits back
        while patt < st:
            bit >>= 1
            patt |= bit
            mask |= bit

        rules.append(PrefixEntry(patt, mask))
        if patt == 0:
            break
        patt -= 1

    return rules
