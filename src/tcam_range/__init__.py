from tcam_range.optimize import EncodingChoice, choose_best_encoding
from tcam_range.split_range import (
    ALL_ONES,
    MAX_ENTRIES,
    CapacityExceeded,
    DecomposeError,
    InvalidEncoding,
    PrefixEntry,
    RangeTooLarge,
    RuleSet,
    decompose,
    mask_to_prefix_len,
    prefix_len_to_mask,
)
from tcam_range.lookup import CheckFailed, boundary_mismatches, classify, first_match, match
