# Render TCAM entries as text: the raw patt/mask listing, address prefixes,
# bmv2 runtime CLI `table_add` commands and CSV.
#  The `table_add` syntax is described here: https://github.com/p4lang/behavioral-model/blob/main/docs/runtime_CLI.md#table_add

import ipaddress

import pandas as pd

from tcam_range.optimize import EncodingChoice

FORMATS = ("raw", "prefix", "table", "csv")

DEFAULT_TABLE = "MyIngress.acl"


def format_raw(entry):
    patt, mask = entry
    return "patt: {:08x}  ({} - {})\nmask: {:08x}".format(patt, entry.first, entry.last, mask)


def format_prefix(entry):
    return "{}/{}".format(ipaddress.IPv4Address(entry.pattern), entry.prefix_len)


def format_table_add(entry, table, action, action_args=(), priority=None):
    """
    Builds one `table_add` command with the entry as a ternary key.

    :param entry: PrefixEntry to install.
    :param table: Fully qualified table name.
    :param action: Action to run on a hit.
    :param action_args: Action parameters, written after "=>".
    :param priority: Entry priority, omitted when None.
    """
    patt, mask = entry
    params = [str(a) for a in action_args]
    if priority is not None:
        params.append(str(priority))
    return "table_add {} {} {:#010x}&&&{:#010x} => {}".format(
        table, action, patt, mask, " ".join(params)).rstrip()


def rules_frame(rules, action="accept"):
    rows = []
    for entry in rules:
        rows.append({
            "action": action,
            "pattern": "{:#010x}".format(entry.pattern),
            "mask": "{:#010x}".format(entry.mask),
            "first": entry.first,
            "last": entry.last,
            "prefix": format_prefix(entry),
        })
    return pd.DataFrame(rows, columns=["action", "pattern", "mask", "first", "last", "prefix"])


def _sections(result):
    # (action, header, rules) in the order the entries must be installed
    if isinstance(result, EncodingChoice):
        if result.is_split:
            return [
                ("reject", "Reject: 0 - {}".format(result.start - 1), result.reject),
                ("accept", "Accept: 0 - {}".format(result.end), result.accept),
            ]
        return [("accept", None, result.accept)]
    return [("accept", None, result)]


def render(result, fmt="raw", table=DEFAULT_TABLE, action_args=()):
    """
    Renders a RuleSet or an EncodingChoice.

    :param result: RuleSet (accepted as is) or EncodingChoice.
    :param fmt: One of FORMATS.
    :param table: Table name used by the "table" format.
    :param action_args: Action parameters used by the "table" format.
    :return: List of output lines.
    """
    if fmt not in FORMATS:
        raise ValueError("unknown format {!r}, expected one of {}".format(fmt, ", ".join(FORMATS)))

    sections = _sections(result)
    if fmt == "csv":
        frame = pd.concat([rules_frame(rules, action) for action, _, rules in sections],
                          ignore_index=True)
        return frame.to_csv(index=False).splitlines()

    lines = []
    priority = 0
    for action, header, rules in sections:
        if header and fmt != "table":
            lines.append(header)
        for entry in rules:
            if fmt == "raw":
                lines.extend(format_raw(entry).splitlines())
            elif fmt == "prefix":
                lines.append(format_prefix(entry))
            else:
                priority += 1
                lines.append(format_table_add(entry, table, action, action_args, priority))
    return lines
