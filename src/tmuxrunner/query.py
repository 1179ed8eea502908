"""Query parsing - raw launcher text to ParsedQuery.

Parsing runs in fixed steps, each consuming the part of the text it
recognizes: runner trigger, trailing terminal flag, sub-tool clause, and
finally the session name with an optional start directory.

PUBLIC API:
  - parse_query: Parse query text (trigger already stripped) into ParsedQuery
  - strip_trigger: Remove the runner trigger word from a raw query
  - split_trailing_flag: Extract a trailing "-x" terminal flag
  - split_subtool_clause: Extract sub-tool filter and arguments
  - split_name_path: Split "name [path]"
"""

import string
from collections.abc import Mapping

from .types import FLAG_ALIASES, ParsedQuery

__all__ = ["parse_query", "strip_trigger", "split_trailing_flag", "split_subtool_clause", "split_name_path"]

INVALID_FLAG_SUFFIX = " default (invalid flag)"


def strip_trigger(query: str, trigger: str) -> str | None:
    """Remove the trigger word and the spaces after it.

    Returns:
        Remaining text, or None if the query is not meant for this runner.
    """
    if not query.startswith(trigger):
        return None
    return query[len(trigger) :].lstrip(" ")


def split_trailing_flag(term: str, aliases: Mapping[str, str] = FLAG_ALIASES) -> tuple[str, str | None, str]:
    """Extract a single-letter flag from the end of the term.

    A flag is "-x" with a lowercase letter, either preceded by a space or
    making up the whole term. Unknown letters are stripped as well but do not
    select a terminal.

    Args:
        term: Query text.
        aliases: Flag letter to terminal identifier.

    Returns:
        Tuple of (remaining term, terminal or None, display suffix).
    """
    if len(term) < 2 or term[-2] != "-" or term[-1] not in string.ascii_lowercase:
        return term, None, ""
    if len(term) > 2 and term[-3] != " ":
        return term, None, ""

    remaining = term[:-3] if len(term) > 2 else ""
    program = aliases.get(term[-1])
    if program is None:
        return remaining, None, INVALID_FLAG_SUFFIX
    return remaining, program, " in " + program.replace("-session", "")


def split_subtool_clause(term: str, trigger: str) -> tuple[str, str, str | None] | None:
    """Parse "<trigger> [filter [args...]]".

    The filter is the first word after the trigger and everything after it
    is kept verbatim as arguments for the sub-tool. Text glued to the trigger
    word without a space is not a filter and is left for session matching.

    Returns:
        Tuple of (remaining term, filter, args), or None without the trigger.
    """
    if not trigger or not term.startswith(trigger):
        return None

    rest = term[len(trigger) :]
    if not rest[:1].isspace():
        return rest, "", None

    parts = rest.split(None, 1)
    if not parts:
        return "", "", None
    args = parts[1] if len(parts) > 1 else None
    return "", parts[0], args


def _is_name_char(char: str) -> bool:
    return char.isalnum() or char in "_-"


def split_name_path(text: str) -> tuple[str, str | None]:
    """Split "name [path]" for a new session.

    The name is a run of word characters and hyphens; the path is everything
    after the spaces that follow it, spaces included. Text that does not fit
    this shape gives an empty name.

    Returns:
        Tuple of (name, path or None).
    """
    end = 0
    while end < len(text) and _is_name_char(text[end]):
        end += 1

    name, rest = text[:end], text[end:]
    if not name:
        return "", None
    if not rest:
        return name, None
    if not rest.startswith(" "):
        return "", None
    return name, rest.lstrip(" ") or None


def parse_query(
    term: str,
    flags_enabled: bool = True,
    subtool_enabled: bool = False,
    subtool_trigger: str = "inator",
    flag_aliases: Mapping[str, str] = FLAG_ALIASES,
) -> ParsedQuery:
    """Parse query text into structured intent.

    Args:
        term: Query with the runner trigger already removed.
        flags_enabled: Whether trailing terminal flags are recognized.
        subtool_enabled: Whether the sub-tool clause is recognized.
        subtool_trigger: Word starting a sub-tool clause.
        flag_aliases: Flag letter to terminal identifier.

    Returns:
        ParsedQuery for this term.
    """
    override = None
    suffix = ""
    if flags_enabled:
        term, override, suffix = split_trailing_flag(term, flag_aliases)

    subtool_mode = False
    subtool_filter = None
    subtool_args = None
    if subtool_enabled:
        clause = split_subtool_clause(term, subtool_trigger)
        if clause is not None:
            subtool_mode = True
            term, subtool_filter, subtool_args = clause

    name, path = split_name_path(term)
    return ParsedQuery(
        filter_text=term,
        terminal_override=override,
        display_suffix=suffix,
        subtool_mode=subtool_mode,
        subtool_filter=subtool_filter,
        subtool_args=subtool_args,
        name=name,
        path_suffix=path,
    )
