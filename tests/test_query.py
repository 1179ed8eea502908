from __future__ import annotations

import pytest

from tmuxrunner.query import (
    INVALID_FLAG_SUFFIX,
    parse_query,
    split_name_path,
    split_subtool_clause,
    split_trailing_flag,
    strip_trigger,
)


def test_strip_trigger() -> None:
    assert strip_trigger("tmux work", "tmux") == "work"
    assert strip_trigger("tmux   work", "tmux") == "work"
    assert strip_trigger("tmuxinator blog", "tmux") == "inator blog"
    assert strip_trigger("tmux", "tmux") == ""


def test_strip_trigger_rejects_other_queries() -> None:
    assert strip_trigger("firefox", "tmux") is None
    assert strip_trigger(" tmux", "tmux") is None


def test_trailing_flag_selects_terminal() -> None:
    assert split_trailing_flag("work -k") == ("work", "konsole", " in konsole")
    assert split_trailing_flag("work -t") == ("work", "terminator", " in terminator")


def test_trailing_flag_strips_session_suffix_for_display() -> None:
    assert split_trailing_flag("work -y") == ("work", "yakuake-session", " in yakuake")


def test_flag_only_query() -> None:
    assert split_trailing_flag("-k") == ("", "konsole", " in konsole")


def test_unknown_flag_is_stripped_without_override() -> None:
    assert split_trailing_flag("work -z") == ("work", None, INVALID_FLAG_SUFFIX)


@pytest.mark.parametrize("term", ["work-k", "work -K", "work -kk", "work -", "k", "", "work - k"])
def test_malformed_flags_leave_term_untouched(term: str) -> None:
    assert split_trailing_flag(term) == (term, None, "")


def test_subtool_clause_with_filter_and_args() -> None:
    assert split_subtool_clause("inator blog -p 1", "inator") == ("", "blog", "-p 1")


def test_subtool_clause_filter_keeps_hyphens() -> None:
    assert split_subtool_clause("inator my-blog", "inator") == ("", "my-blog", None)


def test_subtool_clause_without_filter() -> None:
    assert split_subtool_clause("inator", "inator") == ("", "", None)
    assert split_subtool_clause("inator ", "inator") == ("", "", None)


def test_subtool_clause_glued_text_is_left_over() -> None:
    assert split_subtool_clause("inatorfoo", "inator") == ("foo", "", None)


def test_subtool_clause_requires_trigger() -> None:
    assert split_subtool_clause("blog", "inator") is None


def test_name_only() -> None:
    assert split_name_path("work") == ("work", None)
    assert split_name_path("my_work-2") == ("my_work-2", None)


def test_name_and_path_keeps_spaces_in_path() -> None:
    assert split_name_path("api ~/src/my api") == ("api", "~/src/my api")
    assert split_name_path("api    /tmp") == ("api", "/tmp")


def test_trailing_spaces_give_no_path() -> None:
    assert split_name_path("api   ") == ("api", None)


@pytest.mark.parametrize("text", ["", " api", "foo.bar", "a/b"])
def test_unparseable_name_is_empty(text: str) -> None:
    assert split_name_path(text) == ("", None)


def test_parse_plain_session() -> None:
    parsed = parse_query("work ~/src")
    assert parsed.filter_text == "work ~/src"
    assert parsed.attach_key == "work"
    assert parsed.name == "work"
    assert parsed.path_suffix == "~/src"
    assert parsed.terminal_override is None
    assert not parsed.subtool_mode


def test_parse_flag_then_name() -> None:
    parsed = parse_query("work /tmp -s")
    assert parsed.terminal_override == "st"
    assert parsed.display_suffix == " in st"
    assert parsed.name == "work"
    assert parsed.path_suffix == "/tmp"


def test_parse_flag_only_query_is_not_a_name() -> None:
    parsed = parse_query("-k")
    assert parsed.terminal_override == "konsole"
    assert parsed.filter_text == ""
    assert parsed.name == ""


def test_parse_flags_disabled_keeps_flag_text() -> None:
    parsed = parse_query("work -k", flags_enabled=False)
    assert parsed.terminal_override is None
    assert parsed.name == "work"
    assert parsed.path_suffix == "-k"


def test_parse_subtool_clause() -> None:
    parsed = parse_query("inator blog -p 1 -t", subtool_enabled=True)
    assert parsed.subtool_mode
    assert parsed.subtool_filter == "blog"
    assert parsed.subtool_args == "-p 1"
    assert parsed.terminal_override == "terminator"
    assert parsed.filter_text == ""
    assert parsed.name == ""


def test_parse_subtool_disabled_treats_trigger_as_name() -> None:
    parsed = parse_query("inator blog", subtool_enabled=False)
    assert not parsed.subtool_mode
    assert parsed.name == "inator"
    assert parsed.path_suffix == "blog"


def test_parse_custom_aliases() -> None:
    parsed = parse_query("work -x", flag_aliases={"x": "xterm"})
    assert parsed.terminal_override == "xterm"
    assert parsed.display_suffix == " in xterm"
