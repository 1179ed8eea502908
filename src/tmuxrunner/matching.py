"""Candidate matching against live sessions and sub-tool projects.

Matching runs three passes over one immutable snapshot and concatenates
their results: sub-tool projects, attachable sessions, then a new-session
suggestion. Output order is display order; relevance is a ranking hint for
the host and the list is never sorted here.

PUBLIC API:
  - compute_matches: Produce the candidate list for a parsed query
  - subtool_matches: Sub-tool pass
  - attach_matches: Session-attach pass
  - new_session_match: New-session pass
"""

from collections.abc import Collection, Mapping, Sequence

from .config import RunnerConfig
from .paths import resolve_path
from .types import Action, MatchCandidate, ParsedQuery, ProgramId

__all__ = ["compute_matches", "subtool_matches", "attach_matches", "new_session_match"]

RUNNING_PROJECT_RELEVANCE = 0.99


def subtool_matches(
    parsed: ParsedQuery,
    sessions: Collection[str],
    projects: Sequence[str],
    program: ProgramId,
    subtool_program: str,
) -> list[MatchCandidate]:
    """Projects whose name starts with the sub-tool filter.

    Running projects become attach candidates, the rest create candidates.
    """
    project_filter = parsed.subtool_filter or ""
    matches = []
    for project in projects:
        if not project.startswith(project_filter):
            continue
        if project in sessions:
            matches.append(
                MatchCandidate(
                    text=f"Attach {subtool_program} {project}{parsed.display_suffix}",
                    relevance=RUNNING_PROJECT_RELEVANCE,
                    action=Action.ATTACH,
                    target=project,
                    program=program,
                )
            )
        else:
            matches.append(
                MatchCandidate(
                    text=f"Create {subtool_program} {project}{parsed.display_suffix}",
                    relevance=1.0,
                    action=Action.NEW_VIA_SUBTOOL,
                    target=project,
                    program=program,
                    subtool_args=parsed.subtool_args,
                )
            )
    return matches


def attach_matches(
    parsed: ParsedQuery,
    sessions: Collection[str],
    program: ProgramId,
    already_attached: Collection[str] = (),
) -> tuple[list[MatchCandidate], bool]:
    """Sessions whose name starts with the attach key.

    Relevance is the share of the session name covered by the key.

    Returns:
        Tuple of (candidates, exact_match). An exact name match counts even
        when that session was already offered by the sub-tool pass.
    """
    key = parsed.attach_key
    exact_match = False
    matches = []
    for session in sessions:
        if not session or not session.startswith(key):
            continue
        if session == key:
            exact_match = True
        if session in already_attached:
            continue
        matches.append(
            MatchCandidate(
                text=f"Attach to {session}{parsed.display_suffix}",
                relevance=len(key) / len(session),
                action=Action.ATTACH,
                target=session,
                program=program,
            )
        )
    return matches, exact_match


def new_session_match(
    parsed: ParsedQuery,
    program: ProgramId,
    has_alternatives: bool,
    shortcuts: Mapping[str, str] | None = None,
    home: str | None = None,
) -> MatchCandidate | None:
    """Suggest creating a session named after the query.

    Returns:
        The candidate, or None for an unnamed session while browsing
        sub-tool projects.
    """
    name, path = parsed.name, parsed.path_suffix
    if not name and parsed.subtool_mode:
        return None

    text = f"New session {name}" if name else "New session"
    if path:
        text += f" in {path}"

    return MatchCandidate(
        text=text + parsed.display_suffix,
        relevance=0.0 if has_alternatives else 1.0,
        action=Action.NEW,
        target=name,
        program=program,
        path=resolve_path(path, shortcuts, home) if path else None,
    )


def compute_matches(
    parsed: ParsedQuery,
    sessions: Collection[str],
    projects: Sequence[str],
    config: RunnerConfig,
    home: str | None = None,
) -> list[MatchCandidate]:
    """Build the candidate list for one query.

    Args:
        parsed: Parsed query.
        sessions: Running tmux session names.
        projects: Available sub-tool project names.
        config: Configuration snapshot.
        home: Home directory for path resolution, defaults to the user's.

    Returns:
        Candidates in display order.
    """
    program = parsed.terminal_override or config.default_program
    matches: list[MatchCandidate] = []

    attached: set[str] = set()
    if parsed.subtool_mode and config.enable_subtool:
        found = subtool_matches(parsed, sessions, projects, program, config.subtool_program)
        attached.update(m.target for m in found if m.action is Action.ATTACH)
        matches.extend(found)

    found, exact_match = attach_matches(parsed, sessions, program, attached)
    matches.extend(found)

    if exact_match:
        return matches
    if found and not config.enable_new_by_partial_match:
        return matches

    candidate = new_session_match(parsed, program, bool(matches), config.path_shortcuts, home)
    if candidate is not None:
        matches.append(candidate)
    return matches
