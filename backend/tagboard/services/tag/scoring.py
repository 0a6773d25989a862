from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Set

from tagboard.models import ScoreState, ScoringRules, TagEvent

ONE_HOUR = timedelta(hours=1)
ONE_DAY = timedelta(days=1)


def holding_rank(state: ScoreState, player: str) -> int:
    """1-based rank of `player` by holding time, longest first.

    Equal holding times keep roster order (sorted() is stable).
    """
    ranking = sorted(state.roster, key=lambda p: state.holding_time[p], reverse=True)
    return ranking.index(player) + 1


def process_transition(state: ScoreState, prev: TagEvent, curr: TagEvent, rules: ScoringRules) -> int:
    """Apply scoring for the interval prev -> curr, held by prev.player.

    Time is credited before the rank lookup so the award sees it. Returns the
    points awarded to curr.player.
    """
    held = curr.timestamp - prev.timestamp
    state.holding_time[prev.player] += held

    hours_held = held // ONE_HOUR
    state.points[prev.player] -= hours_held * rules.penalty_per_hour

    state.catch_count[prev.player] += 1

    award = rules.award_for_rank(holding_rank(state, prev.player))
    state.points[curr.player] += award

    state.tagged_days[prev.player].add(prev.timestamp.date())
    state.tagged_days[curr.player].add(curr.timestamp.date())

    state.last_tag_timestamp[curr.player] = curr.timestamp
    state.last_caught_player = curr.player
    return award


def log_days(events: Iterable[TagEvent]) -> List[date]:
    return sorted({e.timestamp.date() for e in events})


def is_isolated(tagged: Set[date], day: date) -> bool:
    return not ({day - ONE_DAY, day, day + ONE_DAY} & tagged)


def award_untagged_day_bonus(state: ScoreState, events: Iterable[TagEvent], rules: ScoringRules) -> int:
    """Grant the bonus to each player untagged on a log day and both its neighbours.

    Neighbours are calendar days, whether or not they appear in the log. Must run
    once per processing run. Returns the total points granted.
    """
    granted = 0
    for day in log_days(events):
        for player in state.roster:
            if is_isolated(state.tagged_days[player], day):
                state.points[player] += rules.bonus_untagged_day
                granted += rules.bonus_untagged_day
    return granted


def sort_events(events: Iterable[TagEvent]) -> List[TagEvent]:
    # Stable: events sharing a timestamp keep their input order
    return sorted(events, key=lambda e: e.timestamp)


def process_run(events: Iterable[TagEvent], rules: ScoringRules) -> ScoreState:
    """Build a fresh ScoreState from an (unsorted) event log.

    An empty log leaves every value at zero.
    """
    ordered = sort_events(events)
    state = ScoreState.empty(rules.roster)
    if not ordered:
        return state

    first = ordered[0]
    state.last_tag_timestamp[first.player] = first.timestamp
    state.last_caught_player = first.player
    # A one-event log has no transition to mark the opening holder's day
    state.tagged_days[first.player].add(first.timestamp.date())

    for prev, curr in zip(ordered, ordered[1:]):
        process_transition(state, prev, curr, rules)

    award_untagged_day_bonus(state, ordered, rules)
    return state


def advance_to(state: ScoreState, now: datetime) -> Optional[timedelta]:
    """Credit the current holder with the time elapsed up to `now`.

    Moves the holder's last tag timestamp to `now`. An instant earlier than that
    timestamp credits nothing. Returns the credited time, or None without a holder.
    """
    holder = state.last_caught_player
    if holder is None:
        return None
    since = state.last_tag_timestamp.get(holder)
    if since is None:
        return None
    if now <= since:
        return timedelta(0)
    elapsed = now - since
    state.holding_time[holder] += elapsed
    state.last_tag_timestamp[holder] = now
    return elapsed
