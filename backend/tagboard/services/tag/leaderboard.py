from typing import List, Optional, Sequence

from tagboard.models import Achievements, CatchRecord, LeaderboardEntry, ScoreState, TagEvent


def rank_leaderboard(state: ScoreState) -> List[LeaderboardEntry]:
    """Players by points, highest first, with dense ranks (ties share a rank)."""
    ordered = sorted(state.roster, key=lambda p: state.points[p], reverse=True)
    entries = []
    rank = 0
    previous_points = None
    for player in ordered:
        points = state.points[player]
        if points != previous_points:
            rank += 1
            previous_points = points
        entries.append(LeaderboardEntry(
            rank=rank,
            player=player,
            points=points,
            holding_time=state.holding_time[player],
            catch_count=state.catch_count[player],
            is_holder=(player == state.last_caught_player),
        ))
    return entries


def _catch_extremes(events: Sequence[TagEvent]):
    fastest: Optional[CatchRecord] = None
    slowest: Optional[CatchRecord] = None
    for prev, curr in zip(events, events[1:]):
        record = CatchRecord(caught=prev.player, catcher=curr.player, gap=curr.timestamp - prev.timestamp)
        if fastest is None or record.gap < fastest.gap:
            fastest = record
        if slowest is None or record.gap > slowest.gap:
            slowest = record
    return fastest, slowest


def analyze_achievements(state: ScoreState, events: Sequence[TagEvent]) -> Achievements:
    """Superlatives over a processed run.

    `events` must be the sorted log the state was built from. Catch facts are
    None with fewer than two events; ties go to the first candidate.
    """
    roster = state.roster
    worst = min(roster, key=lambda p: state.points[p]) if roster else None
    fastest_player = min(roster, key=lambda p: state.holding_time[p]) if roster else None
    slowest_player = max(roster, key=lambda p: state.holding_time[p]) if roster else None
    fastest_catch, slowest_catch = _catch_extremes(events)
    return Achievements(
        worst_player=worst,
        fastest_player=fastest_player,
        slowest_player=slowest_player,
        fastest_catch=fastest_catch,
        slowest_catch=slowest_catch,
        last_caught_player=state.last_caught_player,
    )
