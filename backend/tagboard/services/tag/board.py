import threading
from datetime import datetime
from typing import List, Optional

from tagboard.models import Achievements, LeaderboardEntry, ScoreState, ScoringRules, TagRun
from .leaderboard import analyze_achievements, rank_leaderboard
from .scoring import advance_to, process_run, sort_events


def build_run(events, rules: ScoringRules, source: Optional[str] = None,
              loaded_at: Optional[datetime] = None) -> TagRun:
    ordered = sort_events(events)
    return TagRun(
        events=ordered,
        state=process_run(ordered, rules),
        rules=rules,
        source=source,
        loaded_at=loaded_at,
    )


class TagBoard:
    """Holds the current run of one app.

    A reload builds a complete TagRun off to the side and swaps it in under the
    lock; live clock ticks take the same lock, so they never see a partial fold.
    """

    def __init__(self, rules: ScoringRules):
        self._lock = threading.Lock()
        self._run = TagRun(events=[], state=ScoreState.empty(rules.roster), rules=rules)

    @property
    def run(self) -> TagRun:
        return self._run

    @property
    def rules(self) -> ScoringRules:
        return self._run.rules

    def replace(self, run: TagRun) -> None:
        with self._lock:
            self._run = run

    def tick(self, now: datetime):
        with self._lock:
            return advance_to(self._run.state, now)

    def leaderboard(self) -> List[LeaderboardEntry]:
        with self._lock:
            return rank_leaderboard(self._run.state)

    def achievements(self) -> Achievements:
        with self._lock:
            return analyze_achievements(self._run.state, self._run.events)

    def snapshot(self) -> dict:
        with self._lock:
            run = self._run
            entries = rank_leaderboard(run.state)
            return {
                'entries': [e.to_dict() for e in entries],
                'last_caught_player': run.state.last_caught_player,
                'event_count': len(run.events),
                'loaded_at': run.loaded_at.isoformat() if run.loaded_at else None,
                'source': run.source,
            }


def get_board(app) -> TagBoard:
    board = app.extensions.get('tagboard')
    if board is None:
        board = TagBoard(ScoringRules.from_config(app.config))
        app.extensions['tagboard'] = board
    return board
