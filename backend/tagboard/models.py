from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence, Set, Tuple

DEFAULT_AWARD_POINTS = (50, 40, 30, 20, 10, 5)
DEFAULT_PENALTY_PER_HOUR = 5
DEFAULT_BONUS_UNTAGGED_DAY = 35


def format_duration(value: timedelta) -> str:
    """Render a duration as HH:MM:SS (hours are not wrapped at 24)."""
    total = int(value.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def duration_ms(value: timedelta) -> int:
    return value // timedelta(milliseconds=1)


@dataclass(frozen=True)
class TagEvent:
    timestamp: datetime
    player: str

    def to_dict(self):
        return {
            'timestamp': self.timestamp.isoformat(),
            'player': self.player,
        }


@dataclass(frozen=True)
class ScoringRules:
    roster: Tuple[str, ...]
    award_points: Tuple[int, ...] = DEFAULT_AWARD_POINTS
    penalty_per_hour: int = DEFAULT_PENALTY_PER_HOUR
    bonus_untagged_day: int = DEFAULT_BONUS_UNTAGGED_DAY

    @classmethod
    def from_config(cls, config) -> 'ScoringRules':
        return cls(
            roster=tuple(config['TAG_ROSTER']),
            award_points=tuple(config.get('TAG_AWARD_POINTS') or DEFAULT_AWARD_POINTS),
            penalty_per_hour=int(config.get('TAG_PENALTY_PER_HOUR', DEFAULT_PENALTY_PER_HOUR)),
            bonus_untagged_day=int(config.get('TAG_BONUS_UNTAGGED_DAY', DEFAULT_BONUS_UNTAGGED_DAY)),
        )

    def award_for_rank(self, rank: int) -> int:
        """Points for catching the holder at 1-based `rank`; 0 past the schedule."""
        if 1 <= rank <= len(self.award_points):
            return self.award_points[rank - 1]
        return 0

    def to_dict(self):
        return {
            'roster': list(self.roster),
            'award_points': list(self.award_points),
            'penalty_per_hour': self.penalty_per_hour,
            'bonus_untagged_day': self.bonus_untagged_day,
        }


@dataclass
class ScoreState:
    """Per-run aggregates, one entry per roster player in roster order."""
    roster: Tuple[str, ...]
    holding_time: Dict[str, timedelta] = field(default_factory=dict)
    points: Dict[str, int] = field(default_factory=dict)
    tagged_days: Dict[str, Set[date]] = field(default_factory=dict)
    catch_count: Dict[str, int] = field(default_factory=dict)
    last_tag_timestamp: Dict[str, Optional[datetime]] = field(default_factory=dict)
    last_caught_player: Optional[str] = None

    @classmethod
    def empty(cls, roster: Sequence[str]) -> 'ScoreState':
        roster = tuple(roster)
        return cls(
            roster=roster,
            holding_time={p: timedelta(0) for p in roster},
            points={p: 0 for p in roster},
            tagged_days={p: set() for p in roster},
            catch_count={p: 0 for p in roster},
            last_tag_timestamp={p: None for p in roster},
        )

    def total_holding_time(self) -> timedelta:
        return sum(self.holding_time.values(), timedelta(0))


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    player: str
    points: int
    holding_time: timedelta
    catch_count: int = 0
    is_holder: bool = False

    def to_dict(self):
        return {
            'rank': self.rank,
            'player': self.player,
            'points': self.points,
            'holding_ms': duration_ms(self.holding_time),
            'holding_time': format_duration(self.holding_time),
            'catch_count': self.catch_count,
            'is_holder': self.is_holder,
        }


@dataclass(frozen=True)
class CatchRecord:
    caught: str
    catcher: str
    gap: timedelta

    def to_dict(self):
        return {
            'caught': self.caught,
            'catcher': self.catcher,
            'gap_ms': duration_ms(self.gap),
            'gap': format_duration(self.gap),
        }


@dataclass(frozen=True)
class Achievements:
    worst_player: Optional[str]
    fastest_player: Optional[str]
    slowest_player: Optional[str]
    fastest_catch: Optional[CatchRecord]
    slowest_catch: Optional[CatchRecord]
    last_caught_player: Optional[str]

    def to_dict(self):
        return {
            'worst_player': self.worst_player,
            'fastest_player': self.fastest_player,
            'slowest_player': self.slowest_player,
            'fastest_catch': self.fastest_catch.to_dict() if self.fastest_catch else None,
            'slowest_catch': self.slowest_catch.to_dict() if self.slowest_catch else None,
            'last_caught_player': self.last_caught_player,
        }


@dataclass
class TagRun:
    """One processed snapshot of the log."""
    events: List[TagEvent]
    state: ScoreState
    rules: ScoringRules
    source: Optional[str] = None
    loaded_at: Optional[datetime] = None
