"""Parse the published tag log into TagEvents.

The log is a CSV with a header line and rows of ``day.month.,hour:minute,Player``.
Rows carry no year, so the configured reference year is applied.
"""
import io
import logging
from typing import Iterable, List

import pandas as pd

from tagboard.models import TagEvent

log = logging.getLogger(__name__)

COLUMNS = ['date', 'time', 'player']
TIMESTAMP_FORMAT = '%d.%m.%Y %H:%M'


def _skip_long_row(fields):
    log.warning(f"[parse-skip] too many fields: {fields}")
    return None


def read_log_frame(text: str) -> pd.DataFrame:
    """Read the first three columns of the log; extra trailing columns are ignored."""
    if not text or not text.strip():
        return pd.DataFrame(columns=COLUMNS, dtype=str)
    df = pd.read_csv(
        io.StringIO(text.strip()),
        header=0,
        usecols=[0, 1, 2],
        index_col=False,
        dtype=str,
        skipinitialspace=True,
        skip_blank_lines=True,
        engine='python',
        on_bad_lines=_skip_long_row,
    )
    df.columns = COLUMNS
    for col in COLUMNS:
        df[col] = df[col].str.strip()
    return df


def parse_log_text(text: str, roster: Iterable[str], year: int) -> List[TagEvent]:
    """Return the valid events of the log, in file order.

    Rows with a missing field, an invalid date/time or a player outside the
    roster are logged and dropped.
    """
    known = set(roster)
    df = read_log_frame(text)
    if df.empty:
        return []

    incomplete = df[COLUMNS].isna().any(axis=1)
    for _, row in df[incomplete].iterrows():
        log.warning(f"[parse-skip] incomplete row: {row.to_dict()}")
    df = df[~incomplete].copy()

    day_month = df['date'].str.rstrip('.')
    df['timestamp'] = pd.to_datetime(
        day_month + f'.{year} ' + df['time'],
        format=TIMESTAMP_FORMAT,
        errors='coerce',
    )

    events = []
    for row in df.itertuples(index=False):
        if pd.isna(row.timestamp):
            log.warning(f"[parse-skip] invalid date and time: {row.date} {row.time}")
            continue
        if row.player not in known:
            log.warning(f"[parse-skip] unknown player: {row.player!r}")
            continue
        events.append(TagEvent(timestamp=row.timestamp.to_pydatetime(), player=row.player))
    return events
