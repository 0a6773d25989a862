from datetime import datetime
from pathlib import Path
from typing import Optional

import requests

from tagboard.models import TagRun
from .board import build_run, get_board
from .log_parser import parse_log_text


class LogFetchError(Exception):
    """The tag log could not be read from its source."""


def is_url(source: str) -> bool:
    return source.startswith(('http://', 'https://'))


def fetch_log_text(source: str, timeout: float = 10) -> str:
    """Read the raw log from an http(s) URL or a local path."""
    if is_url(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise LogFetchError(f"Error loading {source}: {exc}") from exc
        return response.content.decode('utf-8')
    try:
        return Path(source).read_text(encoding='utf-8')
    except OSError as exc:
        raise LogFetchError(f"Error loading {source}: {exc}") from exc


def reload_log(app, text: Optional[str] = None, source: Optional[str] = None) -> Optional[TagRun]:
    """Fetch (unless `text` is given), process and swap in a fresh run.

    On a fetch failure the error is logged and the current run is kept.
    """
    cfg = app.config
    source = source or cfg.get('TAG_LOG_SOURCE')
    if text is None:
        try:
            text = fetch_log_text(source, timeout=cfg.get('TAG_FETCH_TIMEOUT_SEC', 10))
        except LogFetchError as exc:
            app.logger.error(f"[fetch-fail] {exc}")
            return None

    board = get_board(app)
    rules = board.rules
    events = parse_log_text(text, rules.roster, int(cfg.get('TAG_REFERENCE_YEAR', 2025)))
    if not events:
        app.logger.warning(f"[tag-load] no valid data parsed from {source}")

    run = build_run(events, rules, source=source, loaded_at=datetime.now())
    board.replace(run)
    app.logger.info(
        f"[tag-load] source={source} events={len(run.events)} holder={run.state.last_caught_player}"
    )
    return run
