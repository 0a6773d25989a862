import os

DEFAULT_ROSTER = (
    "Tomas Magula,Marek Magula,Jakub Novak,Marek Simko,Jan Brecka,"
    "Adam Sestak,Janik Mokry,Beno Drabek,Pavol Nagy,Marek Kossey,"
    "Jakub Huscava,Niko Matejov,Radek Ciernik"
)

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Fixed roster, in display / tie-break order
    TAG_ROSTER = [p.strip() for p in os.environ.get('TAG_ROSTER', DEFAULT_ROSTER).split(',') if p.strip()]
    # Points for catching the holder ranked 1st, 2nd, ... by holding time
    TAG_AWARD_POINTS = [int(v) for v in os.environ.get('TAG_AWARD_POINTS', '50,40,30,20,10,5').split(',') if v.strip()]
    TAG_PENALTY_PER_HOUR = int(os.environ.get('TAG_PENALTY_PER_HOUR', '5'))
    TAG_BONUS_UNTAGGED_DAY = int(os.environ.get('TAG_BONUS_UNTAGGED_DAY', '35'))
    # Log rows carry day.month. only
    TAG_REFERENCE_YEAR = int(os.environ.get('TAG_REFERENCE_YEAR', '2025'))
    # URL or local file path
    TAG_LOG_SOURCE = os.environ.get('TAG_LOG_SOURCE') or 'https://magula12.github.io/tag/tag.csv'
    TAG_FETCH_TIMEOUT_SEC = int(os.environ.get('TAG_FETCH_TIMEOUT_SEC', '10'))
    TAG_LOAD_ON_START = os.environ.get('TAG_LOAD_ON_START', '1') == '1'
    # Live clock tick (ms)
    TICK_INTERVAL_MS = int(os.environ.get('TICK_INTERVAL_MS', '1000'))
    # Optional: heartbeat interval for live clock logs (sec). 0 disables.
    TIMER_HEARTBEAT_SEC = int(os.environ.get('TIMER_HEARTBEAT_SEC', '0'))
