from datetime import datetime

from tagboard.models import TagEvent
from tagboard.services.tag.log_parser import parse_log_text

ROSTER = ['Alice', 'Bob', 'Cara']


def test_parse_example_log(example_csv):
    events = parse_log_text(example_csv, ROSTER, 2025)
    assert events == [
        TagEvent(datetime(2025, 3, 12, 10, 0), 'Alice'),
        TagEvent(datetime(2025, 3, 12, 11, 30), 'Bob'),
        TagEvent(datetime(2025, 3, 12, 12, 0), 'Alice'),
    ]


def test_parse_applies_reference_year():
    events = parse_log_text("DATUM,CAS,MENO\n1.1.,0:05,Cara\n", ROSTER, 2024)
    assert events == [TagEvent(datetime(2024, 1, 1, 0, 5), 'Cara')]


def test_parse_trims_cells():
    events = parse_log_text("DATUM,CAS,MENO\n 5.3. , 9:05 , Bob \n", ROSTER, 2025)
    assert events == [TagEvent(datetime(2025, 3, 5, 9, 5), 'Bob')]


def test_parse_drops_bad_rows(caplog):
    text = (
        "DATUM,CAS,MENO\n"
        "31.2.,10:00,Alice\n"
        "12.3.,25:61,Bob\n"
        "12.3.,10:00,Mallory\n"
        "12.3.,10:00\n"
        "13.3.,08:15,Cara\n"
    )
    events = parse_log_text(text, ROSTER, 2025)
    assert events == [TagEvent(datetime(2025, 3, 13, 8, 15), 'Cara')]
    assert 'unknown player' in caplog.text
    assert 'invalid date and time' in caplog.text


def test_parse_keeps_file_order():
    text = "DATUM,CAS,MENO\n13.3.,08:00,Bob\n12.3.,08:00,Alice\n"
    assert [e.player for e in parse_log_text(text, ROSTER, 2025)] == ['Bob', 'Alice']


def test_parse_empty_inputs():
    assert parse_log_text('', ROSTER, 2025) == []
    assert parse_log_text('   \n', ROSTER, 2025) == []
    assert parse_log_text('DATUM,CAS,MENO\n', ROSTER, 2025) == []


def test_parse_ignores_trailing_empty_columns():
    text = "DATUM,CAS,MENO,,\n12.3.,10:00,Alice,,\n12.3.,11:30,Bob,,\n"
    events = parse_log_text(text, ROSTER, 2025)
    assert events == [
        TagEvent(datetime(2025, 3, 12, 10, 0), 'Alice'),
        TagEvent(datetime(2025, 3, 12, 11, 30), 'Bob'),
    ]


def test_parse_logs_rows_with_extra_fields(caplog):
    text = "DATUM,CAS,MENO\n12.3.,10:00,Alice\n12.3.,11:30,Bob,note\n"
    events = parse_log_text(text, ROSTER, 2025)
    assert events == [TagEvent(datetime(2025, 3, 12, 10, 0), 'Alice')]
    assert '[parse-skip] too many fields' in caplog.text
    assert 'note' in caplog.text
