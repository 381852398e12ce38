from backend import filenames


def test_make_note_name(monkeypatch):
    class FixedDatetime(filenames.datetime):  # type: ignore
        @classmethod
        def now(cls, tz=None):
            return cls(2025, 8, 22, 14, 37, 5)

    monkeypatch.setattr(filenames, "datetime", FixedDatetime)
    assert filenames.make_note_name() == "2025-08-22-Note-14-37-05.txt"


def test_make_note_name_explicit_time():
    now = filenames.datetime(2011, 12, 31, 23, 59, 1)
    assert filenames.make_note_name(now) == "2011-12-31-Note-23-59-01.txt"
