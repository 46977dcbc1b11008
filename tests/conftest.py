import pytest

from tests.helpers import make_record


@pytest.fixture
def client1_records():
    return [
        make_record("C1", "T", "ABC98765", "HK345675432", 3000),
    ]


@pytest.fixture
def client2_records():
    return [
        make_record("C2", "T", "XYZ12345", "HK345675432", 3000),
        make_record("C2", "R", "XYZ12345:1", "HK345675432", 2000, "XYZ12345"),
    ]


@pytest.fixture
def write_ledger(tmp_path):
    """Write raw ledger text to a file and return its path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
