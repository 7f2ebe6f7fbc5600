import pytest

from edn import Reader, EdnParseError


# Most tests read a handful of forms from one buffer and compare them to a
# list of expected Values / errors. `read_forms` drains a Reader through
# Reader.results() so errors are collected instead of raised.


@pytest.fixture
def read_forms():
    def _read(source, **kwargs):
        return list(Reader(source, **kwargs).results())
    return _read


@pytest.fixture
def read_error():
    """Read a single form that must fail and return the error."""
    def _read(source, **kwargs):
        reader = Reader(source, **kwargs)
        with pytest.raises(EdnParseError) as excinfo:
            reader.read()
        return excinfo.value
    return _read


@pytest.fixture
def max_depth_env(monkeypatch):
    def _set(value):
        monkeypatch.setenv("EDN_MAX_DEPTH", str(value))
    return _set
