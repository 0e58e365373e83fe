from messagely.db import database


class _SpySession:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_get_db_closes_session(monkeypatch):
    spy = _SpySession()
    monkeypatch.setattr(database, "SessionLocal", lambda: spy)

    gen = database.get_db()
    assert next(gen) is spy
    assert spy.closed is False

    gen.close()
    assert spy.closed is True


def test_get_db_closes_session_on_error(monkeypatch):
    spy = _SpySession()
    monkeypatch.setattr(database, "SessionLocal", lambda: spy)

    gen = database.get_db()
    next(gen)
    try:
        gen.throw(RuntimeError("boom"))
    except RuntimeError:
        pass
    assert spy.closed is True


def test_engine_uses_configured_uri():
    # conftest 设置了 DATABASE_URL=sqlite://
    assert database.engine.url.get_backend_name() == "sqlite"
