import logging
import threading
import time

import database
from database import Store
from main import build_log_formatter


def test_health_check(client):
    assert client.get("/").json() == {"message": "Band Manager API is running", "status": "healthy"}


def test_log_timestamps_are_utc():
    record = logging.LogRecord("band", logging.INFO, __file__, 1, "hola", None, None)
    record.created = 0
    assert build_log_formatter().format(record) == "1970-01-01T00:00:00Z [INFO] band: hola"


def test_store_builds_one_engine_under_concurrent_first_use(monkeypatch):
    Store.reset()
    built = []
    real_create_engine = database.create_engine

    def slow_create_engine(*args, **kwargs):
        built.append(args[0])
        time.sleep(0.05)
        return real_create_engine(*args, **kwargs)

    monkeypatch.setattr(database, "create_engine", slow_create_engine)

    factories = []
    threads = [threading.Thread(target=lambda: factories.append(Store.get_session_factory())) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(built) == 1
    assert len(set(map(id, factories))) == 1
    assert factories[0] is Store.get_session_factory()
