# tests/test_tasks.py
import threading

import pytest

from pos_frontend.core.tasks import ThreadPoolRunner


@pytest.fixture()
def pool_runner(app):
    r = ThreadPoolRunner()
    yield r
    r.deleteLater()


def test_success_is_delivered_on_the_gui_thread(qtbot, pool_runner):
    got = []
    main = threading.get_ident()

    def work():
        return threading.get_ident()

    pool_runner.submit(work, lambda worker: got.append((worker, threading.get_ident())))
    qtbot.waitUntil(lambda: len(got) == 1, timeout=3000)

    worker_thread, callback_thread = got[0]
    assert callback_thread == main
    assert worker_thread != main
    assert pool_runner.pending_count() == 0


def test_error_goes_to_on_error(qtbot, pool_runner):
    errors = []

    def work():
        raise ValueError("bad")

    pool_runner.submit(work, lambda r: pytest.fail("should not succeed"), errors.append)
    qtbot.waitUntil(lambda: len(errors) == 1, timeout=3000)
    assert isinstance(errors[0], ValueError)


def test_cancelled_task_gets_no_callback(qtbot, pool_runner):
    gate = threading.Event()
    got = []

    handle = pool_runner.submit(lambda: gate.wait(2) and "late", got.append)
    handle.cancel()
    gate.set()

    qtbot.waitUntil(lambda: pool_runner.pending_count() == 0, timeout=3000)
    assert got == []
    assert handle.cancelled
