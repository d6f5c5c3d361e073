from datetime import timedelta

from tgcp.ui.messages import BatchMsg, KeyMsg, SpinnerTickMsg, batch, tick


def test_keymsg_str():
    assert str(KeyMsg("enter")) == "enter"


def test_batch_empty():
    assert batch(None, None) is None


def test_batch_single():
    cmd = lambda: 1  # noqa: E731
    assert batch(None, cmd) is cmd


def test_batch_many():
    a = lambda: 1  # noqa: E731
    b = lambda: 2  # noqa: E731
    msg = batch(a, None, b)()
    assert isinstance(msg, BatchMsg)
    assert msg.commands == (a, b)


def test_tick_returns_factory_result():
    msg = tick(timedelta(0), SpinnerTickMsg)()
    assert isinstance(msg, SpinnerTickMsg)
    assert tick(0, lambda t: "done")() == "done"