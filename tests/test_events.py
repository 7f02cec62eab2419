import logging

from dagette.utils.events import ItemsDeleted, LayoutSkipped, publish, subscribe, unsubscribe


def test_publish_reaches_subscribers():
    got = []

    @subscribe(ItemsDeleted)
    def _h(evt):
        got.append(evt.count)

    publish(ItemsDeleted(count=2))
    unsubscribe(ItemsDeleted, _h)
    publish(ItemsDeleted(count=5))
    assert got == [2]


def test_events_are_timestamped():
    evt = LayoutSkipped(reason="x")
    assert evt.ts.tzinfo is not None


def test_failing_handler_is_logged_not_raised(caplog):
    @subscribe(ItemsDeleted)
    def _boom(evt):
        raise RuntimeError("boom")

    with caplog.at_level(logging.WARNING, logger="dagette"):
        publish(ItemsDeleted(count=1))
    assert "boom" in caplog.text
