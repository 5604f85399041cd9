import io

from loguru import logger

from tankfill.sinks import ListSink, LoggerSink, RecordingSleeper, StreamSink, no_sleep


def test_stream_sink_writes_lines():
    stream = io.StringIO()
    sink = StreamSink(stream)
    sink("first")
    sink("second")

    assert stream.getvalue() == "first\nsecond\n"


def test_list_sink_collects_lines():
    sink = ListSink()
    assert sink.text() == ""

    sink("a")
    sink("b")

    assert sink.lines == ["a", "b"]
    assert sink.text() == "a\nb\n"


def test_logger_sink_forwards_to_loguru():
    messages = []
    logger.remove()
    logger.add(lambda message: messages.append(message.record), level="DEBUG")

    LoggerSink("INFO")("Tank is full! Overflow occurs.")

    assert messages[0]["message"] == "Tank is full! Overflow occurs."
    assert messages[0]["level"].name == "INFO"


def test_sleepers():
    assert no_sleep(1.0) is None

    sleeper = RecordingSleeper()
    sleeper(1.0)
    sleeper(0.5)
    assert sleeper.calls == [1.0, 0.5]
