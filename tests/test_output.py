import io

from hellodemo.output import Output


def test_write():
    o = Output()
    ss = io.StringIO()
    o.write(ss, "hello world")
    assert ss.getvalue() == "hello world"


def test_write_returns_self_for_chaining():
    o = Output()
    ss = io.StringIO()
    result = o.write(ss, "hello").write(ss, " world")
    assert result is o
    assert ss.getvalue() == "hello world"


def test_write_empty_string_leaves_stream_empty():
    ss = io.StringIO()
    Output().write(ss, "")
    assert ss.getvalue() == ""