from hellodemo.utils import Utils


def test_generate_greeting_string():
    assert Utils().generate_greeting_string() == "hello world"


def test_generate_greeting_string_is_stable():
    u = Utils()
    first = u.generate_greeting_string()
    second = u.generate_greeting_string()
    assert first == "hello world"
    assert second == "hello world"


def test_separate_instances_agree():
    assert [Utils().generate_greeting_string() for _ in range(3)] == ["hello world"] * 3