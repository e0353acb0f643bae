import pytest

from cstrkit.demo import main


@pytest.fixture
def demo_output(capsys):
    status = main([])
    return status, capsys.readouterr().out


def test_exit_status(demo_output):
    status, _ = demo_output
    assert status == 0


def test_null_string_and_pointer(demo_output):
    _, out = demo_output
    assert "(null)" in out
    assert "(nil)" in out


def test_wrapped_values(demo_output):
    _, out = demo_output
    assert "ffffffff" in out
    assert "FFFFFFFF" in out
    assert "0x1Returns" not in out
    assert "0x1\t" in out


def test_failures_report_minus_one(demo_output):
    _, out = demo_output
    assert out.count("\tReturns: -1\n") == 2


def test_every_section_has_header(demo_output):
    _, out = demo_output
    for title in ["c c c c c", "s", "p", "d", "i", "u", "x", "X", "%", "null"]:
        assert f"\033[33m{title}\033[0m\n" in out


def test_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])