from unittest import mock

import pytest

from minitalk.client import main, parse_pid, send
from minitalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, Decoder, encode


def test_parse_pid_valid():
    assert parse_pid(["4242", "hello"]) == 4242


def test_parse_pid_leading_zeros():
    assert parse_pid(["0042", "x"]) == 42


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["123"],
        ["123", "a", "b"],
        ["12a", "text"],
        ["-5", "text"],
        ["+5", "text"],
        ["0", "text"],
        ["0000", "text"],
        ["", "text"],
    ],
)
def test_parse_pid_rejects(argv):
    with pytest.raises(ValueError):
        parse_pid(argv)


def test_send_emits_one_signal_per_bit():
    with mock.patch("minitalk.client.os.kill") as kill:
        send(777, "hi", delay=0)
    expected = [ONE_SIGNAL if b else ZERO_SIGNAL for b in encode("hi")]
    assert [c.args for c in kill.call_args_list] == [(777, s) for s in expected]


def test_send_signals_decode_back():
    with mock.patch("minitalk.client.os.kill") as kill:
        send(1, "round trip", delay=0)
    decoder = Decoder()
    results = [decoder.feed(1 if c.args[1] == ONE_SIGNAL else 0) for c in kill.call_args_list]
    assert results[-1] == "round trip"


def test_main_sends_message():
    with mock.patch("minitalk.client.os.kill") as kill, mock.patch(
        "minitalk.client.time.sleep"
    ) as sleep:
        status = main(["99", "abc"])
    assert status == 0
    assert kill.call_count == len(list(encode("abc")))
    assert sleep.call_count == kill.call_count


def test_main_rejects_bad_arguments():
    with mock.patch("minitalk.client.os.kill") as kill:
        status = main(["not-a-pid", "abc"])
    assert status == 1
    assert kill.call_count == 0