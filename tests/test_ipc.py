import io
import os

import pytest

from ossim.ipc import SEGMENT_SIZE, TextStats, count_details, fifo_exchange, main, read_shared, write_shared


@pytest.mark.parametrize(
    "text",
    ["hello world\n", "one\n", "the quick brown fox\njumps over\n"],
)
def test_count_details_matches_simple_text(text):
    stats = count_details(text)
    assert stats.chars == len(text)
    assert stats.words == len(text.split())
    assert stats.lines == text.count("\n")


def test_count_details_without_trailing_newline():
    stats = count_details("a b")
    assert stats.words == len("a b".split())
    assert stats.lines == 1


def test_count_details_counts_each_separator():
    assert count_details("a  b").words == 3


def test_count_details_empty():
    assert count_details("") == TextStats(0, 0, 0)


def test_text_stats_format():
    stats = count_details("abc")
    assert str(stats) == f"Characters: {len('abc')}\nWords: 1\nLines: 1"


def test_fifo_exchange_round_trip(tmp_path):
    sentence = "the child counts this sentence\n"
    output = tmp_path / "output.txt"
    result = fifo_exchange(sentence, tmp_path, output)
    assert result == str(count_details(sentence))
    assert output.read_text(encoding="utf-8") == result + "\n"
    assert not (tmp_path / "fifo1").exists()
    assert not (tmp_path / "fifo2").exists()


def _segment_name(tag):
    return f"ossim{tag}{os.getpid()}"


def test_shared_memory_round_trip():
    name = _segment_name("rt")
    assert write_shared(name, "shared text\n") == "shared text\n"
    assert read_shared(name) == "shared text\n"


def test_shared_memory_removed_after_read():
    name = _segment_name("rm")
    write_shared(name, "gone")
    assert read_shared(name) == "gone"
    assert read_shared(name) == ""


def test_shared_memory_overwrite_with_shorter_text():
    name = _segment_name("ow")
    write_shared(name, "a much longer message")
    write_shared(name, "short")
    assert read_shared(name) == "short"


def test_shared_memory_truncates_to_segment():
    name = _segment_name("tr")
    stored = write_shared(name, "x" * (SEGMENT_SIZE * 2))
    assert len(stored) == SEGMENT_SIZE - 1
    assert read_shared(name) == stored


def test_main_shared_memory(monkeypatch, capsys):
    name = _segment_name("cli")
    monkeypatch.setattr("sys.stdin", io.StringIO("from the command line\n"))
    assert main(["shm-write", "--name", name]) == 0
    assert main(["shm-read", "--name", name]) == 0
    out = capsys.readouterr().out
    assert "Data written to shared memory." in out
    assert "Data read from shared memory: from the command line" in out