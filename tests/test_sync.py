import threading
import time

import pytest

from ossim.sync import BoundedBuffer, ReadersWriters, main, run_producer_consumer, run_readers_writers


def test_buffer_is_first_in_first_out():
    buffer = BoundedBuffer(3)
    for item in ("x", "y", "z"):
        buffer.put(item)
    assert [buffer.get() for _ in range(3)] == ["x", "y", "z"]


def test_buffer_rejects_zero_capacity():
    with pytest.raises(ValueError):
        BoundedBuffer(0)


def test_put_blocks_when_full():
    buffer = BoundedBuffer(2)
    buffer.put("a")
    buffer.put("b")
    worker = threading.Thread(target=buffer.put, args=("c",))
    worker.start()
    worker.join(timeout=0.2)
    assert worker.is_alive()
    assert buffer.get() == "a"
    worker.join(timeout=2)
    assert not worker.is_alive()
    assert [buffer.get(), buffer.get()] == ["b", "c"]


def test_get_blocks_when_empty():
    buffer = BoundedBuffer(2)
    received = []
    worker = threading.Thread(target=lambda: received.append(buffer.get()))
    worker.start()
    worker.join(timeout=0.2)
    assert worker.is_alive()
    buffer.put(42)
    worker.join(timeout=2)
    assert received == [42]
    assert len(buffer) == 0


def test_buffer_announces():
    messages = []
    buffer = BoundedBuffer(2, announce=messages.append)
    buffer.put(7)
    buffer.get()
    assert messages == ["Produced: 7", "Consumed: 7"]


def test_run_producer_consumer_preserves_items(capsys):
    produced, consumed = run_producer_consumer(20, 3, 0)
    assert produced == consumed
    assert len(produced) == 20
    assert all(0 <= item < 100 for item in produced)
    assert capsys.readouterr().out.count("Produced: ") == 20


def test_writes_increment_shared_value():
    shared = ReadersWriters()
    assert shared.write(1) == 1
    assert shared.write(2) == 2
    assert shared.read(1) == shared.data


def test_readers_writers_announce():
    messages = []
    shared = ReadersWriters(announce=messages.append)
    shared.read(1)
    shared.write(2)
    assert messages == ["Reader 1 is reading the data: 0", "Writer 2 has written data: 1"]


def test_readers_share_access():
    shared = ReadersWriters(delay=0.3)
    threads = [threading.Thread(target=shared.read, args=(i,)) for i in range(1, 4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert shared.peak_readers == len(threads)


def test_writer_waits_for_reader():
    shared = ReadersWriters(delay=0.3)
    start = time.monotonic()
    reader = threading.Thread(target=shared.read, args=(1,))
    reader.start()
    time.sleep(0.05)
    written = shared.write(1)
    elapsed = time.monotonic() - start
    reader.join()
    assert written == 1
    assert shared.data == 1
    assert elapsed >= 0.5


def test_run_readers_writers_final_value(capsys):
    assert run_readers_writers(3, 2, 4, 0) == 2 * 4
    assert capsys.readouterr().out.count("has written data") == 2 * 4


def test_run_readers_writers_rejects_negative():
    with pytest.raises(ValueError):
        run_readers_writers(-1, 1, 1, 0)


def test_main_producer_consumer(capsys):
    assert main(["producer-consumer", "--count", "4", "--delay", "0"]) == 0
    assert capsys.readouterr().out.count("Consumed: ") == 4