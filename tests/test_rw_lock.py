import threading
import time
import unittest

from subber.services.rw_lock import ReadWriteLock


class ReadWriteLockTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lock = ReadWriteLock()

    def test_readers_share_the_lock(self) -> None:
        both_inside = threading.Barrier(2, timeout=2)
        errors = []

        def reader() -> None:
            with self.lock.read_locked():
                try:
                    both_inside.wait()
                except threading.BrokenBarrierError as e:
                    errors.append(e)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        self.assertEqual(errors, [])

    def test_writer_excludes_readers(self) -> None:
        events = []
        self.lock.acquire_write()

        def reader() -> None:
            with self.lock.read_locked():
                events.append("read")

        thread = threading.Thread(target=reader)
        thread.start()
        time.sleep(0.05)
        events.append("write-done")
        self.lock.release_write()
        thread.join(timeout=5)

        self.assertEqual(events, ["write-done", "read"])

    def test_waiting_writer_blocks_new_readers(self) -> None:
        events = []
        self.lock.acquire_read()

        def writer() -> None:
            with self.lock.write_locked():
                events.append("write")

        def late_reader() -> None:
            with self.lock.read_locked():
                events.append("late-read")

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        time.sleep(0.05)
        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        time.sleep(0.05)

        self.assertEqual(events, [])
        self.lock.release_read()
        writer_thread.join(timeout=5)
        reader_thread.join(timeout=5)

        self.assertEqual(events, ["write", "late-read"])

    def test_release_without_hold_raises(self) -> None:
        with self.assertRaises(RuntimeError):
            self.lock.release_read()
        with self.assertRaises(RuntimeError):
            self.lock.release_write()

    def test_context_managers_release_on_error(self) -> None:
        with self.assertRaises(ValueError):
            with self.lock.write_locked():
                raise ValueError("boom")
        # lock is free again
        with self.lock.read_locked():
            pass
        with self.lock.write_locked():
            pass


if __name__ == "__main__":
    unittest.main()
