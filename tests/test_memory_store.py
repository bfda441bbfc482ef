import asyncio

from todo_server.app.schemas.todo import Todo
from todo_server.app.services.memory_store import InMemoryTodoStore, ReadWriteLock


def test_readers_share_the_lock():
    async def scenario():
        lock = ReadWriteLock()
        first_in = asyncio.Event()
        release = asyncio.Event()

        async def long_reader():
            async with lock.read():
                first_in.set()
                await release.wait()

        task = asyncio.create_task(long_reader())
        await first_in.wait()
        # A second reader must get in while the first one still holds the lock.
        async with lock.read():
            entered = True
        release.set()
        await task
        return entered

    assert asyncio.run(scenario()) is True


def test_writer_waits_for_readers():
    async def scenario():
        lock = ReadWriteLock()
        events = []
        reader_in = asyncio.Event()
        release = asyncio.Event()

        async def reader():
            async with lock.read():
                reader_in.set()
                await release.wait()
                events.append("reader done")

        async def writer():
            async with lock.write():
                events.append("writer")

        r = asyncio.create_task(reader())
        await reader_in.wait()
        w = asyncio.create_task(writer())
        await asyncio.sleep(0)
        assert events == []
        release.set()
        await asyncio.gather(r, w)
        return events

    assert asyncio.run(scenario()) == ["reader done", "writer"]


def test_waiting_writer_blocks_new_readers():
    async def scenario():
        lock = ReadWriteLock()
        events = []
        reader_in = asyncio.Event()
        release = asyncio.Event()

        async def first_reader():
            async with lock.read():
                reader_in.set()
                await release.wait()

        async def writer():
            async with lock.write():
                events.append("writer")

        async def late_reader():
            async with lock.read():
                events.append("late reader")

        r1 = asyncio.create_task(first_reader())
        await reader_in.wait()
        w = asyncio.create_task(writer())
        await asyncio.sleep(0)
        r2 = asyncio.create_task(late_reader())
        await asyncio.sleep(0)
        release.set()
        await asyncio.gather(r1, w, r2)
        return events

    assert asyncio.run(scenario()) == ["writer", "late reader"]


def test_writers_are_exclusive():
    async def scenario():
        lock = ReadWriteLock()
        active = 0
        peak = 0

        async def writer():
            nonlocal active, peak
            async with lock.write():
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0)
                active -= 1

        await asyncio.gather(*(writer() for _ in range(10)))
        return peak

    assert asyncio.run(scenario()) == 1


def test_cancelled_writer_does_not_block_readers():
    async def scenario():
        lock = ReadWriteLock()
        reader_in = asyncio.Event()
        release = asyncio.Event()

        async def reader():
            async with lock.read():
                reader_in.set()
                await release.wait()

        async def writer():
            async with lock.write():
                pass

        r = asyncio.create_task(reader())
        await reader_in.wait()
        w = asyncio.create_task(writer())
        await asyncio.sleep(0)
        w.cancel()
        await asyncio.gather(w, return_exceptions=True)
        # With the writer gone a new reader is admitted alongside the first.
        await asyncio.wait_for(_read_once(lock), timeout=1)
        release.set()
        await r
        return True

    assert asyncio.run(scenario()) is True


async def _read_once(lock):
    async with lock.read():
        pass


def test_list_preserves_insertion_order():
    store = InMemoryTodoStore()

    async def scenario():
        for i in (3, 1, 2):
            await store.insert(Todo(id=i, name=str(i)))
        return [t.id for t in await store.list()]

    assert asyncio.run(scenario()) == [3, 1, 2]


def test_toggle_waits_for_active_readers():
    store = InMemoryTodoStore()

    async def scenario():
        await store.insert(Todo(id=1, name="guarded"))
        async with store._lock.read():
            task = asyncio.create_task(store.toggle(1))
            for _ in range(5):
                await asyncio.sleep(0)
            toggled_while_reading = store._todos[1].completed
        await task
        return toggled_while_reading, store._todos[1].completed

    assert asyncio.run(scenario()) == (False, True)
