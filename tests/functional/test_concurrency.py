"""Functional tests for interpreting independent effect trees concurrently."""

import asyncio
import queue
from threading import Thread

from pure_effect import Command, Effect, Success, effect_pipe, run_effect, run_effect_sync


class InFlight:
    """Tracks how many operations are running at once, per tree and overall."""

    def __init__(self) -> None:
        self.current: dict[str, int] = {}
        self.peak: dict[str, int] = {}
        self.total = 0
        self.peak_total = 0

    def enter(self, tree: str) -> None:
        self.current[tree] = self.current.get(tree, 0) + 1
        self.peak[tree] = max(self.peak.get(tree, 0), self.current[tree])
        self.total += 1
        self.peak_total = max(self.peak_total, self.total)

    def exit(self, tree: str) -> None:
        self.current[tree] -= 1
        self.total -= 1


def tracked_step(tracker: InFlight, tree: str, events: list[str]):
    """Build a pipeline step whose command yields to the event loop once."""

    def step(value: int) -> Effect:
        async def cmd_increment() -> int:
            tracker.enter(tree)
            events.append(f"{tree}:{value}")
            await asyncio.sleep(0)
            tracker.exit(tree)
            return value + 1

        return Command(cmd_increment, Success)

    return step


def test_commands_within_a_tree_are_sequential():
    """Test that separate trees interleave while each tree runs one command at a time."""
    tracker = InFlight()
    events: list[str] = []

    def flow(tree: str):
        return effect_pipe(*(tracked_step(tracker, tree, events) for _ in range(4)))

    async def main() -> list[Effect]:
        return await asyncio.gather(run_effect(flow("a")(0)), run_effect(flow("b")(10)))

    results = asyncio.run(main())

    assert results == [Success(4), Success(14)]
    assert tracker.peak == {"a": 1, "b": 1}
    assert tracker.peak_total == 2
    assert [e for e in events if e.startswith("a")] == ["a:0", "a:1", "a:2", "a:3"]
    assert [e for e in events if e.startswith("b")] == ["b:10", "b:11", "b:12", "b:13"]


def test_thread_isolation():
    """Test that trees interpreted in separate threads share no state."""
    results: queue.Queue[tuple[int, Effect]] = queue.Queue()

    def worker(thread_id: int) -> None:
        store: list[int] = []

        def cmd_push() -> int:
            store.append(thread_id)
            return len(store)

        def push(_: object) -> Effect:
            return Command(cmd_push, Success)

        flow = effect_pipe(*(push for _ in range(5)))
        results.put((thread_id, run_effect_sync(flow(None))))

    threads = [Thread(target=worker, args=(i,)) for i in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    collected: dict[int, Effect] = {}
    while not results.empty():
        thread_id, result = results.get()
        collected[thread_id] = result

    assert collected == {0: Success(5), 1: Success(5), 2: Success(5)}
