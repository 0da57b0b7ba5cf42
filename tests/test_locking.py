import asyncio
import threading
from collections import Counter

import pytest

from weighted_selector import WeightedSelector
from weighted_selector.core.locking import AsyncSelector, ThreadSafeSelector
from weighted_selector.core.roundrobin_selector import RoundRobinSelector
from weighted_selector.core.smooth_selector import SmoothSelector

def weighted(selector):
    selector.add('server1', 5)
    selector.add('server2', 2)
    selector.add('server3', 3)
    return selector

def test_thread_safe_selector_satisfies_contract():
    assert isinstance(ThreadSafeSelector(SmoothSelector()), WeightedSelector)
    assert isinstance(RoundRobinSelector(), WeightedSelector)

def test_thread_safe_selector_matches_wrapped_sequence():
    plain = weighted(SmoothSelector())
    wrapped = ThreadSafeSelector(weighted(SmoothSelector()))
    assert [wrapped.next() for _ in range(20)] == [plain.next() for _ in range(20)]

def test_concurrent_threads_keep_exact_proportions():
    wrapped = ThreadSafeSelector(weighted(RoundRobinSelector()))
    results = Counter()
    results_lock = threading.Lock()

    def worker():
        picks = [wrapped.next() for _ in range(250)]
        with results_lock:
            results.update(picks)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == {'server1': 500, 'server2': 200, 'server3': 300}

def test_thread_safe_selector_lifecycle():
    wrapped = ThreadSafeSelector(RoundRobinSelector())
    wrapped.add('a', 1)
    wrapped.add('b', 1)
    assert len(wrapped) == 2
    assert wrapped.next() == 'a'
    wrapped.reset()
    assert wrapped.next() == 'a'
    assert wrapped.stats().total == 2
    wrapped.remove_all()
    assert wrapped.all() == []
    assert wrapped.next() is None

@pytest.mark.asyncio
async def test_async_selector_under_gather():
    wrapped = AsyncSelector(weighted(SmoothSelector()))
    picks = await asyncio.gather(*[wrapped.next() for _ in range(100)])
    assert Counter(picks) == {'server1': 50, 'server2': 20, 'server3': 30}

@pytest.mark.asyncio
async def test_async_selector_lifecycle():
    wrapped = AsyncSelector(SmoothSelector())
    await wrapped.add('a', 5)
    await wrapped.add('b', 1)
    await wrapped.add('c', 1)

    first = [await wrapped.next() for _ in range(3)]
    await wrapped.reset()
    assert [await wrapped.next() for _ in range(3)] == first == ['a', 'a', 'b']

    assert await wrapped.all() == [('a', 5), ('b', 1), ('c', 1)]
    assert (await wrapped.stats()).total_weight == 7

    await wrapped.remove_all()
    assert len(wrapped) == 0
    assert await wrapped.next() is None

@pytest.mark.asyncio
async def test_async_iteration():
    wrapped = AsyncSelector(weighted(RoundRobinSelector()))
    picks = []
    async for item in wrapped:
        picks.append(item)
        if len(picks) == 10:
            break
    assert Counter(picks) == {'server1': 5, 'server2': 2, 'server3': 3}
