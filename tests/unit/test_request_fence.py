"""Unit tests for RequestFence."""

import threading

from presenter_hub.services.request_fence import RequestFence


def test_latest_ticket_is_current():
    fence = RequestFence()
    first = fence.issue()
    second = fence.issue()

    assert not fence.is_current(first)
    assert fence.is_current(second)
    assert fence.latest == second


def test_tickets_unique_across_threads():
    fence = RequestFence()
    tickets = []
    lock = threading.Lock()

    def worker():
        for _ in range(100):
            ticket = fence.issue()
            with lock:
                tickets.append(ticket)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(tickets)) == 400
    assert fence.latest == 400
