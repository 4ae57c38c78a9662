import threading

from ciellab.treiber_stack import TreiberStack


class Node:
    def __init__(self, value=0):
        self.value = value
        self.next = self


def chain_values(head):
    values = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def test_pop_empty_returns_none():
    stack = TreiberStack()
    assert stack.pop() is None
    assert stack.pop_all() is None


def test_lifo_order():
    stack = TreiberStack()
    nodes = [Node(i) for i in range(5)]
    for node in nodes:
        stack.push(node)
    popped = [stack.pop() for _ in range(5)]
    assert popped == list(reversed(nodes))
    assert stack.pop() is None


def test_push_chain():
    stack = TreiberStack()
    bottom = Node(-1)
    stack.push(bottom)
    a, b, c = Node(1), Node(2), Node(3)
    a.next = b
    b.next = c
    stack.push(a, c)
    assert chain_values(stack.pop_all()) == [1, 2, 3, -1]
    assert stack.pop() is None


def test_pop_all_returns_whole_stack():
    stack = TreiberStack()
    for i in range(4):
        stack.push(Node(i))
    head = stack.pop_all()
    assert chain_values(head) == [3, 2, 1, 0]
    assert stack.pop_all() is None


def test_concurrent_push_then_drain():
    threads_num, ops = 8, 300
    stack = TreiberStack()
    barrier = threading.Barrier(threads_num)

    def worker(tid):
        barrier.wait()
        for j in range(ops):
            stack.push(Node(tid * ops + j))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_num)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    values = chain_values(stack.pop_all())
    assert sorted(values) == list(range(threads_num * ops))


def test_concurrent_push_and_pop_loses_nothing():
    threads_num, ops = 4, 300
    stack = TreiberStack()
    popped = []
    lock = threading.Lock()
    barrier = threading.Barrier(threads_num)

    def worker(tid):
        barrier.wait()
        mine = []
        for j in range(ops):
            stack.push(Node(tid * ops + j))
            node = stack.pop()
            if node is not None:
                mine.append(node.value)
        with lock:
            popped.extend(mine)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_num)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    rest = chain_values(stack.pop_all())
    assert sorted(popped + rest) == list(range(threads_num * ops))