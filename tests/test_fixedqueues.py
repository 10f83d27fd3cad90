import pytest

from algocourse.fixedqueues import (
    ArrayStack,
    LinearQueue,
    QueueEmptyError,
    QueueFullError,
    RingQueue,
    StackEmptyError,
    StackOverflowError,
)


def test_stack_is_last_in_first_out():
    stack = ArrayStack()
    for value in (300, 400, 500):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [500, 400, 300]


def test_stack_format():
    stack = ArrayStack()
    for value in (300, 400, 500):
        stack.push(value)
    assert stack.format() == "STACK(3): 300 400 500 "


def test_empty_stack_format():
    assert ArrayStack().format() == "STACK(0): "


def test_stack_overflow():
    stack = ArrayStack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_stack_default_capacity():
    stack = ArrayStack()
    for value in range(128):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(128)


def test_stack_empty_pop():
    stack = ArrayStack()
    with pytest.raises(StackEmptyError):
        stack.pop()
    stack.push(1)
    stack.pop()
    with pytest.raises(IndexError):
        stack.pop()


def test_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(capacity=0)
    with pytest.raises(ValueError):
        RingQueue(capacity=0)


def test_linear_queue_fifo():
    queue = LinearQueue()
    values = [100, 200, 300, 400, 500]
    for value in values:
        queue.enqueue(value)
    out = []
    while len(queue):
        out.append(queue.dequeue())
    assert out == values


def test_linear_queue_empty():
    queue = LinearQueue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_linear_queue_never_reuses_slots():
    queue = LinearQueue(capacity=3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert len(queue) == 2
    with pytest.raises(QueueFullError):
        queue.enqueue(4)


def test_ring_queue_fifo():
    queue = RingQueue()
    values = [100, 200, 300, 400, 500]
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_ring_queue_holds_one_less_than_capacity():
    queue = RingQueue(capacity=4)
    for value in range(3):
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(99)
    assert len(queue) == 3


def test_ring_queue_wraps_around():
    queue = RingQueue(capacity=4)
    out = []
    for value in range(20):
        queue.enqueue(value)
        if len(queue) == 3:
            out.append(queue.dequeue())
    while len(queue):
        out.append(queue.dequeue())
    assert out == list(range(20))