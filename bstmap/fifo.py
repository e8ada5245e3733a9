import collections

class Queue(object):
    """FIFO work-list used by level-order traversal."""

    def __init__(self):
        self._items = collections.deque()

    def enqueue(self, item):
        self._items.append(item)

    def dequeue(self):
        """Removes and returns the front item, or None if the queue is empty."""
        try:
            return self._items.popleft()
        except IndexError:
            return None

    def __len__(self):
        return len(self._items)
