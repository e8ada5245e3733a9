import weakref

from .. import log
from ..exception import KeyNotFoundError, OutOfRangeError
from ..fifo import Queue

class BSTree(object):
    """Unbalanced binary search tree holding key/value pairs.

    Every node is the root of its own sub-tree, so all operations can be
    called on any node. A node without a key is an empty tree; the first
    insert fills it in place, and removals never replace the root object.

    Parent links are weak references. A handle to an inner node whose
    ancestors are no longer referenced anywhere reports is_root() as True,
    and remove() through it then overwrites that node in place as it would
    the root. Keep a reference to the real root while using inner handles.
    """

    def __init__(self, key=None, value=None, parent=None):
        self.key = key
        self.value = value
        self.parent = parent

        self.left = None
        self.right = None

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node):
        # children own nothing upwards
        self._parent = weakref.ref(node) if node is not None else None

    def is_empty(self):
        return self.key is None

    def is_root(self):
        return self.parent is None

    def _new_node(self, key, value, parent):
        return type(self)(key, value, parent)

    def insert(self, key, value):
        """Inserts value under key into the sub-tree rooted at this node.

        Keys equal to an existing key are routed into the right sub-tree,
        so duplicates coexist and nothing is overwritten.
        Time complexity: O(h)"""
        if self.is_empty():
            log.debug3("populating empty tree with key ", key)
            self.key = key
            self.value = value
            return

        x = self
        while True:
            if key < x.key:
                if x.left is None:
                    x.left = self._new_node(key, value, x)
                    return
                x = x.left
            else:
                if key == x.key:
                    log.debug2("duplicate key ", key, ", routing right")
                if x.right is None:
                    x.right = self._new_node(key, value, x)
                    return
                x = x.right

    def find_node(self, key):
        """Finds the first node with the given key on the search path.

        Raises KeyNotFoundError if there is none.
        Time complexity: O(h)"""
        x = self if not self.is_empty() else None
        while x is not None and key != x.key:
            if key < x.key:
                x = x.left
            else:
                x = x.right
        if x is None:
            raise KeyNotFoundError(key)
        return x

    def find(self, key):
        """Returns the value of find_node(key). Time complexity: O(h)"""
        return self.find_node(key).value

    def contains(self, key):
        try:
            self.find_node(key)
        except KeyNotFoundError:
            return False
        return True

    def remove(self, key):
        """Removes the first node with the given key on the search path.

        Raises KeyNotFoundError before touching the tree if key is absent.
        Time complexity: O(h)"""
        node = self.find_node(key)
        log.debug3("removing key ", key)
        node._remove()

    def _remove(self):
        if self.left is not None and self.right is not None:
            successor = self.right.minimum()
            log.debug3("replacing key ", self.key, " with successor ",
                    successor.key)
            self.key = successor.key
            self.value = successor.value
            successor._remove()
        elif self.left is not None:
            self._replace_with(self.left)
        elif self.right is not None:
            self._replace_with(self.right)
        else:
            self._replace_with(None)

    def _replace_with(self, node):
        """Splices this node out, putting node (or nothing) in its place.

        The root is overwritten in place instead of being unlinked."""
        parent = self.parent
        if parent is not None:
            if self is parent.left:
                parent.left = node
            elif self is parent.right:
                parent.right = node
            if node is not None:
                node.parent = parent
            self.parent = None
            self.left = None
            self.right = None
        elif node is not None:
            self.key = node.key
            self.value = node.value
            self.left = node.left
            self.right = node.right
            if self.left is not None:
                self.left.parent = self
            if self.right is not None:
                self.right.parent = self
            node.parent = None
            node.left = None
            node.right = None
        else:
            log.debug3("tree is now empty")
            self.key = None
            self.value = None
            self.left = None
            self.right = None

    def minimum(self):
        """Finds the node with the minimal key

        Returns None if the tree is empty
        Time complexity: O(h)"""
        if self.is_empty():
            return None
        x = self
        while x.left is not None:
            x = x.left
        return x

    def maximum(self):
        """Finds the node with the maximum key

        Time complexity: O(h)"""
        if self.is_empty():
            return None
        x = self
        while x.right is not None:
            x = x.right
        return x

    def successor(self):
        """Finds the node following this one in sorted order

        Time complexity: O(h)"""
        if self.right is not None:
            return self.right.minimum()
        x = self
        y = x.parent
        while y is not None and x is y.right:
            x = y
            y = y.parent
        return y

    def predecessor(self):
        """Finds the node preceding this one in sorted order

        Time complexity: O(h)"""
        if self.left is not None:
            return self.left.maximum()
        x = self
        y = x.parent
        while y is not None and x is y.left:
            x = y
            y = y.parent
        return y

    def size(self):
        """Returns the number of key/value pairs in the sub-tree.

        Time complexity: O(n)"""
        nodes = []
        self.inorder(nodes.append)
        return len(nodes)

    def inorder(self, f):
        """Does an inorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        if self.is_empty():
            return
        stack = []
        x = self
        while stack or x is not None:
            while x is not None:
                stack.append(x)
                x = x.left
            x = stack.pop()
            f(x)
            x = x.right

    def preorder(self, f):
        """Does a preorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        if self.is_empty():
            return
        stack = [self]
        while stack:
            x = stack.pop()
            f(x)
            # right first so the left sub-tree is visited first
            if x.right is not None:
                stack.append(x.right)
            if x.left is not None:
                stack.append(x.left)

    def dfs_inorder(self):
        values = []
        self.inorder(lambda x: values.append(x.value))
        return values

    def dfs_preorder(self):
        values = []
        self.preorder(lambda x: values.append(x.value))
        return values

    def bfs(self, start=None):
        """Returns the values of the sub-tree rooted at start (default: this
        node) level by level, left to right.

        Time complexity: O(n)
        """
        if start is None:
            start = self
        values = []
        if start.is_empty():
            return values

        queue = Queue()
        queue.enqueue(start)
        node = queue.dequeue()
        while node is not None:
            values.append(node.value)
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)
            node = queue.dequeue()
        return values

    def get_height(self, current_height=0):
        """Returns the number of edges on the longest path down to a leaf.

        A node without children has height 0.
        Time complexity: O(n)
        """
        height = current_height
        stack = [(self, current_height)]
        while stack:
            x, depth = stack.pop()
            if x.left is None and x.right is None:
                height = max(height, depth)
                continue
            if x.left is not None:
                stack.append((x.left, depth + 1))
            if x.right is not None:
                stack.append((x.right, depth + 1))
        return height

    def is_bst(self):
        """Checks that an inorder traversal yields non-decreasing keys."""
        keys = []
        self.inorder(lambda x: keys.append(x.key))
        for i in range(1, len(keys)):
            if keys[i] < keys[i - 1]:
                return False
        return True

    def find_kth_largest_value(self, k):
        """Returns the value stored under the k-th largest key (k=1 is the
        maximum).

        Raises OutOfRangeError unless 1 <= k <= size().
        Time complexity: O(n)
        """
        values = self.dfs_inorder()
        if k < 1 or k > len(values):
            raise OutOfRangeError(k, len(values))
        return values[len(values) - k]
