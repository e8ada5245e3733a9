
class BSTMapError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class KeyNotFoundError(BSTMapError, KeyError):
    def __init__(self, key):
        super(KeyNotFoundError, self).__init__(key)
        self.key = key

    def __str__(self):
        return "key not found: " + str(self.key)

class OutOfRangeError(BSTMapError, IndexError):
    def __init__(self, k, size):
        super(OutOfRangeError, self).__init__(k, size)
        self.k = k
        self.size = size

    def __str__(self):
        return "k out of range: {0} (tree holds {1} value(s))".format(
                self.k, self.size)
