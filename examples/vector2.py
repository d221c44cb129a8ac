"""Simple Vector2 class using operator entries in the behavior table.

Usage:
    a = Vector2(1, 2)
    b = Vector2(3, 4)
    print(a + b)   # (4, 6)
    print(a * b)   # 11
    print(2 * a)   # (2, 4)
"""

from protoclass import Definition, create, is_


def init(self, x=0, y=0):
    self.x = x
    self.y = y


def stringify(self):
    return f"({self.x}, {self.y})"


def add(self, other):
    return Vector2(self.x + other.x, self.y + other.y)


def scale(self, scalar):
    return Vector2(self.x * scalar, self.y * scalar)


def dot(self, other):
    return self.x * other.x + self.y * other.y


def is_equal(self, other):
    return self.x == other.x and self.y == other.y


def _mul(a, b):
    # Vector * Vector is the dot product, Vector * number scales
    if is_(b, Vector2):
        return a.dot(b)
    return a.scale(b)


def _eq(a, b):
    if not is_(b, Vector2):
        return NotImplemented
    return a.is_equal(b)


def _hash(v):
    return hash((v.x, v.y))


Vector2 = create(
    Definition(
        init=init,
        stringify=stringify,
        add=add,
        scale=scale,
        dot=dot,
        is_equal=is_equal,
    ),
    {
        "__name__": "Vector2",
        "__str__": stringify,
        "__add__": add,
        "__mul__": _mul,
        "__rmul__": scale,
        "__eq__": _eq,
        "__hash__": _hash,
    },
)

if __name__ == "__main__":
    a = Vector2(1, 2)
    b = Vector2(3, 4)
    print(f"a + b = {a + b}")
    print(f"a * b = {a * b}")
    print(f"2 * a = {2 * a}")
