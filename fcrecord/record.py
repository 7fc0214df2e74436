from dataclasses import dataclass

DEFAULT_EPSILON = 1e-12
FIELD_COUNT = 5


@dataclass(frozen=True, eq=False)
class Record:
    """Four integer indices and one float weight, in that fixed order."""
    i0: int
    i1: int
    i2: int
    i3: int
    weight: float

    @classmethod
    def from_str(cls, line):
        from fcrecord.parser import parse_record
        return parse_record(line)

    def astuple(self):
        return (self.i0, self.i1, self.i2, self.i3, self.weight)

    def indices(self):
        return (self.i0, self.i1, self.i2, self.i3)

    def __len__(self):
        return FIELD_COUNT

    def __getitem__(self, idx):
        return self.astuple()[idx]

    def __iter__(self):
        return iter(self.astuple())

    def equals(self, other):
        # NaN weights compare unequal, including to themselves
        return self.indices() == other.indices() and self.weight == other.weight

    def approx_equals(self, other, epsilon=DEFAULT_EPSILON):
        return approx_equals(self, other, epsilon)

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        return self.equals(other)

    # records are not hashable
    __hash__ = None


def approx_equals(a, b, epsilon=DEFAULT_EPSILON):
    """
    Indices must match exactly, weights within |a - b| <= epsilon.

    No special casing of non-finite weights: anything involving NaN is
    False, and so is inf vs inf since their difference is NaN.
    """
    if a.indices() != b.indices():
        return False
    return abs(a.weight - b.weight) <= epsilon
