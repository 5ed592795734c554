import numbers
import pytest
from map_params.models import ValueKind, kind_of


@pytest.mark.parametrize("value, kind", [
    ("", ValueKind.STRING),
    (False, ValueKind.BOOL),
    (0, ValueKind.INT),
    (2 ** 63 - 1, ValueKind.INT),
    (2 ** 63, ValueKind.UINT),
    (2 ** 64 - 1, ValueKind.UINT),
    (2 ** 64, ValueKind.OTHER),
    (-(2 ** 63) - 1, ValueKind.OTHER),
    (1.5, ValueKind.FLOAT),
    (None, ValueKind.OTHER),
    ({"a": 1}, ValueKind.OTHER),
])
def test_kind_of(value, kind):
    assert kind_of(value) is kind


class Int8:
    def __init__(self, value):
        self.value = value

    def __int__(self):
        return self.value


numbers.Integral.register(Int8)


def test_kind_of_registered_integral():
    assert kind_of(Int8(-5)) is ValueKind.INT
    assert kind_of(Int8(2 ** 63)) is ValueKind.UINT
