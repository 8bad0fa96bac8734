"""Scalar codec: decode/encode rules for the fixed wire scalar types."""
import pytest

from rtorrent_rpc.core.errors import StructureError
from rtorrent_rpc.core.values import BOOLEAN, FRACTION, INTEGER, STRING, VOID, as_list


def test_integer_accepts_ints_of_any_width():
    assert INTEGER.decode(5) == 5
    assert INTEGER.decode(2**40) == 2**40
    assert INTEGER.decode(-1) == -1


@pytest.mark.parametrize("value", ["5", True, None, 1.5, [1], b"5"])
def test_integer_rejects_other_shapes(value):
    with pytest.raises(StructureError) as exc:
        INTEGER.decode(value)
    assert "expected integer" in str(exc.value)
    assert repr(value) in exc.value.message


def test_fraction_is_thousandths():
    assert FRACTION.decode(1500) == pytest.approx(1.5)
    assert FRACTION.decode(0) == 0.0
    assert FRACTION.decode(2) == pytest.approx(0.002)


@pytest.mark.parametrize("value", [0.0, 1.5, 0.001, 12.345, 1000.0])
def test_fraction_recovers_thousandths_value(value):
    assert FRACTION.decode(round(value * 1000)) == pytest.approx(value)


def test_fraction_rejects_strings():
    with pytest.raises(StructureError):
        FRACTION.decode("1500")


def test_boolean_decode():
    assert BOOLEAN.decode(0) is False
    assert BOOLEAN.decode(7) is True
    assert BOOLEAN.decode(True) is True
    assert BOOLEAN.decode(False) is False
    with pytest.raises(StructureError):
        BOOLEAN.decode("1")


def test_string_rejects_bytes():
    assert STRING.decode("ubuntu.iso") == "ubuntu.iso"
    assert STRING.decode("") == ""
    with pytest.raises(StructureError):
        STRING.decode(b"ubuntu.iso")
    with pytest.raises(StructureError):
        STRING.decode(3)


def test_void_accepts_zero_and_nil():
    assert VOID.decode(0) is None
    assert VOID.decode(None) is None


@pytest.mark.parametrize("value", [1, "", False, [], -1])
def test_void_rejects_everything_else(value):
    with pytest.raises(StructureError):
        VOID.decode(value)


def test_encode():
    assert INTEGER.encode(3) == 3
    assert BOOLEAN.encode(True) == 1
    assert BOOLEAN.encode(False) == 0
    assert STRING.encode("/data") == "/data"
    with pytest.raises(TypeError):
        INTEGER.encode("3")
    with pytest.raises(TypeError):
        FRACTION.encode(1.5)
    with pytest.raises(TypeError):
        VOID.encode(None)


def test_as_list():
    assert as_list([1, "a"]) == [1, "a"]
    assert as_list([]) == []
    with pytest.raises(StructureError) as exc:
        as_list("not a list")
    assert "'not a list'" in str(exc.value)
    assert exc.value.code == "UNEXPECTED_STRUCTURE"
