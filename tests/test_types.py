import dataclasses

from storuntime.types import InternalType, MemLocation, TypeInfo


def test_unknown_type_is_zero():
    info = TypeInfo()
    assert info.type == 0
    assert InternalType(0) is InternalType.UNKNOWN


def test_internal_type_values_are_consecutive():
    rebuilt = [InternalType(value) for value in range(len(InternalType))]
    assert rebuilt == list(InternalType)


def test_internal_type_round_trips_through_int():
    for member in InternalType:
        assert InternalType(int(member)) is member


def test_numeric_types_precede_string_types():
    rebuilt = [InternalType(value) for value in range(1, 7)]
    assert rebuilt == [
        InternalType.INT64,
        InternalType.DOUBLE,
        InternalType.BIGDECIMAL,
        InternalType.SSO_STRING,
        InternalType.HEAP_STRING,
        InternalType.RODATA_STRING,
    ]


def test_mem_location_order():
    infos = [TypeInfo(mem_location=location) for location in MemLocation]
    assert [info.mem_location.name for info in infos] == ["REGISTER", "STACK", "HEAP", "RODATA"]


def test_type_info_defaults():
    info = TypeInfo()
    assert info.type is InternalType.UNKNOWN
    assert info.is_constant is False
    assert info.needs_promotion is False
    assert info.const_value is None
    assert info.mem_location is MemLocation.REGISTER


def test_type_info_keeps_given_values():
    info = TypeInfo(
        InternalType.INT64,
        is_constant=True,
        const_value=42,
        mem_location=MemLocation.STACK,
    )
    assert info.type is InternalType.INT64
    assert info.is_constant is True
    assert info.const_value == 42
    assert info.mem_location is MemLocation.STACK


def test_type_info_replace_and_equality():
    info = TypeInfo(InternalType.SSO_STRING, const_value="Hello")
    promoted = dataclasses.replace(info, type=InternalType.HEAP_STRING, mem_location=MemLocation.HEAP)
    assert promoted.const_value == "Hello"
    assert promoted.type is InternalType.HEAP_STRING
    assert dataclasses.replace(promoted, type=InternalType.SSO_STRING, mem_location=MemLocation.REGISTER) == info