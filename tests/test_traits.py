import pytest

from rustlings.lessons.traits import (
    Cow,
    Licensed,
    OtherSoftware,
    SomeSoftware,
    abs_all,
    append_bar,
    compare_license_types,
)


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_leaves_input_list_alone():
    original = ["Foo"]
    append_bar(original)
    assert original == ["Foo"]


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(3)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(), OtherSoftware())


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware(), SomeSoftware())


def test_compare_license_with_different_info():
    class Custom(Licensed):
        def licensing_info(self):
            return "other"

    assert compare_license_types(SomeSoftware(), Custom()) is False


def test_reference_mutation():
    borrowed = (-1, 0, 1)
    result = abs_all(Cow(borrowed))
    assert result.owned
    assert result.data == [1, 0, 1]
    assert borrowed == (-1, 0, 1)


def test_reference_no_mutation():
    borrowed = [0, 1, 2]
    result = abs_all(Cow(borrowed))
    assert not result.owned
    assert result.data is borrowed


def test_owned_no_mutation():
    result = abs_all(Cow([0, 1, 2], owned=True))
    assert result.owned
    assert result.data == [0, 1, 2]


def test_owned_mutation():
    data = [-1, 0, 1]
    result = abs_all(Cow(data, owned=True))
    assert result.owned
    assert result.data is data
    assert data == [1, 0, 1]


def test_cow_indexing_and_length():
    cow = Cow((5, -6))
    assert len(cow) == 2
    assert cow[1] == -6