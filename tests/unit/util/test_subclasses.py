import pytest

from unpair.util.subclasses import get_all_subclasses, get_subclass


class Root:
    pass


class Child(Root):
    pass


class GrandChild(Child):
    pass


class Diamond(Child, Root):
    pass


def test_get_all_subclasses_at_any_depth() -> None:
    subclasses = get_all_subclasses(Root)
    assert set(subclasses) == {Child, GrandChild, Diamond}
    assert len(subclasses) == 3


def test_get_subclass_by_name() -> None:
    assert get_subclass(Root, "GrandChild") is GrandChild


def test_get_subclass_unknown_name() -> None:
    with pytest.raises(KeyError):
        get_subclass(Root, "Missing")
