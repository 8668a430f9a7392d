from typing import TypeVar

C = TypeVar("C", bound=object)


def get_all_subclasses(cls: type[C]) -> list[type[C]]:
    """
    Collects every subclass of ``cls``, at any depth.

    :param type[C] cls: The root class.
    :return: A list with all the subclasses found, without duplicates.
    """
    found: list[type[C]] = []
    pending = list(cls.__subclasses__())
    while pending:
        subclass = pending.pop()
        if subclass not in found:
            found.append(subclass)
            pending.extend(subclass.__subclasses__())
    return found


def get_subclass(root_class: type[C], child_class_name: str) -> type[C]:
    """
    Finds a subclass of ``root_class`` by its class name.

    :param type[C] root_class: The root class.
    :param str child_class_name: The name of the subclass to retrieve.
    :return: The subclass with the given name (any level deep).
    :raises KeyError: If no subclass has that name.
    """
    for subclass in get_all_subclasses(root_class):
        if subclass.__name__ == child_class_name:
            return subclass
    raise KeyError(f"Unknown subclass: {child_class_name} of {root_class.__name__}")
