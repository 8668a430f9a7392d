import copy
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional

from unpair.exceptions import FormatError
from unpair.types import Decoder, T

PAIR_SIZE = 2


@dataclass(frozen=True, eq=False)
class UnorderedPair(Generic[T]):
    """
    An immutable pair of two values of the same type where order does not matter.

    ``UnorderedPair(a, b)`` and ``UnorderedPair(b, a)`` are the same value: they compare
    equal and have the same hash, so the pair can be used as a dict key or set member
    to represent, for example, an undirected edge between two identifiers.

    The elements are stored in the order they were given. That order is visible through
    :meth:`to_tuple`, iteration and serialization, but never through ``==`` or ``hash``.

    :param T first: One of the two elements.
    :param T second: The other element.
    """

    first: T
    second: T

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnorderedPair):
            return NotImplemented
        return (self.first == other.first and self.second == other.second) or (
            self.first == other.second and self.second == other.first
        )

    def __hash__(self) -> int:
        # element hashes are sorted so the result ignores storage order
        low, high = sorted((hash(self.first), hash(self.second)))
        return hash((low, high))

    def __iter__(self) -> Iterator[T]:
        yield self.first
        yield self.second

    def __contains__(self, element: object) -> bool:
        return element == self.first or element == self.second

    def __copy__(self) -> "UnorderedPair[T]":
        return self.copy()

    def other(self, element: T) -> T:
        """
        Returns the element opposite to ``element``.

        For a pair used as an undirected edge, this is the neighbour of a node.

        :param T element: One of the elements of the pair.
        :return: The other element.
        :raises ValueError: If ``element`` is not part of the pair.
        """
        if element == self.first:
            return self.second
        if element == self.second:
            return self.first
        raise ValueError(f"{element!r} is not in {self!r}")

    def copy(self) -> "UnorderedPair[T]":
        """
        Duplicates the pair, shallow copying both elements.

        :return: A new pair equal to this one.
        """
        return type(self)(copy.copy(self.first), copy.copy(self.second))

    def into_ordered_tuple(self) -> tuple[T, T]:
        """
        Returns the elements in canonical ``(min, max)`` order.

        Elements must support ``<``. When both are equal the construction order is kept.

        :return: A tuple with the smaller element first.
        """
        if self.second < self.first:  # type: ignore[operator]
            return self.second, self.first
        return self.first, self.second

    def to_tuple(self) -> tuple[T, T]:
        """Returns the elements in construction order"""
        return self.first, self.second

    @classmethod
    def from_tuple(cls, pair: tuple[T, T]) -> "UnorderedPair[T]":
        """Builds a pair from an ordered two-tuple, keeping its order"""
        first, second = pair
        return cls(first, second)

    @classmethod
    def default(cls, factory: Callable[[], T]) -> "UnorderedPair[T]":
        """
        Builds the default pair for an element type.

        :param Callable[[], T] factory: Returns the default element, e.g. ``int`` or ``str``.
        :return: ``UnorderedPair(factory(), factory())``
        """
        return cls(factory(), factory())

    def to_sequence(self) -> list[T]:
        """
        Returns the structured form of the pair.

        The pair is represented as a two element list in construction order, which maps
        directly to a JSON array.

        :return: ``[first, second]``
        """
        return [self.first, self.second]

    @classmethod
    def from_sequence(
        cls,
        data: Any,
        element_type: Optional[type[T]] = None,
        decoder: Optional[Decoder[T]] = None,
    ) -> "UnorderedPair[T]":
        """
        Builds a pair from its structured form.

        The two positions are used as they come, without reordering, so
        ``from_sequence([a, b]) == from_sequence([b, a])``.

        :param Any data: A list or tuple with exactly two items.
        :param Optional[type[T]] element_type:
            If set, each element must be an instance of this type.
        :param Optional[Decoder[T]] decoder:
            If set, it is applied to each item to obtain the element.
            It runs before the ``element_type`` check.
        :return: The decoded pair.
        :raises FormatError:
            If ``data`` is not a two element list or tuple, or an element fails to decode.
        """
        if not isinstance(data, (list, tuple)):
            raise FormatError(
                f"expected a sequence of {PAIR_SIZE} elements, got {type(data).__name__}"
            )
        if len(data) != PAIR_SIZE:
            raise FormatError(
                f"expected a sequence of {PAIR_SIZE} elements, got {len(data)} elements"
            )
        first = _decode_element(data[0], 0, element_type, decoder)
        second = _decode_element(data[1], 1, element_type, decoder)
        return cls(first, second)


def _decode_element(
    item: Any,
    position: int,
    element_type: Optional[type[T]],
    decoder: Optional[Decoder[T]],
) -> T:
    if decoder is not None:
        try:
            item = decoder(item)
        except FormatError as ex:
            raise FormatError(ex.message, position) from ex
        except (TypeError, ValueError, KeyError) as ex:
            raise FormatError(f"cannot decode element {item!r}: {ex}", position) from ex
    if element_type is not None and not _is_instance(item, element_type):
        raise FormatError(
            f"expected {element_type.__name__}, got {type(item).__name__}", position
        )
    return item


def _is_instance(item: Any, element_type: type) -> bool:
    # bool subclasses int but is not accepted as one
    if isinstance(item, bool) and element_type is int:
        return False
    return isinstance(item, element_type)

