from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class AbstractSetDataStructure(ABC, Generic[T]):
    """
    Abstract base class for an ordered set of comparable values.

    Matching is based on ``<`` and ``>`` only: two values are the same
    element when neither compares less than the other.
    """

    @abstractmethod
    def insert(self, x: T) -> bool:
        """
        Insert a value into the set; duplicates are ignored.

        Parameters:
            x: The value to insert.

        Returns:
            bool: True if the value was added, False if it was already present.
        """
        pass

    @abstractmethod
    def remove(self, x: T) -> bool:
        """
        Remove a value from the set. Nothing is done if x is not found.

        Parameters:
            x: The value to remove.

        Returns:
            bool: True if a value was removed, False otherwise.
        """
        pass

    @abstractmethod
    def contains(self, x: T) -> bool:
        pass

    @abstractmethod
    def find_min(self) -> Optional[T]:
        """Return the smallest value, or None if the set is empty."""
        pass

    @abstractmethod
    def find_max(self) -> Optional[T]:
        """Return the largest value, or None if the set is empty."""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def make_empty(self) -> None:
        """Make the set logically empty."""
        pass

    @abstractmethod
    def in_order(self) -> Iterator[T]:
        """Yield all values in ascending order."""
        pass

    def __contains__(self, x: T) -> bool:
        return self.contains(x)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()
