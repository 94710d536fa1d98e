from __future__ import annotations
from typing import Any, Iterable, Iterator, List, Optional, overload

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from omfrec.errors import InvalidInput, OutOfMemory
from .move import MoveRecord


class MoveList:
    """Ordered, index-addressable moves of a REC file.

    Capacity is tracked apart from the element count. `reserve` only records
    a hint; deletes, inserts and `shrink_to_fit` pin the capacity to the exact
    count.
    """
    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Optional[Iterable[MoveRecord]] = None):
        self._items: List[MoveRecord] = list(items) if items is not None else []
        self._capacity = len(self._items)

    # sequence protocol
    def __len__(self) -> int: return len(self._items)
    def __iter__(self) -> Iterator[MoveRecord]: return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> MoveRecord: ...
    @overload
    def __getitem__(self, index: slice) -> List[MoveRecord]: ...
    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, MoveList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"MoveList(count={len(self._items)}, capacity={self._capacity})"

    @property
    def capacity(self) -> int: return self._capacity

    def to_list(self) -> List[MoveRecord]:
        return list(self._items)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        items = handler.generate_schema(List[MoveRecord])
        from_items = core_schema.no_info_after_validator_function(cls, items)
        return core_schema.json_or_python_schema(
            json_schema=from_items,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_items]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda moves: moves.to_list(), return_schema=items
            ),
        )

    # growth
    def reserve(self, hint: int) -> None:
        if hint > self._capacity:
            self._capacity = hint

    def append(self, record: MoveRecord) -> None:
        self._items.append(record)
        if len(self._items) > self._capacity:
            self._capacity = max(len(self._items), self._capacity * 2)

    def shrink_to_fit(self) -> None:
        self._capacity = len(self._items)

    # editing
    def delete_action(self, index: int) -> MoveRecord:
        """Remove and return the move at `index`; later moves shift down."""
        if not isinstance(index, int) or not (0 <= index < len(self._items)):
            raise InvalidInput(f"move index {index!r} out of range 0..{len(self._items) - 1}")
        removed = self._items.pop(index)
        self._capacity = len(self._items)
        return removed

    def insert_action(self, index: int, record: MoveRecord) -> int:
        """Insert `record` before `index`, clamping past-the-end to append.

        Returns the index the record landed at.
        """
        if record is None or not isinstance(index, int) or index < 0:
            raise InvalidInput(f"cannot insert {record!r} at {index!r}")
        index = min(index, len(self._items))
        try:
            self._items.insert(index, record)
        except MemoryError as e:
            raise OutOfMemory(f"cannot grow move list past {len(self._items)} entries") from e
        self._capacity = len(self._items)
        return index
