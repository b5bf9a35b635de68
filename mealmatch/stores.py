"""Caller-owned recipient and volunteer stores."""

from dataclasses import asdict, fields
from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, Iterator, List, Optional, TypeVar, Any

import pandas as pd

from .data import Recipient, Volunteer

T = TypeVar('T', Recipient, Volunteer)

_TRUE_STRINGS = {'true', 'yes', 'y', '1'}
_FALSE_STRINGS = {'false', 'no', 'n', '0'}


def _parse_flag(value: Any) -> bool:
    """Read a yes/no cell. Blank means True."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS or text == '':
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"Cannot read {value!r} as a yes/no flag")
    if pd.isna(value):
        return True
    return bool(value)


class _Store(ABC, Generic[T]):
    """Id-keyed collection of entities, iterated in insertion order.

    Subclasses set ``entity_type``, ``required_cols`` and ``_coerce``.
    """

    entity_type: type
    required_cols: tuple = ()

    def __init__(self, entities: Optional[Iterable[T]] = None):
        self._items: Dict[int, T] = {}
        for entity in entities or ():
            self.add(entity)

    def add(self, entity: T) -> None:
        if not isinstance(entity, self.entity_type):
            raise TypeError(
                f"{self.__class__.__name__} holds {self.entity_type.__name__}, "
                f"got {type(entity).__name__}"
            )
        if entity.id in self._items:
            raise ValueError(f"Duplicate {self.entity_type.__name__} id: {entity.id}")
        self._items[entity.id] = entity

    def get(self, entity_id: int) -> Optional[T]:
        return self._items.get(entity_id)

    def ids(self) -> List[int]:
        return list(self._items)

    def __getitem__(self, entity_id: int) -> T:
        return self._items[entity_id]

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    @classmethod
    @abstractmethod
    def _coerce(cls, record: Dict[str, Any]) -> T:
        """Build one entity from a record of plain or numpy values."""
        pass

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]):
        """Build a store from dicts keyed by the entity's field names."""
        return cls(cls._coerce(record) for record in records)

    @classmethod
    def from_frame(cls, df: pd.DataFrame):
        """Build a store from a DataFrame with one row per entity.

        Raises:
            TypeError: If df is not a DataFrame
            ValueError: If a required column is missing
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError("df must be a pandas DataFrame")

        missing_cols = set(cls.required_cols) - set(df.columns)
        if missing_cols:
            raise ValueError(
                f"Columns not found for {cls.entity_type.__name__}: {sorted(missing_cols)}"
            )

        return cls.from_records(df.to_dict(orient='records'))

    def to_frame(self) -> pd.DataFrame:
        columns = [f.name for f in fields(self.entity_type)]
        return pd.DataFrame([asdict(e) for e in self], columns=columns)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n={len(self)})"


class RecipientStore(_Store[Recipient]):
    """Recipients by id. The allocator decrements capacities in place."""

    entity_type = Recipient
    required_cols = ('id', 'name', 'capacity', 'urgency', 'distance')

    @classmethod
    def _coerce(cls, record: Dict[str, Any]) -> Recipient:
        # DataFrame rows carry numpy scalars
        return Recipient(
            id=int(record['id']),
            name=str(record['name']),
            capacity=int(record['capacity']),
            urgency=int(record['urgency']),
            distance=float(record['distance']),
        )

    def with_capacity(self) -> List[Recipient]:
        """Recipients that can still absorb at least one unit."""
        return [r for r in self if r.capacity > 0]

    def total_capacity(self) -> int:
        return sum(r.capacity for r in self)


class VolunteerStore(_Store[Volunteer]):
    """Volunteers by id. The allocator marks used volunteers unavailable."""

    entity_type = Volunteer
    required_cols = ('id', 'name', 'distance')

    @classmethod
    def _coerce(cls, record: Dict[str, Any]) -> Volunteer:
        return Volunteer(
            id=int(record['id']),
            name=str(record['name']),
            distance=float(record['distance']),
            available=_parse_flag(record.get('available', True)),
        )

    def available(self) -> List[Volunteer]:
        return [v for v in self if v.available]

    def reset_availability(self) -> None:
        """Make every volunteer available again, e.g. before the next run."""
        for volunteer in self:
            volunteer.available = True
