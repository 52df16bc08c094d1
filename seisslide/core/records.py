# seisslide/core/records.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator

import numpy as np

from .exceptions import InvalidRecord
from .metadata import RecordSetMeta


RECORD_KINDS = frozenset({"raw", "fft", "corr"})


@dataclass(frozen=True, slots=True)
class Record:
    """
    One processed window: raw samples, a spectrum or a cross-correlation.

    `timestamp` is the window start in Unix seconds; `payload` is opaque here.
    """
    timestamp: float
    payload: np.ndarray = field(repr=False)
    kind: str = "raw"

    def __post_init__(self) -> None:
        if self.kind not in RECORD_KINDS:
            raise InvalidRecord(f"Record.kind must be one of {sorted(RECORD_KINDS)}, got {self.kind!r}.")
        try:
            ts = float(self.timestamp)
        except (TypeError, ValueError) as e:
            raise InvalidRecord(f"Record.timestamp must be a real number, got {self.timestamp!r}.") from e
        if not math.isfinite(ts):
            raise InvalidRecord("Record.timestamp must be finite.")
        object.__setattr__(self, "timestamp", ts)
        object.__setattr__(self, "payload", np.asarray(self.payload))


@dataclass(frozen=True, slots=True)
class RecordSet:
    """
    Ordered collection of Records of a single kind.

    Indexing with an int returns a Record; a slice, an integer index array or
    a boolean mask returns a new RecordSet in the original relative order.
    """
    name: str
    records: tuple[Record, ...] = field(default_factory=tuple, repr=False)
    kind: str = "raw"
    meta: RecordSetMeta = field(default_factory=RecordSetMeta, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidRecord("RecordSet.name must be a non-empty string.")
        if self.kind not in RECORD_KINDS:
            raise InvalidRecord(f"RecordSet.kind must be one of {sorted(RECORD_KINDS)}, got {self.kind!r}.")
        if not isinstance(self.meta, RecordSetMeta):
            raise InvalidRecord("RecordSet.meta must be a RecordSetMeta instance.")

        recs = tuple(self.records)
        for rec in recs:
            if not isinstance(rec, Record):
                raise InvalidRecord("RecordSet.records values must be Record instances.")
            if rec.kind != self.kind:
                raise InvalidRecord(
                    f"Record kind mismatch: set is '{self.kind}' but record is '{rec.kind}'."
                )
        object.__setattr__(self, "records", recs)

    @classmethod
    def from_windows(
        cls,
        name: str,
        windows: np.ndarray,
        starts: Iterable[float],
        *,
        kind: str = "raw",
        meta: RecordSetMeta | None = None,
    ) -> "RecordSet":
        """Pair column i of `windows` with `starts[i]`, one Record per window."""
        w = np.asarray(windows)
        s = np.asarray(list(starts), dtype=float)
        if w.ndim != 2:
            raise InvalidRecord(f"`windows` must be 2D, got shape {w.shape}")
        if w.shape[1] != s.size:
            raise InvalidRecord(
                f"{w.shape[1]} windows but {s.size} start times; they must be paired."
            )
        records = tuple(
            Record(timestamp=float(s[i]), payload=w[:, i].copy(), kind=kind)
            for i in range(s.size)
        )
        return cls(
            name=name,
            records=records,
            kind=kind,
            meta=meta if meta is not None else RecordSetMeta(),
        )

    # ---- sequence API ----
    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, key):
        if isinstance(key, (int, np.integer)):
            return self.records[key]
        if isinstance(key, slice):
            return self._subset(self.records[key])

        idx = np.asarray(key)
        if idx.dtype == bool:
            if idx.shape != (len(self.records),):
                raise IndexError(
                    f"Boolean mask of shape {idx.shape} does not match {len(self.records)} records."
                )
            idx = np.flatnonzero(idx)
        elif idx.size == 0:
            idx = idx.astype(np.intp)
        elif not np.issubdtype(idx.dtype, np.integer):
            raise IndexError(f"Unsupported RecordSet index: {key!r}")
        return self._subset(tuple(self.records[int(i)] for i in idx.ravel()))

    @property
    def timestamps(self) -> np.ndarray:
        return np.array([rec.timestamp for rec in self.records], dtype=float)

    def rename(self, name: str) -> "RecordSet":
        return RecordSet(name=name, records=self.records, kind=self.kind, meta=self.meta.copy())

    def _subset(self, records: tuple[Record, ...]) -> "RecordSet":
        return RecordSet(name=self.name, records=records, kind=self.kind, meta=self.meta.copy())
