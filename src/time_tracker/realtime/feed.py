"""In-process change feed.

Services publish a row-level event after each successful write; subscribers
registered per table are called synchronously, and a bounded history lets
browsers poll for what changed since the last sequence number they saw.
"""
from __future__ import annotations

import itertools
import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, List, Optional

from ..core.constants import DEFAULT_CHANGE_FEED_HISTORY
from ..core.enums import ChangeType

logger = logging.getLogger(__name__)

TABLES = ("employees", "time_logs")


@dataclass(frozen=True)
class ChangeEvent:
    seq: int
    table: str
    event_type: ChangeType
    new: Optional[dict] = None
    old: Optional[dict] = None

    def to_dict(self) -> dict:
        return {
            "seq": self.seq,
            "table": self.table,
            "eventType": self.event_type.value,
            "new": self.new,
            "old": self.old,
        }


Callback = Callable[[ChangeEvent], None]


@dataclass
class Subscription:
    table: str
    callback: Callback
    _feed: "ChangeFeed" = field(repr=False)

    def unsubscribe(self) -> None:
        self._feed._remove(self)


class ChangeFeed:
    def __init__(self, *, history_size: int = DEFAULT_CHANGE_FEED_HISTORY):
        self._lock = threading.Lock()
        self._seq = itertools.count(1)
        self._last_seq = 0
        self._history: Deque[ChangeEvent] = deque(maxlen=max(1, int(history_size)))
        self._subscribers: Dict[str, List[Subscription]] = {t: [] for t in TABLES}

    @property
    def last_seq(self) -> int:
        return self._last_seq

    def subscribe(self, table: str, callback: Callback) -> Subscription:
        self._check_table(table)
        sub = Subscription(table=table, callback=callback, _feed=self)
        with self._lock:
            self._subscribers[table].append(sub)
        return sub

    def _remove(self, sub: Subscription) -> None:
        with self._lock:
            subs = self._subscribers.get(sub.table, [])
            if sub in subs:
                subs.remove(sub)

    def publish(
        self,
        table: str,
        event_type: ChangeType,
        *,
        new: Optional[dict] = None,
        old: Optional[dict] = None,
    ) -> ChangeEvent:
        self._check_table(table)
        with self._lock:
            event = ChangeEvent(seq=next(self._seq), table=table, event_type=event_type, new=new, old=old)
            self._last_seq = event.seq
            self._history.append(event)
            subscribers = list(self._subscribers[table])

        for sub in subscribers:
            try:
                sub.callback(event)
            except Exception:
                logger.exception("Change feed subscriber failed for %s #%s", table, event.seq)
        return event

    def events_since(self, seq: int, *, table: Optional[str] = None) -> List[ChangeEvent]:
        if table is not None:
            self._check_table(table)
        with self._lock:
            return [e for e in self._history if e.seq > seq and (table is None or e.table == table)]

    @staticmethod
    def _check_table(table: str) -> None:
        if table not in TABLES:
            raise ValueError(f"Unknown table: {table!r}")
