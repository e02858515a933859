# In-memory account registry: identifier -> TOTP secret record.
# Every read and write goes through one lock owned by the registry.

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple

from totp_demo.errors import DuplicateAccountError


@dataclass(frozen=True)
class AccountRecord:
    identifier: str
    secret: str = field(repr=False)
    issuer: str
    provisioning_uri: str = field(repr=False)
    created_at: float = field(default_factory=time.time)


class AccountRegistry:
    def __init__(self):
        # identifier -> AccountRecord, insertion ordered
        self._accounts: Dict[str, AccountRecord] = {}

        # identifiers handed out by the allocator but not inserted yet
        self._reserved: Set[str] = set()

        # re-entrant so the allocator can call reserve() while holding exclusive()
        self._lock = threading.RLock()

    @contextmanager
    def exclusive(self) -> Iterator["AccountRegistry"]:
        """
        Holds the registry lock for a multi-step sequence such as
        check-then-reserve. Nested calls from the same thread are allowed.
        """
        with self._lock:
            yield self

    def insert(self, identifier: str, record: AccountRecord) -> None:
        if record.identifier != identifier:
            raise ValueError(f"record identifier {record.identifier!r} does not match {identifier!r}")

        with self._lock:
            if identifier in self._accounts:
                raise DuplicateAccountError(identifier)
            self._accounts[identifier] = record
            self._reserved.discard(identifier)

    def lookup(self, identifier: str) -> Tuple[Optional[AccountRecord], bool]:
        with self._lock:
            record = self._accounts.get(identifier)
        return record, record is not None

    def contains(self, identifier: str) -> bool:
        with self._lock:
            return identifier in self._accounts

    def is_taken(self, identifier: str) -> bool:
        with self._lock:
            return identifier in self._accounts or identifier in self._reserved

    def reserve(self, identifier: str) -> bool:
        """
        Claims an unused identifier for a provisioning call in progress.
        Returns False if it is already provisioned or reserved.
        """
        with self._lock:
            if self.is_taken(identifier):
                return False
            self._reserved.add(identifier)
            return True

    def release(self, identifier: str) -> None:
        with self._lock:
            self._reserved.discard(identifier)

    def identifiers(self) -> List[str]:
        with self._lock:
            return list(self._accounts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
