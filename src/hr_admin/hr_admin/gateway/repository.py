from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .query import Filter, Paging, SortSpec


class RecordGateway(Protocol):
    """Generic CRUD interface over the named tables of the record backend.

    Note (DIP): entity services depend on this interface, not on the HTTP client.
    Every call is one remote request. On failure reads return [] / None and
    writes return None / False, unless ``raise_errors`` asks for the error.
    """

    def fetch_all(
        self,
        table: str,
        fields: Sequence[str],
        *,
        filters: Sequence[Filter] = (),
        sort: Sequence[SortSpec] = (),
        paging: Optional[Paging] = None,
        raise_errors: bool = False,
    ) -> list[dict]:
        raise NotImplementedError

    def fetch_one(
        self,
        table: str,
        record_id: int,
        fields: Sequence[str],
        *,
        raise_errors: bool = False,
    ) -> Optional[dict]:
        raise NotImplementedError

    def create(self, table: str, record: dict, *, raise_errors: bool = False) -> Optional[dict]:
        raise NotImplementedError

    def update(self, table: str, record_id: int, changes: dict, *, raise_errors: bool = False) -> Optional[dict]:
        raise NotImplementedError

    def delete(self, table: str, record_ids: Sequence[int], *, raise_errors: bool = False) -> bool:
        raise NotImplementedError
