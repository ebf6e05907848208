from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx

from ..core.exceptions import GatewayError, RecordWriteError
from .connection import GatewayConnection
from .envelope import Envelope
from .query import Filter, Paging, Query, SortSpec
from .repository import RecordGateway

logger = logging.getLogger(__name__)


class HttpRecordGateway(RecordGateway):
    def __init__(self, connection: GatewayConnection):
        self._connection = connection

    def _post(self, table: str, action: str, body: dict) -> Envelope:
        url = self._connection.table_url(table, action)
        try:
            response = self._connection.client().post(url, json=body)
        except httpx.HTTPError as e:
            raise GatewayError(f"Request to {table} failed: {e}", table=table) from e

        try:
            payload = response.json()
        except ValueError:
            raise GatewayError(
                f"Unexpected response from {table} (HTTP {response.status_code})",
                table=table,
                status_code=response.status_code,
            )

        envelope = Envelope.from_json(payload)
        if not envelope.success:
            raise GatewayError(
                envelope.message or f"Request to {table} failed (HTTP {response.status_code})",
                table=table,
                status_code=response.status_code,
            )
        return envelope

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
        query = Query.build(fields, filters=filters, sort=sort, paging=paging)
        try:
            return self._post(table, "fetch", query.to_params()).records()
        except GatewayError as e:
            logger.error("Error fetching %s records: %s", table, e)
            if raise_errors:
                raise
            return []

    def fetch_one(
        self,
        table: str,
        record_id: int,
        fields: Sequence[str],
        *,
        raise_errors: bool = False,
    ) -> Optional[dict]:
        query = Query.build(fields)
        try:
            return self._post(table, f"get/{int(record_id)}", query.to_params()).record()
        except GatewayError as e:
            logger.error("Error fetching %s record %s: %s", table, record_id, e)
            if raise_errors:
                raise
            return None

    def _write(self, table: str, action: str, body: dict) -> Envelope:
        envelope = self._post(table, action, body)
        failed = envelope.failed()
        if failed:
            logger.error("Failed to %s %d %s record(s): %s", action, len(failed), table, failed)
            first = failed[0].message or f"Failed to {action} {table} record"
            raise RecordWriteError(first, table=table, failures=failed)
        return envelope

    def _single_write(self, table: str, action: str, record: dict, *, raise_errors: bool) -> Optional[dict]:
        try:
            envelope = self._write(table, action, {"records": [record]})
        except GatewayError as e:
            logger.error("Error during %s on %s: %s", action, table, e)
            if raise_errors:
                raise
            return None

        successful = envelope.successful()
        if successful:
            return successful[0].data or dict(record)
        if envelope.results is None and envelope.record() is not None:
            return envelope.record()

        logger.error("No results returned from %s operation on %s", action, table)
        if raise_errors:
            raise GatewayError(f"No results returned from {action} operation", table=table)
        return None

    def create(self, table: str, record: dict, *, raise_errors: bool = False) -> Optional[dict]:
        return self._single_write(table, "create", dict(record), raise_errors=raise_errors)

    def update(self, table: str, record_id: int, changes: dict, *, raise_errors: bool = False) -> Optional[dict]:
        record = {"Id": int(record_id), **{k: v for k, v in changes.items() if k != "Id"}}
        return self._single_write(table, "update", record, raise_errors=raise_errors)

    def delete(self, table: str, record_ids: Sequence[int], *, raise_errors: bool = False) -> bool:
        try:
            self._write(table, "delete", {"RecordIds": [int(i) for i in record_ids]})
        except GatewayError as e:
            logger.error("Error deleting %s records %s: %s", table, list(record_ids), e)
            if raise_errors:
                raise
            return False
        return True
