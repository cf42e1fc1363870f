"""Convenience calls over :class:`RequestSpec` for the ``/objects`` resource."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from restful_it.adapters.stubs import create_stub_app
from restful_it.domain.schemas import DeletedOut, ObjectCreatedOut, ObjectOut
from restful_it.shared.config import ClientConfig
from restful_it.shared.fakes import fake_object_payload
from restful_it.shared.retry import RetryPolicy, run_with_retry
from restful_it.services.request_spec import RequestSpec, build_async_client

logger = logging.getLogger(__name__)

OK = httpx.codes.OK


def build_target_client(config: ClientConfig) -> httpx.AsyncClient:
    """Client for the configured target: the in-process stub or the live API."""

    transport: Optional[httpx.AsyncBaseTransport] = None
    if config.uses_stub:
        transport = httpx.ASGITransport(app=create_stub_app())
    return build_async_client(config, transport=transport)


class ObjectsApi:
    """Create/read/delete helpers, each request retried as a whole."""

    def __init__(self, client: httpx.AsyncClient, policy: Optional[RetryPolicy] = None) -> None:
        self.client = client
        self.policy = policy or RetryPolicy()

    def spec(self) -> RequestSpec:
        return RequestSpec(self.client)

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await run_with_retry(
            lambda: self.spec()
            .post("/objects")
            .with_json(payload)
            .expect_status(OK)
            .expect_json_schema(ObjectCreatedOut)
            .returns("body"),
            self.policy,
        )

    async def get(self, object_id: str) -> Dict[str, Any]:
        return await run_with_retry(
            lambda: self.spec()
            .get(f"/objects/{object_id}")
            .expect_status(OK)
            .expect_json_schema(ObjectOut)
            .returns("body"),
            self.policy,
        )

    async def delete(self, object_id: str) -> Dict[str, Any]:
        return await run_with_retry(
            lambda: self.spec()
            .delete(f"/objects/{object_id}")
            .expect_status(OK)
            .expect_json_schema(DeletedOut)
            .returns("body"),
            self.policy,
        )


@dataclass
class SmokeResult:
    object_id: str
    created: Dict[str, Any]
    fetched: Dict[str, Any]
    deleted: Dict[str, Any]


async def run_smoke(api: ObjectsApi, payload: Optional[Dict[str, Any]] = None) -> SmokeResult:
    """Create a fake object, read it back and delete it."""

    dados = payload or fake_object_payload()
    created = await api.create(dados)
    object_id = created["id"]
    logger.info("Objeto criado para smoke: %s", object_id)
    fetched = await api.get(object_id)
    deleted = await api.delete(object_id)
    logger.info("Objeto %s removido", object_id)
    return SmokeResult(object_id=object_id, created=created, fetched=fetched, deleted=deleted)
