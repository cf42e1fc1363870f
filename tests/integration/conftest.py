"""Shared setup for the objects API scenarios.

The target (in-process stub or live API), the request timeout and the retry
policy all come from :mod:`restful_it.shared.config`; nothing here mutates
process-wide defaults.
"""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from restful_it.domain.schemas import ObjectCreatedOut, ObjectOut
from restful_it.services.objects import build_target_client
from restful_it.services.request_spec import RequestSpec
from restful_it.shared.config import CLIENT_CONFIG, DEFAULT_RETRY_POLICY, ClientConfig
from restful_it.shared.fakes import fake_object_payload
from restful_it.shared.retry import RetryPolicy, run_with_retry

logger = logging.getLogger(__name__)


@pytest.fixture(scope="module")
def anyio_backend():
    # escopo de módulo para compartilhar o cliente e o objeto criado entre os cenários
    return "asyncio"


@pytest.fixture(scope="module")
def client_config() -> ClientConfig:
    return CLIENT_CONFIG


@pytest.fixture(scope="module")
def retry_policy() -> RetryPolicy:
    return DEFAULT_RETRY_POLICY


@pytest.fixture(scope="module")
async def client(anyio_backend, client_config: ClientConfig):
    async with build_target_client(client_config) as http:
        yield http


@pytest.fixture(scope="module")
async def created_object_id(anyio_backend, client: httpx.AsyncClient, retry_policy: RetryPolicy) -> str:
    """Create one object for the update and delete scenarios."""

    dados = fake_object_payload()
    logger.info("Dados enviados para criar o objeto: %s", json.dumps(dados, indent=2))

    object_id = await run_with_retry(
        lambda: RequestSpec(client)
        .post("/objects")
        .with_json(dados)
        .expect_status(httpx.codes.OK)
        .expect_json_schema(ObjectCreatedOut)
        .returns("id"),
        retry_policy,
    )
    logger.info("ID do objeto criado para testes: %s", object_id)

    completo = await run_with_retry(
        lambda: RequestSpec(client)
        .get(f"/objects/{object_id}")
        .expect_status(httpx.codes.OK)
        .expect_json_schema(ObjectOut)
        .returns("body"),
        retry_policy,
    )
    logger.info("Objeto criado completo: %s", json.dumps(completo, indent=2))
    return object_id
