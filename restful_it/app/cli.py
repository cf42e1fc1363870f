from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

import uvicorn

from restful_it.infra.logging import setup_logging
from restful_it.services.objects import ObjectsApi, build_target_client, run_smoke
from restful_it.shared.config import CLIENT_CONFIG, DEFAULT_RETRY_POLICY, ClientConfig
from restful_it.shared.errors import ApiError
from restful_it.shared.retry import RetryPolicy


def build_parser() -> argparse.ArgumentParser:
    """Cria o parser de argumentos da CLI."""

    parser = argparse.ArgumentParser("restful-it")
    sub = parser.add_subparsers(dest="cmd")
    sub.required = True

    serve = sub.add_parser("serve-stub", help="Inicia o stub da API de objetos via Uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    smoke = sub.add_parser("smoke", help="Cria, consulta e remove um objeto no alvo configurado")
    smoke.add_argument(
        "--retries",
        type=int,
        default=DEFAULT_RETRY_POLICY.max_retries,
        help="Número máximo de novas tentativas por requisição.",
    )
    smoke.add_argument(
        "--delay-ms",
        type=int,
        default=DEFAULT_RETRY_POLICY.delay_ms,
        help="Pausa entre tentativas, em milissegundos.",
    )

    return parser


def handle_serve(host: str, port: int) -> int:
    """Executa o comando ``serve-stub`` retornando um código de saída."""

    uvicorn.run("restful_it.adapters.stubs:app", host=host, port=port)
    return 0


async def _smoke(config: ClientConfig, policy: RetryPolicy) -> str:
    async with build_target_client(config) as client:
        resultado = await run_smoke(ObjectsApi(client, policy))
    return resultado.object_id


def handle_smoke(retries: int, delay_ms: int, config: Optional[ClientConfig] = None) -> int:
    """Executa o comando ``smoke`` retornando um código de saída."""

    try:
        policy = RetryPolicy(max_retries=retries, delay_ms=delay_ms)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        object_id = asyncio.run(_smoke(config or CLIENT_CONFIG, policy))
    except ApiError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(object_id)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging()

    if args.cmd == "serve-stub":
        return handle_serve(args.host, args.port)
    if args.cmd == "smoke":
        return handle_smoke(args.retries, args.delay_ms)

    parser.error("Comando inválido")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
