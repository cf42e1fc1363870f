"""In-memory stand-in for the public objects API used offline and in tests."""

from __future__ import annotations

import copy
import logging
import uuid
from datetime import datetime, timezone
from threading import RLock
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from restful_it import __version__
from restful_it.domain.schemas import ObjectIn, ObjectPatch

logger = logging.getLogger(__name__)

CATALOGUE: List[Dict[str, Any]] = [
    {"id": "1", "name": "Google Pixel 6 Pro", "data": {"color": "Cloudy White", "capacity": "128 GB"}},
    {"id": "2", "name": "Apple iPhone 12 Mini, 256GB, Blue", "data": None},
    {"id": "3", "name": "Apple iPhone 12 Pro Max", "data": {"color": "Cloudy White", "capacity GB": 512}},
    {"id": "4", "name": "Apple iPhone 11, 64GB", "data": {"price": 389.99, "color": "Purple"}},
    {"id": "5", "name": "Samsung Galaxy Z Fold2", "data": {"price": 689.99, "color": "Brown"}},
    {"id": "6", "name": "Apple AirPods", "data": {"generation": "3rd", "price": 120}},
    {
        "id": "7",
        "name": "Apple MacBook Pro 16",
        "data": {"year": 2019, "price": 1849.99, "CPU model": "Intel Core i9", "Hard disk size": "1 TB"},
    },
    {"id": "8", "name": "Apple Watch Series 8", "data": {"Strap Colour": "Elderberry", "Case Size": "41mm"}},
    {"id": "9", "name": "Beats Studio3 Wireless", "data": {"Color": "Red", "Description": "High-performance wireless noise cancelling headphones"}},
    {"id": "10", "name": "Apple iPad Mini 5th Gen", "data": {"Capacity": "64 GB", "Screen size": 7.9}},
    {"id": "11", "name": "Apple iPad Mini 5th Gen", "data": {"Capacity": "254 GB", "Screen size": 7.9}},
    {"id": "12", "name": "Apple iPad Air", "data": {"Generation": "4th", "Price": "419.99", "Capacity": "64 GB"}},
    {"id": "13", "name": "Apple iPad Air", "data": {"Generation": "4th", "Price": "519.99", "Capacity": "256 GB"}},
]


def _agora() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _erro(status_code: int, mensagem: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": mensagem})


def _nao_encontrado(object_id: str) -> JSONResponse:
    return _erro(404, f"Object with id={object_id} was not found.")


def _reservado(object_id: str) -> JSONResponse:
    return _erro(
        405,
        f"{object_id} is a reserved id and the data object of it cannot be overridden. "
        "You can create your own new object via POST request and try to send a PUT request to it.",
    )


class ObjectStore:
    """Thread-safe map of objects keyed by id; catalogue ids are read-only."""

    def __init__(self, catalogue: Optional[List[Dict[str, Any]]] = None) -> None:
        self._lock = RLock()
        seed = CATALOGUE if catalogue is None else catalogue
        self._objects: Dict[str, Dict[str, Any]] = {
            item["id"]: copy.deepcopy(item) for item in seed
        }
        self._reserved = frozenset(self._objects)

    def is_reserved(self, object_id: str) -> bool:
        return object_id in self._reserved

    def list(self, ids: Optional[List[str]] = None) -> List[Dict[str, Any]]:
        with self._lock:
            if ids:
                return [copy.deepcopy(self._objects[i]) for i in ids if i in self._objects]
            return [copy.deepcopy(item) for item in self._objects.values()]

    def get(self, object_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            item = self._objects.get(object_id)
            return copy.deepcopy(item) if item is not None else None

    def create(self, name: str, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        item = {"id": uuid.uuid4().hex, "name": name, "data": data}
        with self._lock:
            self._objects[item["id"]] = item
        return {**copy.deepcopy(item), "createdAt": _agora()}

    def update(self, object_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            item = self._objects.get(object_id)
            if item is None:
                return None
            item.update(fields)
            return {**copy.deepcopy(item), "updatedAt": _agora()}

    def delete(self, object_id: str) -> bool:
        with self._lock:
            return self._objects.pop(object_id, None) is not None


def create_stub_app(store: Optional[ObjectStore] = None) -> FastAPI:
    """Build a FastAPI app answering the ``/objects`` endpoints."""

    objects = store if store is not None else ObjectStore()
    app = FastAPI(title="restful-api.dev stub", version=__version__)
    app.state.store = objects

    @app.get("/objects")
    def listar(id: Optional[List[str]] = Query(default=None)):
        return objects.list(id)

    @app.get("/objects/{object_id}")
    def obter(object_id: str):
        item = objects.get(object_id)
        if item is None:
            return _nao_encontrado(object_id)
        return item

    @app.post("/objects")
    def criar(payload: ObjectIn):
        item = objects.create(payload.name, payload.data)
        logger.info("Stub: objeto %s criado", item["id"])
        return item

    @app.put("/objects/{object_id}")
    def substituir(object_id: str, payload: ObjectIn):
        if objects.is_reserved(object_id):
            return _reservado(object_id)
        item = objects.update(object_id, {"name": payload.name, "data": payload.data})
        if item is None:
            return _nao_encontrado(object_id)
        return item

    @app.patch("/objects/{object_id}")
    def atualizar(object_id: str, payload: ObjectPatch):
        if objects.is_reserved(object_id):
            return _reservado(object_id)
        item = objects.update(object_id, payload.model_dump(exclude_unset=True))
        if item is None:
            return _nao_encontrado(object_id)
        return item

    @app.delete("/objects/{object_id}")
    def remover(object_id: str):
        if objects.is_reserved(object_id):
            return _reservado(object_id)
        if not objects.delete(object_id):
            return _erro(404, f"Object with id = {object_id} doesn't exist.")
        logger.info("Stub: objeto %s removido", object_id)
        return {"message": f"Object with id = {object_id} has been deleted."}

    return app


app = create_stub_app()
