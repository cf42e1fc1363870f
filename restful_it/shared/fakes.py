from __future__ import annotations

import random
from typing import Any, Dict, Optional

__all__ = [
    "CORES",
    "fake_product_name",
    "fake_color",
    "fake_capacity",
    "fake_object_payload",
]

CORES = [
    "azure",
    "black",
    "blue",
    "gold",
    "green",
    "grey",
    "lavender",
    "maroon",
    "orange",
    "pink",
    "purple",
    "red",
    "silver",
    "white",
    "yellow",
]

_PRODUTO_ADJETIVO = [
    "Awesome",
    "Ergonomic",
    "Gorgeous",
    "Handcrafted",
    "Intelligent",
    "Practical",
    "Refined",
    "Rustic",
    "Sleek",
    "Small",
]

_PRODUTO_MATERIAL = [
    "Bronze",
    "Concrete",
    "Cotton",
    "Granite",
    "Metal",
    "Plastic",
    "Rubber",
    "Steel",
    "Wooden",
]

_PRODUTO_NOME = [
    "Bike",
    "Chair",
    "Computer",
    "Keyboard",
    "Laptop",
    "Mouse",
    "Phone",
    "Tablet",
    "Watch",
]


def _rng(rng: Optional[random.Random]) -> Any:
    # o módulo random expõe as mesmas funções de uma instância Random
    return rng if rng is not None else random


def fake_product_name(rng: Optional[random.Random] = None) -> str:
    r = _rng(rng)
    adjetivo = r.choice(_PRODUTO_ADJETIVO)
    material = r.choice(_PRODUTO_MATERIAL)
    nome = r.choice(_PRODUTO_NOME)
    return f"{adjetivo} {material} {nome}"


def fake_color(rng: Optional[random.Random] = None) -> str:
    return _rng(rng).choice(CORES)


def fake_capacity(rng: Optional[random.Random] = None) -> str:
    """Three random digits followed by ``" GB"`` (leading zeros allowed)."""

    digitos = "".join(str(_rng(rng).randint(0, 9)) for _ in range(3))
    return f"{digitos} GB"


def fake_object_payload(rng: Optional[random.Random] = None) -> Dict[str, Any]:
    return {
        "name": fake_product_name(rng),
        "data": {
            "color": fake_color(rng),
            "capacity": fake_capacity(rng),
        },
    }
