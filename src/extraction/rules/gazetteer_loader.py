"""Loader do asset YAML de gazetteers (cidades, cargos, sufixos, fontes).

IO local de arquivo versionado no repositório, carregado uma única vez.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"
GAZETTEERS_FILE = _ASSETS_DIR / "gazetteers.yaml"

_REQUIRED_KEYS = (
    "job_title_keywords",
    "company_suffixes",
    "known_sources",
    "city_labels",
    "cities",
)


class GazetteerAssetError(RuntimeError):
    """Erro ao carregar o asset de gazetteers."""


def fold_text(text: str) -> str:
    """Normaliza para comparação: sem acentos, casefold, espaços colapsados."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return " ".join(stripped.casefold().split())


@dataclass(frozen=True, slots=True)
class Gazetteers:
    """Listas fixas usadas pelos matchers."""

    job_title_keywords: tuple[str, ...]
    company_suffixes: tuple[str, ...]
    known_sources: tuple[str, ...]
    city_labels: tuple[str, ...]
    # rótulos soltos ("Email", "Telefone") que não podem virar nome; dobrados
    field_labels: frozenset[str]
    # chave dobrada (fold_text) -> nome canônico
    cities: dict[str, str]


def _as_str_tuple(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise GazetteerAssetError(f"Chave '{key}' deve ser lista de strings")
    return tuple(item.strip() for item in value if item.strip())


def parse_gazetteers(data: Any) -> Gazetteers:
    """Valida e converte o conteúdo YAML em Gazetteers."""
    if not isinstance(data, dict):
        raise GazetteerAssetError("Asset de gazetteers deve ser um mapeamento")
    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise GazetteerAssetError(f"Chaves ausentes no asset: {', '.join(missing)}")

    cities = _as_str_tuple(data, "cities")
    # opcional: assets antigos não têm a lista
    field_labels = _as_str_tuple(data, "field_labels") if "field_labels" in data else ()
    return Gazetteers(
        job_title_keywords=tuple(k.lower() for k in _as_str_tuple(data, "job_title_keywords")),
        company_suffixes=_as_str_tuple(data, "company_suffixes"),
        known_sources=tuple(s.lower() for s in _as_str_tuple(data, "known_sources")),
        city_labels=tuple(label.lower() for label in _as_str_tuple(data, "city_labels")),
        field_labels=frozenset(fold_text(label) for label in field_labels),
        cities={fold_text(city): city for city in cities},
    )


@lru_cache(maxsize=1)
def load_gazetteers() -> Gazetteers:
    """Carrega (com cache) o asset padrão de gazetteers."""
    if not GAZETTEERS_FILE.is_file():
        raise GazetteerAssetError(f"Asset nao encontrado: {GAZETTEERS_FILE.name}")
    with GAZETTEERS_FILE.open(encoding="utf-8") as handle:
        return parse_gazetteers(yaml.safe_load(handle))
