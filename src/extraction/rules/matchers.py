"""Matchers de campo — reconhecedores independentes e sem estado.

Cada matcher recebe uma linha (ou janela) e devolve o primeiro match
encontrado ou None. Não há pontuação de confiança: primeiro match vence.
"""

from __future__ import annotations

import re
from functools import lru_cache

from extraction.rules.gazetteer_loader import fold_text, load_gazetteers

MAX_PROPER_NAME_LENGTH = 50

_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}")

_URL_PATTERN = re.compile(r"https?://|www\.", re.IGNORECASE)
# Domínio solto que não faz parte de um email (ex.: "acme.com.br/contato")
_BARE_DOMAIN_PATTERN = re.compile(
    r"(?<![@\w.-])[a-z0-9-]+(?:\.[a-z0-9-]+)*\.(?:com|net|org|br|io|biz|info)\b(?![@.\w-]*@)",
    re.IGNORECASE,
)

_CNPJ_MARKER_PATTERN = re.compile(r"\bCNPJ\b", re.IGNORECASE)
_DOCUMENT_FRAGMENT_PATTERN = re.compile(
    r"\s*[-–|,]?\s*\b(?:CNPJ|CPF)\b[\s:.º°]*[\d\s./-]*",
    re.IGNORECASE,
)
_COMPANY_TRIM_CHARS = " -–|,;:"

_NAME_CONNECTORS = frozenset({"da", "de", "do", "das", "dos", "e", "di", "du"})
_NAME_EXTRA_CHARS = frozenset("'’.-")

_CITY_SEGMENT_SPLIT = re.compile(r"\s+[-–]\s+|[,/|]")


# ──────────────────────────────────────────────────────────────────────────────
# Padrões derivados do asset de gazetteers
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def _job_title_pattern() -> re.Pattern[str]:
    keywords = sorted(load_gazetteers().job_title_keywords, key=len, reverse=True)
    alternation = "|".join(re.escape(keyword) for keyword in keywords)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


@lru_cache(maxsize=1)
def _company_suffix_pattern() -> re.Pattern[str]:
    suffixes = sorted(load_gazetteers().company_suffixes, key=len, reverse=True)
    alternation = "|".join(re.escape(suffix) for suffix in suffixes)
    # Sensível a caixa: "me"/"sa" minúsculos são palavras comuns em português
    return re.compile(rf"(?<![\w.])(?:{alternation})(?![\w/])")


@lru_cache(maxsize=1)
def _city_label_pattern() -> re.Pattern[str]:
    labels = sorted(load_gazetteers().city_labels, key=len, reverse=True)
    alternation = "|".join(re.escape(label) for label in labels)
    return re.compile(rf"^\s*(?:{alternation})\s*[:\-–]\s*(?P<value>.+)$", re.IGNORECASE)


# ──────────────────────────────────────────────────────────────────────────────
# Matchers
# ──────────────────────────────────────────────────────────────────────────────


def match_email(line: str) -> str | None:
    """Primeiro email da linha, em minúsculas."""
    match = _EMAIL_PATTERN.search(line)
    return match.group(0).lower() if match else None


def contains_url(line: str) -> bool:
    """True se a linha contém URL ou domínio solto (fora de email)."""
    return bool(_URL_PATTERN.search(line) or _BARE_DOMAIN_PATTERN.search(line))


def names_known_source(line: str) -> bool:
    """True se a linha cita a fonte da raspagem (Casa dos Dados, LinkedIn...)."""
    lower = line.lower()
    return any(source in lower for source in load_gazetteers().known_sources)


def is_excluded_line(line: str) -> bool:
    """Linhas de fonte conhecida ou URL nunca preenchem campo algum."""
    return names_known_source(line) or contains_url(line)


def match_job_title(line: str) -> str | None:
    """Linha inteira se contiver palavra-chave de cargo como palavra inteira."""
    if _job_title_pattern().search(line):
        return line.strip()
    return None


def is_company_line(line: str) -> bool:
    """True se a linha tem sufixo societário (LTDA, S.A., ME...) ou marcador CNPJ."""
    return bool(_company_suffix_pattern().search(line) or _CNPJ_MARKER_PATTERN.search(line))


def strip_document_fragment(line: str) -> str:
    """Remove fragmento 'CNPJ 00.000.000/0001-00' (ou CPF) da linha."""
    cleaned = _DOCUMENT_FRAGMENT_PATTERN.sub(" ", line)
    return " ".join(cleaned.split()).strip(_COMPANY_TRIM_CHARS)


def match_company(line: str) -> str | None:
    """Nome da empresa sem sufixo societário e sem CNPJ.

    Exemplo:
        match_company("Acme Comércio LTDA - CNPJ 12.345.678/0001-90") -> "Acme Comércio"
    """
    if not is_company_line(line):
        return None
    name = strip_document_fragment(line)
    name = _company_suffix_pattern().sub(" ", name)
    name = " ".join(name.split()).strip(_COMPANY_TRIM_CHARS)
    return name or None


def _lookup_city(text: str) -> str | None:
    cities = load_gazetteers().cities
    canonical = cities.get(fold_text(text))
    if canonical:
        return canonical
    for segment in _CITY_SEGMENT_SPLIT.split(text):
        canonical = cities.get(fold_text(segment))
        if canonical:
            return canonical
    return None


def match_city(line: str) -> str | None:
    """Cidade por match exato no gazetteer (sem fuzzy).

    Aceita "Cidade: X" (rótulo explícito vale mesmo fora do gazetteer),
    "São Paulo - SP" e "Campinas, SP".
    """
    labelled = _city_label_pattern().match(line)
    if labelled:
        value = labelled.group("value").strip()
        canonical = _lookup_city(value)
        if canonical:
            return canonical
        first_segment = _CITY_SEGMENT_SPLIT.split(value)[0].strip()
        return first_segment or None
    return _lookup_city(line.strip())


def match_proper_name(line: str) -> str | None:
    """Linha com formato de nome próprio (só palavras capitalizadas).

    Conectores minúsculos (da, de, dos...) são aceitos entre palavras.
    Linhas feitas só de rótulos de campo ("Email", "Telefone Comercial")
    não são nomes.
    """
    text = " ".join(line.split())
    if len(text) < 2 or len(text) > MAX_PROPER_NAME_LENGTH:
        return None

    tokens = text.split(" ")
    for index, token in enumerate(tokens):
        if index > 0 and token in _NAME_CONNECTORS:
            continue
        if not token[0].isupper():
            return None
        if not all(ch.isalpha() or ch in _NAME_EXTRA_CHARS for ch in token):
            return None
    if tokens[-1] in _NAME_CONNECTORS:
        return None
    labels = load_gazetteers().field_labels
    if all(fold_text(token) in labels for token in tokens if token not in _NAME_CONNECTORS):
        return None
    return text
