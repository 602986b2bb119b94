"""Uma linha JSON por record (python-json-logger).

Exemplo:
    {"level": "INFO", "logger": "extraction.services.pipeline",
     "message": "leads_extracted", "correlation_id": "9f0c...",
     "service": "extrator_leads", "contact_count": 12,
     "timestamp": "2026-03-05T13:02:11.482+00:00"}
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# correlation_id e service são preenchidos pelos filtros do handler
LOG_FIELDS: tuple[str, ...] = ("levelname", "name", "message", "correlation_id", "service")

FIELD_RENAME_MAP = {"levelname": "level", "name": "logger"}


def create_json_formatter() -> JsonFormatter:
    return JsonFormatter(
        " ".join(f"%({name})s" for name in LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        timestamp=True,
        json_ensure_ascii=False,
    )
