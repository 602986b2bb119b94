"""Testes do logging estruturado (config.logging)."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    CorrelationIdFilter,
    PiiMaskingFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
    mask_pii,
)
from config.logging.config import DEFAULT_SERVICE_NAME, QUIET_LOGGERS


def _record(msg: str = "evento", args: tuple[object, ...] = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


@pytest.fixture
def restore_root() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root")
class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("INFO", logging.INFO), ("debug", logging.DEBUG), (" warning ", logging.WARNING)],
    )
    def test_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_single_handler_with_filters(self) -> None:
        logging.getLogger().handlers = [logging.NullHandler(), logging.NullHandler()]

        handler = configure_logging()

        assert logging.getLogger().handlers == [handler]
        kinds = {type(f) for f in handler.filters}
        assert kinds == {CorrelationIdFilter, PiiMaskingFilter}

    def test_masking_can_be_disabled(self) -> None:
        handler = configure_logging(mask_pii=False)
        assert not any(isinstance(f, PiiMaskingFilter) for f in handler.filters)

    def test_quiets_http_loggers(self) -> None:
        configure_logging(level="DEBUG")
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_json_line_on_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(
            service_name="leads_test",
            correlation_id_getter=lambda: "corr-1",
            stream=stream,
        )

        get_logger("extraction.services.pipeline").info(
            "leads_extracted", extra={"contact_count": 2, "strategy": "window"}
        )

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["message"] == "leads_extracted"
        assert payload["service"] == "leads_test"
        assert payload["correlation_id"] == "corr-1"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "extraction.services.pipeline"
        assert payload["contact_count"] == 2
        assert payload["timestamp"].endswith("+00:00")

    def test_pii_masked_in_output(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)

        get_logger("spotter").error("falha para %s", "ana@acme.com")

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["message"] == "falha para [EMAIL]"

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "extrator_leads"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_event_and_extra(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "spotter_sync.lead_id", reason="search_by_name", elapsed_ms=12.345)

        assert logger.info.call_args.args == ("fallback_applied",)
        assert logger.info.call_args.kwargs["extra"] == {
            "fallback_used": True,
            "component": "spotter_sync.lead_id",
            "reason": "search_by_name",
            "elapsed_ms": 12.35,
        }

    def test_optional_fields_omitted(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "contact_builder.name")

        extra = logger.info.call_args.kwargs["extra"]
        assert "reason" not in extra
        assert "elapsed_ms" not in extra


class TestCorrelationIdFilter:
    def test_injects_service_and_id(self) -> None:
        record = _record()
        assert CorrelationIdFilter("svc", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"  # type: ignore[attr-defined]
        assert record.service == "svc"  # type: ignore[attr-defined]

    def test_explicit_id_preserved(self) -> None:
        record = _record()
        record.correlation_id = "explicit"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit"

    def test_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""  # type: ignore[attr-defined]


class TestPiiMasking:
    """Testes para mask_pii e PiiMaskingFilter."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ana.souza@acme.com.br", "[EMAIL]"),
            ("WhatsApp: (11) 98888-7777", "WhatsApp: [PHONE]"),
            ("+55 21 3333-4444", "[PHONE]"),
            ("CNPJ 12.345.678/0001-90", "CNPJ [CNPJ]"),
            ("CPF 123.456.789-10", "CPF [CPF]"),
            ("contatos=12 chunks=3", "contatos=12 chunks=3"),
            ("", ""),
        ],
    )
    def test_mask_pii(self, text: str, expected: str) -> None:
        assert mask_pii(text) == expected

    def test_filter_rewrites_message(self) -> None:
        record = _record("lead %s criado", ("bruno@beta.com",))

        assert PiiMaskingFilter().filter(record) is True

        assert record.getMessage() == "lead [EMAIL] criado"

    def test_filter_keeps_clean_record(self) -> None:
        record = _record("spotter_send_finished %d", (3,))
        PiiMaskingFilter().filter(record)
        assert record.args == (3,)


class TestFormatter:
    def test_rename_map(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_keeps_accents(self) -> None:
        record = _record("importação concluída")
        record.correlation_id = ""
        record.service = "svc"

        output = create_json_formatter().format(record)

        assert "importação concluída" in output
