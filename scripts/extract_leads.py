#!/usr/bin/env python3
"""Extrai contatos de um arquivo de texto e gera o CSV de contatos.

Uso:
    python scripts/extract_leads.py resultados.txt --output contatos.csv
    python scripts/extract_leads.py resultados.txt --strategy header
    cat resultados.txt | python scripts/extract_leads.py -

Padrao: imprime o CSV na saida padrao.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from app.bootstrap import initialize_app
from app.services.contact_export import export_contacts_csv
from config.settings import (
    AcceptancePolicy,
    CompanyHeuristic,
    SegmenterStrategy,
    get_extraction_settings,
)
from extraction.services.pipeline import ExtractionPipeline
from utils.errors import InputTooLargeError, NoContactsFoundError

EXIT_OK = 0
EXIT_NO_CONTACTS = 1
EXIT_INPUT_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        help="Arquivo de texto com os resultados colados ('-' para stdin).",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Arquivo CSV de saida. Se omitido, imprime na saida padrao.",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in SegmenterStrategy],
        default=None,
        help="Estrategia de segmentacao (padrao: EXTRACTION_STRATEGY ou window).",
    )
    parser.add_argument(
        "--acceptance-policy",
        choices=[p.value for p in AcceptancePolicy],
        default=None,
        help="Campos minimos para emitir um contato.",
    )
    parser.add_argument(
        "--company-heuristic",
        choices=[h.value for h in CompanyHeuristic],
        default=None,
        help="Como inferir o campo empresa.",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding do arquivo de entrada.",
    )
    return parser.parse_args(argv)


def _read_input(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding=encoding)


def run(args: argparse.Namespace) -> int:
    settings = get_extraction_settings()
    overrides: dict[str, object] = {}
    if args.strategy:
        overrides["segmenter_strategy"] = SegmenterStrategy(args.strategy)
    if args.acceptance_policy:
        overrides["acceptance_policy"] = AcceptancePolicy(args.acceptance_policy)
    if args.company_heuristic:
        overrides["company_heuristic"] = CompanyHeuristic(args.company_heuristic)
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    try:
        text = _read_input(args.input, args.encoding)
    except OSError as exc:
        print(f"Erro ao ler {args.input}: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        result = ExtractionPipeline(settings).extract(text)
    except InputTooLargeError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INPUT_ERROR
    except NoContactsFoundError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_NO_CONTACTS

    csv_content = export_contacts_csv(result.contacts)
    if args.output:
        Path(args.output).write_text(csv_content, encoding="utf-8")
    else:
        sys.stdout.write(csv_content)

    print(
        f"[{result.strategy}] contatos={len(result.contacts)} "
        f"duplicados={len(result.duplicated)} chunks={result.chunk_count}",
        file=sys.stderr,
    )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    initialize_app()
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
