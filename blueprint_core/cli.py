"""
blueprint_core.cli
==================

Punto de entrada mínimo para generar un blueprint desde la terminal, sin
levantar la API:

    python -m blueprint_core.cli "Acme Repairs does on-site fixes"
    python -m blueprint_core.cli "..." --meta '{"source": "cli"}' --output bp.json

Útil para demos locales y smoke tests manuales del core.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .engine import generate_blueprint


def _json_value(raw: str):
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise argparse.ArgumentTypeError(f"--meta no es JSON válido: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ais-blueprint",
        description="Genera un documento blueprint a partir de una descripción.",
    )
    parser.add_argument("description", nargs="?", default="", help="Descripción del negocio")
    parser.add_argument("--meta", type=_json_value, default=None, help="Metadata JSON (opcional)")
    parser.add_argument("--output", type=Path, default=None, help="Archivo de salida (default: stdout)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    doc = generate_blueprint(args.description, args.meta)
    payload = json.dumps(doc.to_dict(), ensure_ascii=False, indent=2)

    if args.output is None:
        sys.stdout.write(payload + "\n")
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(payload, encoding="utf-8")
    print(f"✅ Blueprint generado en: {args.output.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
