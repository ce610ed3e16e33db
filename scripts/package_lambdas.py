#!/usr/bin/env python3
"""
Lambda bundle builder.

Creates one ``dist/<function>.zip`` per directory under ``backend/lambdas``
that contains a ``handler.py``. Each bundle holds the handler at the archive
root plus the ``shared/`` package the handlers import. Third-party
dependencies (requests, boto3) are expected to come from a Lambda layer.
"""
from __future__ import annotations

import argparse
import sys
import zipfile
from pathlib import Path
from typing import Dict, List


REPO_ROOT = Path(__file__).resolve().parents[1]
LAMBDA_ROOT = REPO_ROOT / "backend" / "lambdas"
SHARED_DIR_NAME = "shared"


def discover_functions(lambda_root: Path = LAMBDA_ROOT) -> List[str]:
    return sorted(
        path.parent.name
        for path in lambda_root.glob("*/handler.py")
        if path.parent.name != SHARED_DIR_NAME
    )


def _shared_sources(lambda_root: Path) -> List[Path]:
    return sorted((lambda_root / SHARED_DIR_NAME).glob("*.py"))


def build_package(function: str, dist_dir: Path, lambda_root: Path = LAMBDA_ROOT) -> Path:
    handler_path = lambda_root / function / "handler.py"
    if not handler_path.exists():
        raise FileNotFoundError(f"No handler.py for Lambda {function!r}")

    dist_dir.mkdir(parents=True, exist_ok=True)
    zip_path = dist_dir / f"{function}.zip"
    with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.write(handler_path, "handler.py")
        for source in _shared_sources(lambda_root):
            archive.write(source, f"{SHARED_DIR_NAME}/{source.name}")
    return zip_path


def build_all(dist_dir: Path, lambda_root: Path = LAMBDA_ROOT) -> Dict[str, Path]:
    return {function: build_package(function, dist_dir, lambda_root) for function in discover_functions(lambda_root)}


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "functions",
        nargs="*",
        help="Lambda directories to package. If omitted, package every handler.",
    )
    parser.add_argument(
        "--dist",
        type=Path,
        default=REPO_ROOT / "dist",
        help="Output directory (default: dist/)",
    )
    args = parser.parse_args()

    functions = args.functions or discover_functions()
    if not functions:
        print("No Lambda handlers found.", file=sys.stderr)
        return 1

    for function in functions:
        try:
            zip_path = build_package(function, args.dist)
        except FileNotFoundError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(f"{function:24} -> {zip_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
