#!/usr/bin/env python3

import argparse
import json
import sys
import zipfile
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from coneform import TRAP_PARAM_LABELS, fmt, generate_svg


EXPECTED_ZIP_FILES = {
    "cut.svg",
    "pattern.json",
    "instructions.md",
}


@dataclass
class Case:
    name: str
    params: Dict[str, Any]
    expect_pattern: bool
    source_file: Path


def _read_case(path: Path) -> Case:
    data = json.loads(path.read_text(encoding="utf-8"))
    name = str(data.get("name", "")).strip() or path.stem
    params = data.get("params")
    if not isinstance(params, dict):
        raise TypeError(f"{path}: params must be an object/dict")
    return Case(name=name, params=params, expect_pattern=bool(data.get("expect_pattern", True)), source_file=path)


def _iter_cases(params_dir: Path) -> List[Case]:
    if not params_dir.exists():
        raise FileNotFoundError(f"Params dir not found: {params_dir}")

    cases: List[Case] = []
    for p in sorted(params_dir.glob("*.json")):
        cases.append(_read_case(p))

    if not cases:
        raise FileNotFoundError(f"No *.json found in: {params_dir}")

    return cases


def _find_error_warnings(warnings: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for w in warnings or []:
        sev = str((w or {}).get("severity", "")).lower()
        if sev == "error":
            out.append(w)
    return out


def _build_instructions_md(name: str, inputs: Dict[str, float]) -> str:
    measurements = "\n".join(
        f"- {TRAP_PARAM_LABELS[key]} ({key}): {fmt(value)} in" for key, value in inputs.items()
    )
    return (
        f"# Fruit Fly Trap: {name}\n\n"
        "## Measurements\n"
        f"{measurements}\n\n"
        "## Instructions\n"
        "1. Print `cut.svg` at 100% scale. Using scissors, cut along the dotted line to cut out the cone form.\n"
        "2. Tape the cone together along the cone form's flap line.\n"
        "3. Pour a small amount of fruit-fly-attracting liquid (e.g., apple cider vinegar) into the glass.\n"
        "   Be sure the liquid level is at least 1/4\" below the cone-bottom offset.\n"
        "4. Place the cone form in the glass. It may help to rub some water around the top rim of the glass\n"
        "   to form a seal.\n"
        "5. Set the trap near where you have fruit flies.\n"
    )


def _validate_svg(svg: str, *, name: str) -> None:
    if not isinstance(svg, str) or not svg.strip():
        raise ValueError(f"{name}: empty svg")
    s = svg.lstrip()
    if "<svg" not in s[:5000]:
        raise ValueError(f"{name}: svg does not look like SVG")
    if 'id="CUT"' not in s or 'id="FOLD"' not in s:
        raise ValueError(f"{name}: svg is missing the cut or fold path")


def _write_zip(out_path: Path, *, svg: str, name: str, pattern: Dict[str, Any], inputs: Dict[str, float]) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(out_path, "w", compression=zipfile.ZIP_DEFLATED) as z:
        z.writestr("cut.svg", svg)
        z.writestr("pattern.json", json.dumps(pattern, indent=2, sort_keys=True) + "\n")
        z.writestr("instructions.md", _build_instructions_md(name, inputs))

    with zipfile.ZipFile(out_path, "r") as z:
        names = set(z.namelist())
        if names != EXPECTED_ZIP_FILES:
            missing = sorted(EXPECTED_ZIP_FILES - names)
            extra = sorted(names - EXPECTED_ZIP_FILES)
            raise ValueError(
                f"{name}: zip contents mismatch. Missing={missing} Extra={extra} ({out_path})"
            )


def main(argv: List[str]) -> int:
    ap = argparse.ArgumentParser(description="Generate and validate cone form regression packs (ZIP) per case.")
    ap.add_argument(
        "--params-dir",
        default="examples/regression_cases",
        help="Directory containing *.json files with {name, params, expect_pattern} (default: %(default)s)",
    )
    ap.add_argument(
        "--out-dir",
        default="artifacts/regression_cones",
        help="Output directory for generated ZIPs (default: %(default)s)",
    )
    ap.add_argument(
        "--date",
        default=None,
        help="Override date (YYYYMMDD) for deterministic filenames; default is today.",
    )
    args = ap.parse_args(argv)

    params_dir = Path(args.params_dir)
    out_dir = Path(args.out_dir)

    if args.date:
        ymd = str(args.date).strip()
        if not (len(ymd) == 8 and ymd.isdigit()):
            raise ValueError("--date must be YYYYMMDD")
    else:
        ymd = date.today().strftime("%Y%m%d")

    cases = _iter_cases(params_dir)

    failures: List[Tuple[str, str]] = []
    for c in cases:
        try:
            res = generate_svg(c.params)
            svg = res.get("svg")
            errors = _find_error_warnings(res.get("warnings") or [])

            if not c.expect_pattern:
                if svg is not None or not errors:
                    raise ValueError("expected no pattern, but one was generated")
                print(f"OK  {c.name} -> no pattern ({', '.join(e.get('code') for e in errors)})")
                continue

            if errors:
                raise ValueError(f"Blocking errors returned: {errors}")
            _validate_svg(svg, name=c.name)

            out_path = out_dir / f"ConeForm_{c.name}_{ymd}.zip"
            _write_zip(out_path, svg=svg, name=c.name, pattern=res["pattern"], inputs=res["meta"]["inputs"])

            print(f"OK  {c.name} -> {out_path}")
        except (TypeError, ValueError, OSError) as e:
            failures.append((c.name, str(e)))
            print(f"FAIL {c.name}: {e}", file=sys.stderr)

    if failures:
        print("\nFailures:", file=sys.stderr)
        for name, msg in failures:
            print(f"- {name}: {msg}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
