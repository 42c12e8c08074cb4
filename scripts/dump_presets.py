#!/usr/bin/env python3
"""Dump the presets stored in a stance preset file.

Prints every preset with its raw values **and** the per-wheel transforms
(metres / radians) the panel would push to the host when it is loaded,
so a preset file can be checked outside the simulator.

Usage
-----
::

    python scripts/dump_presets.py path/to/config_presets.json

Options::

    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    --index N            Only dump the preset at 1-based index N
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pystance import Preset, PresetRepository, StanceField, compute_transforms  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _preset_to_dict(index: int, preset: Preset) -> dict[str, Any]:
    return {
        "index": index,
        "name": preset.name,
        "saved_at": preset.saved_at.isoformat(),
        "data": preset.to_json_dict()["data"],
        "transforms": [
            {
                "wheel": t.wheel.short_name,
                "lateral_m": t.lateral,
                "height_m": t.height,
                "camber_rad": t.camber,
            }
            for t in compute_transforms(preset.data)
        ],
    }


def _format_preset(index: int, preset: Preset) -> list[str]:
    out = [_section(f"#{index} {preset.name}")]
    out.append(f"  saved_at   : {preset.saved_at.isoformat()}")
    out.append(f"  multiplier : {preset.data.global_multiplier:.2f}x")
    for field in StanceField:
        values = ", ".join(f"{v:8.2f}" for v in preset.data.values(field))
        out.append(f"  {field.label:<11}: [{values}]")
    out.append("  transforms :")
    for t in compute_transforms(preset.data):
        out.append(f"    {t.wheel.short_name}  lateral={t.lateral:+.4f} m  height={t.height:+.4f} m  camber={t.camber:+.4f} rad")
    return out


# ── main ─────────────────────────────────────────────────────


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump stance presets")
    parser.add_argument("preset_file", type=Path, help="Preset JSON file")
    parser.add_argument("--json", dest="json_mode", action="store_true", help="JSON output")
    parser.add_argument("--output", "-o", help="Write output to file")
    parser.add_argument("--index", type=int, help="Only this 1-based preset index")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    repository = PresetRepository(args.preset_file)
    repository.load()
    if repository.last_error is not None:
        print(f"Error: {repository.last_error}", file=sys.stderr)
        return 1

    selected = list(enumerate(repository, start=1))
    if args.index is not None:
        selected = [(i, p) for i, p in selected if i == args.index]
        if not selected:
            print(f"Error: no preset at index {args.index}", file=sys.stderr)
            return 1

    if args.json_mode:
        payload = json.dumps([_preset_to_dict(i, p) for i, p in selected], indent=2, ensure_ascii=False)
    else:
        lines = [_section(f"{args.preset_file} ({len(repository)} presets)")]
        for i, p in selected:
            lines.extend(_format_preset(i, p))
        payload = "\n".join(lines)

    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Output written to {args.output}", file=sys.stderr)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
