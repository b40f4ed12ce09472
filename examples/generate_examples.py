#!/usr/bin/env python3

import os
import sys

# Allow running this script directly (sys.path[0] is examples/).
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import coneform as gen


def generate(out_dir: str):
    os.makedirs(out_dir, exist_ok=True)

    examples = [
        ("default_glass.svg", gen.TrapParams()),
        ("pint_glass.svg", gen.TrapParams(d=3.5, b=0.6, h=5.9, o=1.5)),
        ("tumbler_flat_bottom.svg", gen.TrapParams(d=4.0, b=1.0, h=6.0, o=0.0)),
        ("jam_jar.svg", gen.TrapParams(d=2.6, b=0.5, h=3.5, o=0.5)),
    ]

    for filename, params in examples:
        pattern = gen.trap_pattern(params)
        if pattern is None:
            print(f"SKIP {filename}: no pattern for {params}")
            continue
        with open(os.path.join(out_dir, filename), "w", encoding="utf-8") as f:
            f.write(pattern.to_svg(meta={"inputs": params.__dict__}))

    # Screen preview at 3 digits, sampled lines instead of arcs.
    preview = gen.trap_pattern(gen.TrapParams(), precision=gen.PREVIEW_PRECISION, arcs=False)
    with open(os.path.join(out_dir, "default_glass_preview.svg"), "w", encoding="utf-8") as f:
        f.write(preview.to_svg())


if __name__ == "__main__":
    generate(os.path.join(os.path.dirname(__file__)))
