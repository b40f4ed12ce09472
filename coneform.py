#!/usr/bin/env python3
"""
coneform: Flat cone-form patterns for a glass-fitted fruit fly trap

The trap is a paper cone (a frustum) sitting in a drinking glass. This file
unrolls that cone into a printable pattern:

- solve_cone        (apex radius, outer radius, sweep and flap angles)
- resolve_bounds    (tight extents, classified by the flap angle's quadrant)
- build_pattern     (cut outline + fold guide as SVG path primitives)
- is_feasible       (gate used by the Less/More measurement steps)

Outputs: print-scale SVG (inches by default) with a dashed cut line and a
light gray fold guide marking where the glue flap starts.
"""
from __future__ import annotations

import argparse, dataclasses, enum, json, logging, math, sys, textwrap
from dataclasses import dataclass
from typing import List, Tuple, Dict, Optional, Union

__version__ = "0.3"

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

# Cones with a bottom this close to the top diameter are nearly cylinders: the
# apex radius blows up and small measuring errors swing the pattern wildly.
BOTTOM_RATIO_LIMIT = 0.9

# The flap must stop before it wraps onto the form's start edge.
FLAP_THETA_LIMIT = 2 * math.pi
FLAP_THETA_LIMIT_STRICT = 0.9 * 2 * math.pi

DEFAULT_FLAP_LENGTH = 0.125
DEFAULT_LINE_WIDTH = 0.5 / 72
DEFAULT_UNITS = "in"

PRINT_PRECISION = 8
PREVIEW_PRECISION = 3
NAMED_PRECISIONS = {"print": PRINT_PRECISION, "preview": PREVIEW_PRECISION}

DASH_LENGTH_LINE_WIDTHS = 5

def fmt(n: float) -> str:
    return f"{n:.3f}".rstrip("0").rstrip(".")

def fmt_fixed(n: float, precision: int) -> str:
    """Fixed-digit formatting for pattern output; an exact zero stays a bare 0."""
    if n == 0:
        return "0"
    return f"{n:.{precision}f}"

def polar(radius: float, angle: float) -> Point:
    # Angle 0 points along +y and grows toward +x.
    return (radius * math.sin(angle), radius * math.cos(angle))

@dataclass
class WarningMsg:
    severity: str  # error|warn|info
    code: str
    message: str
    fix: str

def _warn_dicts(warns: List[WarningMsg]) -> List[dict]:
    return [w.__dict__.copy() for w in (warns or [])]

# ---------------------- Cone spec ----------------------

@dataclass(frozen=True)
class ConeSpec:
    """Physical cone measurements, all in the caller's length unit.

    `extra_length` extends the form radially past the frustum height (e.g. to
    reach over the glass rim). `line_width` only pads the bounding box and
    `units` is a display label.
    """

    diameter_top: float
    diameter_bottom: float
    height: float
    flap_length: float = DEFAULT_FLAP_LENGTH
    line_width: float = DEFAULT_LINE_WIDTH
    units: str = DEFAULT_UNITS
    extra_length: float = 0.0

    def __post_init__(self):
        for name in ("diameter_top", "diameter_bottom", "height", "flap_length", "line_width", "extra_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")
        for name in ("diameter_top", "diameter_bottom", "height", "line_width"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0")
        for name in ("flap_length", "extra_length"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

# ---------------------- Solver ----------------------

@dataclass(frozen=True)
class ConeGeometry:
    apex_radius: float
    outer_radius: float
    sweep_angle: float
    flap_angle: float

    @property
    def inner_arc_length(self) -> float:
        # Equals the bottom circumference, pi * diameter_bottom.
        return self.apex_radius * self.sweep_angle

    @property
    def quadrant(self) -> Quadrant:
        return Quadrant.classify(self.flap_angle)

def solve_cone(spec: ConeSpec, *,
               flap_limit: float = FLAP_THETA_LIMIT) -> Tuple[Optional[ConeGeometry], List[WarningMsg]]:
    """Unroll the frustum into its flat-pattern radii and angles.

    Returns `(None, warnings)` when no pattern exists for the spec; this is an
    expected outcome, not an error.
    """
    warns: List[WarningMsg] = []

    # Checked before the apex radius so equal diameters never divide by zero.
    if spec.diameter_bottom > BOTTOM_RATIO_LIMIT * spec.diameter_top:
        warns.append(WarningMsg("error", "CONE_TOO_SHALLOW",
                                f"Bottom diameter is more than {fmt(100 * BOTTOM_RATIO_LIMIT)}% of the top diameter; "
                                "the cone is too close to a cylinder.",
                                "Reduce the bottom diameter or increase the top diameter."))
        logger.debug(f"Rejected cone: bottom {spec.diameter_bottom} > {BOTTOM_RATIO_LIMIT} * top {spec.diameter_top}")
        return None, warns

    apex_radius = spec.height * spec.diameter_bottom / (spec.diameter_top - spec.diameter_bottom)
    outer_radius = apex_radius + spec.height + spec.extra_length
    sweep_angle = math.pi * spec.diameter_bottom / apex_radius
    flap_angle = sweep_angle + spec.flap_length / apex_radius

    if flap_angle > flap_limit:
        warns.append(WarningMsg("error", "FLAP_OVERLAP",
                                f"Flap angle {fmt(math.degrees(flap_angle))} deg exceeds the "
                                f"{fmt(math.degrees(flap_limit))} deg limit; the flap would overlap the form's start edge.",
                                "Increase the height or reduce the difference between the diameters."))
        logger.debug(f"Rejected cone: flap angle {flap_angle:.6f} > limit {flap_limit:.6f}")
        return None, warns

    return ConeGeometry(apex_radius=apex_radius, outer_radius=outer_radius,
                        sweep_angle=sweep_angle, flap_angle=flap_angle), warns

# ---------------------- Bounding box ----------------------

class Quadrant(enum.Enum):
    """Which 90 degree range the flap angle ends in: (0,90], (90,180], (180,270], (270,360]."""

    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4

    @classmethod
    def classify(cls, angle: float) -> Quadrant:
        if angle <= 0.5 * math.pi:
            return cls.Q1
        if angle <= math.pi:
            return cls.Q2
        if angle <= 1.5 * math.pi:
            return cls.Q3
        return cls.Q4

@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    def expanded(self, pad: float) -> Bounds:
        return Bounds(self.min_x - pad, self.min_y - pad, self.max_x + pad, self.max_y + pad)

    def contains(self, p: Point, tol: float = 0.0) -> bool:
        return (self.min_x - tol <= p[0] <= self.max_x + tol) and (self.min_y - tol <= p[1] <= self.max_y + tol)

# Every 90 degree axis the flap crosses pins one more side at +-outer radius.
_QUADRANT_BOUNDS = {
    Quadrant.Q1: lambda r, R, a: Bounds(0.0, r * math.cos(a), R * math.sin(a), R),
    Quadrant.Q2: lambda r, R, a: Bounds(0.0, R * math.cos(a), R, R),
    Quadrant.Q3: lambda r, R, a: Bounds(R * math.sin(a), -R, R, R),
    Quadrant.Q4: lambda r, R, a: Bounds(-R, -R, R, R),
}

def resolve_bounds(geometry: ConeGeometry) -> Bounds:
    """Axis-aligned extents of the sector plus flap, before any stroke padding."""
    extents = _QUADRANT_BOUNDS[geometry.quadrant]
    return extents(geometry.apex_radius, geometry.outer_radius, geometry.flap_angle)

def pattern_bounds(geometry: ConeGeometry, line_width: float) -> Bounds:
    # One line width on every side so the stroke is not clipped.
    return resolve_bounds(geometry).expanded(line_width)

# ---------------------- Path primitives ----------------------

@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

    def to_svg(self, precision: int) -> str:
        return f"M {fmt_fixed(self.x, precision)} {fmt_fixed(self.y, precision)}"

@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

    def to_svg(self, precision: int) -> str:
        return f"L {fmt_fixed(self.x, precision)} {fmt_fixed(self.y, precision)}"

@dataclass(frozen=True)
class ArcTo:
    radius: float
    large_arc: bool
    sweep: bool
    x: float
    y: float

    def to_svg(self, precision: int) -> str:
        r = fmt_fixed(self.radius, precision)
        return (f"A {r} {r} 0 {int(self.large_arc)} {int(self.sweep)} "
                f"{fmt_fixed(self.x, precision)} {fmt_fixed(self.y, precision)}")

@dataclass(frozen=True)
class ClosePath:
    def to_svg(self, precision: int) -> str:
        return "Z"

Segment = Union[MoveTo, LineTo, ArcTo, ClosePath]

@dataclass(frozen=True)
class PathPrimitive:
    segments: Tuple[Segment, ...]

    def to_svg_d(self, precision: int = PRINT_PRECISION) -> str:
        return " ".join(seg.to_svg(precision) for seg in self.segments)

    def points(self) -> List[Point]:
        return [(seg.x, seg.y) for seg in self.segments if not isinstance(seg, ClosePath)]

def cut_outline(geometry: ConeGeometry) -> PathPrimitive:
    """Inner arc out to the flap, flap edge, outer arc back to angle 0, close."""
    r = geometry.apex_radius
    R = geometry.outer_radius
    a = geometry.flap_angle
    large = a > math.pi
    return PathPrimitive((
        MoveTo(*polar(r, 0.0)),
        ArcTo(r, large, False, *polar(r, a)),
        LineTo(*polar(R, a)),
        ArcTo(R, large, True, *polar(R, 0.0)),
        ClosePath(),
    ))

def fold_guide(geometry: ConeGeometry) -> PathPrimitive:
    a = geometry.sweep_angle
    return PathPrimitive((
        MoveTo(*polar(geometry.apex_radius, a)),
        LineTo(*polar(geometry.outer_radius, a)),
    ))

def sample_cut_outline(geometry: ConeGeometry, count: int = 100) -> List[Point]:
    """Cut outline approximated by points: inner arc forward, outer arc back.

    For renderers without native arc support.
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    delta = geometry.flap_angle / count
    inner = [polar(geometry.apex_radius, delta * i) for i in range(count + 1)]
    outer = [polar(geometry.outer_radius, delta * i) for i in range(count, -1, -1)]
    return inner + outer

def polyline_path(points: List[Point], close: bool = True) -> PathPrimitive:
    if not points:
        return PathPrimitive(())
    segs: List[Segment] = [MoveTo(*points[0])]
    segs.extend(LineTo(x, y) for x, y in points[1:])
    if close:
        segs.append(ClosePath())
    return PathPrimitive(tuple(segs))

# ---------------------- Pattern ----------------------

@dataclass(frozen=True)
class ConePattern:
    width: str
    height: str
    view_box: str
    transform: str
    stroke_width: str
    dash_array: str
    cut_path: PathPrimitive
    fold_guide: PathPrimitive
    bounds: Bounds
    geometry: ConeGeometry
    units: str
    precision: int

    def as_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "viewBox": self.view_box,
            "transform": self.transform,
            "strokeWidth": self.stroke_width,
            "strokeDasharray": self.dash_array,
            "cutPath": self.cut_path.to_svg_d(self.precision),
            "foldGuide": self.fold_guide.to_svg_d(self.precision),
            "units": self.units,
            "precision": self.precision,
            "geometry": dataclasses.asdict(self.geometry),
        }

    def to_svg(self, meta: Optional[dict] = None) -> str:
        return svg_document(self, meta=meta)

def emit_pattern(geometry: ConeGeometry, bounds: Bounds, *, line_width: float, units: str = DEFAULT_UNITS,
                 precision: int = PRINT_PRECISION, arcs: bool = True) -> ConePattern:
    p = precision
    width = fmt_fixed(bounds.width, p)
    height = fmt_fixed(bounds.height, p)
    # Flip y and shift the box back into place in a single group transform.
    transform = f"scale(1, -1) translate(0, {fmt_fixed(-(bounds.min_y + bounds.max_y), p)})"
    if arcs:
        cut = cut_outline(geometry)
    else:
        cut = polyline_path(sample_cut_outline(geometry))
    return ConePattern(
        width=f"{width}{units}",
        height=f"{height}{units}",
        view_box=f"{fmt_fixed(bounds.min_x, p)} {fmt_fixed(bounds.min_y, p)} {width} {height}",
        transform=transform,
        stroke_width=fmt_fixed(line_width, p),
        dash_array=fmt_fixed(DASH_LENGTH_LINE_WIDTHS * line_width, p),
        cut_path=cut,
        fold_guide=fold_guide(geometry),
        bounds=bounds,
        geometry=geometry,
        units=units,
        precision=p,
    )

def build_pattern(spec: ConeSpec, *, precision: int = PRINT_PRECISION,
                  flap_limit: float = FLAP_THETA_LIMIT, arcs: bool = True) -> Optional[ConePattern]:
    geometry, _ = solve_cone(spec, flap_limit=flap_limit)
    if geometry is None:
        return None
    bounds = pattern_bounds(geometry, spec.line_width)
    return emit_pattern(geometry, bounds, line_width=spec.line_width, units=spec.units,
                        precision=precision, arcs=arcs)

def compute_pattern(diameter_top: float, diameter_bottom: float, height: float,
                    flap_length: float = DEFAULT_FLAP_LENGTH, line_width: float = DEFAULT_LINE_WIDTH,
                    units: str = DEFAULT_UNITS, extra_length: float = 0.0, *,
                    precision: int = PRINT_PRECISION, flap_limit: float = FLAP_THETA_LIMIT,
                    arcs: bool = True) -> Optional[ConePattern]:
    """Cone form pattern for the measurements, or None when none can be built."""
    spec = ConeSpec(diameter_top=diameter_top, diameter_bottom=diameter_bottom, height=height,
                    flap_length=flap_length, line_width=line_width, units=units, extra_length=extra_length)
    return build_pattern(spec, precision=precision, flap_limit=flap_limit, arcs=arcs)

def is_feasible(spec: ConeSpec, *, flap_limit: float = FLAP_THETA_LIMIT) -> bool:
    # Goes through the generator so the gate can never disagree with it.
    return build_pattern(spec, flap_limit=flap_limit) is not None

# ---------------------- SVG output ----------------------

def svg_header(pattern: ConePattern) -> str:
    return (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>\n"
        f"<svg xmlns=\"http://www.w3.org/2000/svg\" width=\"{pattern.width}\" height=\"{pattern.height}\" viewBox=\"{pattern.view_box}\">\n"
        f"  <desc>Generated by coneform v{__version__}</desc>\n"
    )

def svg_footer() -> str:
    return "</svg>\n"

def svg_document(pattern: ConePattern, meta: Optional[dict] = None) -> str:
    out = [svg_header(pattern)]
    if meta:
        meta_comment = "\n".join(textwrap.wrap(json.dumps(meta, ensure_ascii=False), width=120))
        out.append(f"  <!-- params: {meta_comment} -->\n")
    out.append(f'  <g transform="{pattern.transform}" fill="none" stroke="black" stroke-width="{pattern.stroke_width}">\n')
    out.append(f'    <path id="CUT" stroke-dasharray="{pattern.dash_array}" d="{pattern.cut_path.to_svg_d(pattern.precision)}"/>\n')
    out.append(f'    <path id="FOLD" stroke="lightgray" d="{pattern.fold_guide.to_svg_d(pattern.precision)}"/>\n')
    out.append("  </g>\n")
    out.append(svg_footer())
    return "".join(out)

# ---------------------- Glass trap ----------------------

DEFAULT_TRAP_PARAMS: Dict[str, float] = {"d": 3.0, "b": 0.7, "h": 4.5, "o": 1.0}

TRAP_PARAM_LIMITS: Dict[str, Tuple[float, float]] = {
    "d": (1.0, 36.0),
    "b": (0.1, 32.0),
    "h": (1.0, 24.0),
    "o": (0.0, 6.0),
}

TRAP_PARAM_LABELS: Dict[str, str] = {
    "d": "Glass inside-diameter",
    "b": "Cone bottom diameter",
    "h": "Glass height",
    "o": "Cone bottom-offset",
}

TRAP_STEP = 0.1
TRAP_STEP_DIGITS = 1

# Lets a raised cone reach up over the glass rim.
TRAP_EXTRA_LENGTH = 0.5

@dataclass(frozen=True)
class TrapParams:
    """Glass measurements, in inches: d inside diameter, b cone bottom hole, h glass height, o bottom offset."""

    d: float = DEFAULT_TRAP_PARAMS["d"]
    b: float = DEFAULT_TRAP_PARAMS["b"]
    h: float = DEFAULT_TRAP_PARAMS["h"]
    o: float = DEFAULT_TRAP_PARAMS["o"]

def validate_trap_params(params: dict) -> TrapParams:
    if not isinstance(params, dict):
        raise TypeError("params must be a dict")
    values = dict(DEFAULT_TRAP_PARAMS)
    for key, raw in params.items():
        if key not in TRAP_PARAM_LIMITS:
            raise ValueError(f"Unknown member {key!r}")
        if isinstance(raw, bool):
            raise TypeError(f"Invalid value {raw!r} (type 'bool') for member {key!r}, expected type 'float'")
        try:
            value = float(raw)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid value {raw!r} for member {key!r}, expected type 'float'") from None
        lo, hi = TRAP_PARAM_LIMITS[key]
        if not (lo <= value <= hi):
            raise ValueError(f"Invalid value {raw!r} for member {key!r}, expected {fmt(lo)} to {fmt(hi)}")
        values[key] = value
    return TrapParams(**values)

def trap_cone_spec(params: TrapParams) -> Optional[ConeSpec]:
    """The cone fitting the glass, or None when the offset leaves no cone height."""
    height = params.h - params.o
    if height <= 0:
        return None
    return ConeSpec(diameter_top=params.d, diameter_bottom=params.b, height=height,
                    extra_length=TRAP_EXTRA_LENGTH if params.o > 0 else 0.0)

def check_trap(params: TrapParams, *, flap_limit: float = FLAP_THETA_LIMIT) -> List[WarningMsg]:
    spec = trap_cone_spec(params)
    if spec is None:
        return [WarningMsg("error", "TRAP_OFFSET_TOO_HIGH",
                           "Cone bottom-offset is at or above the glass height.",
                           "Reduce the offset or increase the glass height.")]
    _, warns = solve_cone(spec, flap_limit=flap_limit)
    return warns

def trap_pattern(params: TrapParams, *, precision: int = PRINT_PRECISION,
                 flap_limit: float = FLAP_THETA_LIMIT, arcs: bool = True) -> Optional[ConePattern]:
    spec = trap_cone_spec(params)
    if spec is None:
        return None
    return build_pattern(spec, precision=precision, flap_limit=flap_limit, arcs=arcs)

def step_trap_param(params: TrapParams, name: str, delta: float = TRAP_STEP, *, up: bool,
                    flap_limit: float = FLAP_THETA_LIMIT) -> float:
    """Value of `name` after one Less/More step.

    The step is clamped to the measurement's limits. A step that would leave
    no buildable cone is refused and the current value comes back unchanged.
    """
    lo, hi = TRAP_PARAM_LIMITS[name]
    current = getattr(params, name)
    if up:
        value = min(current + delta, hi)
    else:
        value = max(current - delta, lo)
    value = round(value, TRAP_STEP_DIGITS)
    spec = trap_cone_spec(dataclasses.replace(params, **{name: value}))
    if spec is None or not is_feasible(spec, flap_limit=flap_limit):
        return current
    return value

# ---------------------- Public dict API ----------------------

def _parse_precision(value) -> int:
    if isinstance(value, str):
        if value not in NAMED_PRECISIONS:
            raise ValueError(f"Unknown precision: {value!r}")
        return NAMED_PRECISIONS[value]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"precision must be 'print', 'preview' or an int >= 0, got {value!r}")
    return value

def generate_svg(params: dict) -> dict:
    """Public API for Pyodide integration.

    Returns a JSON-serializable dict:
      {"svg": str | None, "pattern": dict | None, "warnings": [{severity, code, message, fix}, ...], "meta": dict}
    """
    if not isinstance(params, dict):
        raise TypeError("params must be a dict")

    opts = dict(params)
    precision = _parse_precision(opts.pop("precision", "print"))
    strict_flap = bool(opts.pop("strict_flap", False))
    arcs = bool(opts.pop("arcs", True))
    trap = validate_trap_params(opts)

    flap_limit = FLAP_THETA_LIMIT_STRICT if strict_flap else FLAP_THETA_LIMIT
    warns = check_trap(trap, flap_limit=flap_limit)
    pattern = trap_pattern(trap, precision=precision, flap_limit=flap_limit, arcs=arcs)

    meta = {
        "generator": f"coneform v{__version__}",
        "inputs": dataclasses.asdict(trap),
        "precision": precision,
        "flap_limit_deg": round(math.degrees(flap_limit), 6),
    }
    if pattern is not None:
        meta["derived"] = dataclasses.asdict(pattern.geometry)

    return {
        "svg": pattern.to_svg(meta=meta) if pattern is not None else None,
        "pattern": pattern.as_dict() if pattern is not None else None,
        "warnings": _warn_dicts(warns),
        "meta": meta,
    }

# ---------------------- CLI ----------------------

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Fruit fly trap cone form generator.\n\n"
            "Measure the glass, print the form, cut along the dotted line and tape the flap.\n"
        ),
    )
    ap.add_argument("--diameter", type=float, default=DEFAULT_TRAP_PARAMS["d"], help="Glass inside-diameter, d (in)")
    ap.add_argument("--bottom", type=float, default=DEFAULT_TRAP_PARAMS["b"], help="Cone bottom diameter, b (in)")
    ap.add_argument("--height", type=float, default=DEFAULT_TRAP_PARAMS["h"], help="Glass height, h (in)")
    ap.add_argument("--offset", type=float, default=DEFAULT_TRAP_PARAMS["o"], help="Cone bottom-offset, o (in)")

    ap.add_argument("--preview", action="store_true",
                    help=f"Use {PREVIEW_PRECISION}-digit preview precision (default {PRINT_PRECISION} digits)")
    ap.add_argument("--strict-flap", action="store_true", help="Limit the flap to 90%% of a full turn")
    ap.add_argument("--polyline", action="store_true", help="Emit the cut outline as sampled lines instead of arcs")
    ap.add_argument("--json", action="store_true", help="Write the pattern dict as JSON instead of SVG")
    ap.add_argument("--verbose", action="store_true")
    ap.add_argument("--out", required=True, help="Output path")
    return ap.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        res = generate_svg({
            "d": args.diameter,
            "b": args.bottom,
            "h": args.height,
            "o": args.offset,
            "precision": "preview" if args.preview else "print",
            "strict_flap": args.strict_flap,
            "arcs": not args.polyline,
        })
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    warns = res["warnings"]
    errs = [w for w in warns if w["severity"] == "error"]
    if res["svg"] is None:
        print("NO PATTERN (errors):")
        for w in errs:
            print("-", w["code"], w["message"], "| fix:", w["fix"])
        return 1

    with open(args.out, "w", encoding="utf-8") as f:
        if args.json:
            json.dump(res["pattern"], f, indent=2)
            f.write("\n")
        else:
            f.write(res["svg"])
    logger.info(f"Wrote {args.out} ({res['pattern']['width']} x {res['pattern']['height']})")

    if warns:
        print("Warnings:")
        for w in warns:
            print("-", w["severity"], w["code"], w["message"], "| fix:", w["fix"])
    print("OK")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
