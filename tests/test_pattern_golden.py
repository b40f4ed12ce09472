import pytest

import coneform as cf


# Fixtures from the printed cone forms: 8-digit strings must match exactly.
GOLDEN = [
    (
        dict(diameter_top=3, diameter_bottom=0.7, height=4.5),
        {
            "width": "5.88345411in",
            "height": "6.62209131in",
            "viewBox": "-0.00694444 -0.74558165 5.88345411 6.62209131",
            "transform": "scale(1, -1) translate(0, -5.13092801)",
            "cutPath": "M 0 1.36956522 A 1.36956522 1.36956522 0 0 0 1.35867760 -0.17234868 "
                       "L 5.82290399 -0.73863721 A 5.86956522 5.86956522 0 0 1 0 5.86956522 Z",
            "foldGuide": "M 1.36873092 -0.04779714 L 5.86598964 -0.20484487",
        },
    ),
    (
        dict(diameter_top=3, diameter_bottom=0.7, height=4.5, extra_length=0.5),
        {
            "width": "6.38345411in",
            "height": "7.18501226in",
            "viewBox": "-0.00694444 -0.80850260 6.38345411 7.18501226",
            "transform": "scale(1, -1) translate(0, -5.56800706)",
            "cutPath": "M 0 1.36956522 A 1.36956522 1.36956522 0 0 0 1.35867760 -0.17234868 "
                       "L 6.31892915 -0.80155815 A 6.36956522 6.36956522 0 0 1 0 6.36956522 Z",
            "foldGuide": "M 1.36873092 -0.04779714 L 6.36568505 -0.22229462",
        },
    ),
]

GOLDEN_TRAP = [
    (
        cf.TrapParams(),
        {
            "width": "5.07910628in",
            "height": "7.98506172in",
            "viewBox": "-0.00694444 -2.91289988 5.07910628 7.98506172",
            "transform": "scale(1, -1) translate(0, -2.15926195)",
            "cutPath": "M 0 1.06521739 A 1.06521739 1.06521739 0 0 0 0.87247690 -0.61112368 "
                       "L 4.14871669 -2.90595544 A 5.06521739 5.06521739 0 0 1 0 5.06521739 Z",
            "foldGuide": "M 0.93802568 -0.50477314 L 4.46040780 -2.40024779",
        },
    ),
    (
        cf.TrapParams(d=4.0, b=1.0, h=6.0, o=1.5),
        {
            "width": "6.51388889in",
            "height": "10.22116504in",
            "viewBox": "-0.00694444 -3.71422060 6.51388889 10.22116504",
            "transform": "scale(1, -1) translate(0, -2.79272385)",
            "cutPath": "M 0 1.50000000 A 1.50000000 1.50000000 0 0 0 1.23210248 -0.85552527 "
                       "L 5.33911074 -3.70727615 A 6.50000000 6.50000000 0 0 1 0 6.50000000 Z",
            "foldGuide": "M 1.29903811 -0.75000000 L 5.62916512 -3.25000000",
        },
    ),
    (
        cf.TrapParams(d=4.0, b=1.0, h=6.0, o=0.0),
        {
            "width": "8.01388889in",
            "height": "8.51356343in",
            "viewBox": "-0.00694444 -0.50661899 8.01388889 8.51356343",
            "transform": "scale(1, -1) translate(0, -7.50032546)",
            "cutPath": "M 0 2.00000000 A 2.00000000 2.00000000 0 0 0 1.99609502 -0.12491864 "
                       "L 7.98438009 -0.49967454 A 8.00000000 8.00000000 0 0 1 0 8.00000000 Z",
            "foldGuide": "M 2.00000000 0.00000000 L 8.00000000 0.00000000",
        },
    ),
]


def _subset(pattern):
    d = pattern.as_dict()
    return {k: d[k] for k in ("width", "height", "viewBox", "transform", "cutPath", "foldGuide")}


@pytest.mark.parametrize("kwargs,expected", GOLDEN)
def test_compute_pattern_matches_golden(kwargs, expected):
    pattern = cf.compute_pattern(**kwargs)
    assert pattern is not None
    assert _subset(pattern) == expected
    assert pattern.stroke_width == "0.00694444"
    assert pattern.dash_array == "0.03472222"


@pytest.mark.parametrize("params,expected", GOLDEN_TRAP)
def test_trap_pattern_matches_golden(params, expected):
    pattern = cf.trap_pattern(params)
    assert pattern is not None
    assert _subset(pattern) == expected


def test_golden_bounds_dimensions():
    pattern = cf.compute_pattern(3, 0.7, 4.5)
    assert pattern.bounds.width == pytest.approx(5.883, abs=1e-3)
    assert pattern.bounds.height == pytest.approx(6.622, abs=1e-3)


def test_identical_inputs_give_identical_output():
    a = cf.compute_pattern(3, 0.7, 4.5, extra_length=0.5)
    b = cf.compute_pattern(3, 0.7, 4.5, extra_length=0.5)
    assert a.as_dict() == b.as_dict()
    assert a.to_svg() == b.to_svg()


def test_preview_precision_uses_three_digits():
    pattern = cf.compute_pattern(3, 0.7, 4.5, precision=cf.PREVIEW_PRECISION)
    assert pattern.width == "5.883in"
    assert pattern.height == "6.622in"
    for token in pattern.as_dict()["cutPath"].split():
        if token in ("M", "A", "L", "Z", "0", "1"):
            continue
        assert len(token.split(".")[1]) == 3, token


def test_flipped_frame_uses_single_group_transform():
    svg = cf.compute_pattern(3, 0.7, 4.5).to_svg()
    assert svg.count("scale(1, -1)") == 1
    assert '<g transform="scale(1, -1) translate(0, -5.13092801)"' in svg


def test_polyline_fallback_keeps_bounds_and_fold_guide():
    arcs = cf.compute_pattern(3, 0.7, 4.5)
    lines = cf.compute_pattern(3, 0.7, 4.5, arcs=False)
    assert lines.bounds == arcs.bounds
    assert lines.view_box == arcs.view_box
    assert lines.fold_guide == arcs.fold_guide

    segs = lines.cut_path.segments
    assert isinstance(segs[0], cf.MoveTo)
    assert isinstance(segs[-1], cf.ClosePath)
    assert not any(isinstance(s, cf.ArcTo) for s in segs)
    assert len(segs) == 2 * 101 + 1
    for p in lines.cut_path.points():
        assert lines.bounds.contains(p, tol=1e-9)
