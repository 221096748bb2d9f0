"""Tests for the primitive builder state machine."""

import pytest

from svg2geo.engine.builder import PrimitiveBuilder, build_primitives
from svg2geo.engine.segments import (
    Close,
    CubicTo,
    CurveOrder,
    LineTo,
    MoveTo,
    Point,
    Quad,
    QuadTo,
)
from svg2geo.errors import OrderInvariantError


def P(x, y):
    return Point(float(x), float(y))


def test_closed_triangle_is_line_order():
    cmds = [MoveTo(P(0, 0)), LineTo(P(10, 0)), LineTo(P(10, 10)), Close()]
    prims = build_primitives(cmds, "tri")

    assert len(prims) == 1
    prim = prims[0]
    assert prim.identifier == "tri"
    assert prim.order == CurveOrder.LINE
    assert prim.closed
    assert prim.points == (P(0, 0), P(10, 0), P(10, 10))


def test_open_cubic():
    cmds = [MoveTo(P(0, 0)), CubicTo(P(0, 5), P(5, 10), P(10, 10))]
    [prim] = build_primitives(cmds)

    assert prim.order == CurveOrder.CUBE
    assert not prim.closed
    assert prim.points == (P(0, 0), P(0, 5), P(5, 10), P(10, 10))


def test_quad_with_line_promotes_line_to_midpoint():
    cmds = [MoveTo(P(0, 0)), QuadTo(P(5, 5), P(10, 0)), LineTo(P(20, 0)), Close()]
    [prim] = build_primitives(cmds)

    assert prim.order == CurveOrder.QUAD
    assert prim.closed
    # closing edge (20,0)→(0,0) becomes [(10,0), (0,0)]; the trailing start point is dropped
    assert prim.points == (P(0, 0), P(5, 5), P(10, 0), P(15, 0), P(20, 0), P(10, 0))


def test_close_at_start_adds_no_closing_edge():
    cmds = [MoveTo(P(0, 0)), LineTo(P(4, 0)), LineTo(P(4, 4)), LineTo(P(0, 0)), Close()]
    [prim] = build_primitives(cmds)
    assert prim.points == (P(0, 0), P(4, 0), P(4, 4))


def test_cubic_ratchet_holds_after_lower_segments():
    cmds = [
        MoveTo(P(0, 0)),
        CubicTo(P(0, 1), P(1, 1), P(1, 0)),
        QuadTo(P(2, 1), P(3, 0)),
        LineTo(P(4, 0)),
    ]
    [prim] = build_primitives(cmds)
    assert prim.order == CurveOrder.CUBE
    assert len(prim.points) == 1 + 3 * 3


def test_quad_does_not_demote_cube():
    builder = PrimitiveBuilder(start=P(0, 0))
    builder.cubic_to(P(0, 1), P(1, 1), P(1, 0))
    builder.quad_to(P(2, 1), P(3, 0))
    assert builder.order == CurveOrder.CUBE


@pytest.mark.parametrize(
    "draws, order",
    [
        (["L", "L", "L"], CurveOrder.LINE),
        (["L", "Q", "L"], CurveOrder.QUAD),
        (["Q", "Q"], CurveOrder.QUAD),
        (["L", "C"], CurveOrder.CUBE),
        (["Q", "L", "C", "L"], CurveOrder.CUBE),
    ],
)
@pytest.mark.parametrize("closed", [False, True])
def test_point_count_invariant(draws, order, closed):
    cmds = [MoveTo(P(0, 0))]
    for i, kind in enumerate(draws, start=1):
        end = P(i, i % 2)
        if kind == "L":
            cmds.append(LineTo(end))
        elif kind == "Q":
            cmds.append(QuadTo(P(i - 0.5, 3), end))
        else:
            cmds.append(CubicTo(P(i - 0.7, 3), P(i - 0.3, 3), end))
    # return to the start so Close adds no extra edge
    cmds.append(LineTo(P(0, 0)))
    if closed:
        cmds.append(Close())

    [prim] = build_primitives(cmds)
    n_segments = len(draws) + 1
    assert prim.order == order
    assert len(prim.points) == 1 + n_segments * order.arity - (1 if closed else 0)


def test_back_to_back_moveto_flushes_open_primitive():
    cmds = [
        MoveTo(P(0, 0)),
        LineTo(P(1, 0)),
        MoveTo(P(5, 5)),
        QuadTo(P(6, 6), P(7, 5)),
        Close(),
    ]
    first, second = build_primitives(cmds, "pair")

    assert not first.closed
    assert first.points == (P(0, 0), P(1, 0))
    assert second.closed
    assert second.order == CurveOrder.QUAD
    assert first.identifier == second.identifier == "pair"


def test_end_of_stream_emits_open_primitive():
    [prim] = build_primitives([MoveTo(P(0, 0)), LineTo(P(3, 4))])
    assert not prim.closed
    assert len(prim.points) == 2


def test_degenerate_subpaths_are_dropped():
    assert build_primitives([MoveTo(P(1, 1))]) == []
    assert build_primitives([MoveTo(P(1, 1)), Close()]) == []
    assert build_primitives([MoveTo(P(1, 1)), MoveTo(P(2, 2)), LineTo(P(3, 3))])[0].points == (P(2, 2), P(3, 3))


def test_commands_without_moveto_are_ignored():
    cmds = [LineTo(P(1, 1)), Close(), LineTo(P(2, 2)), MoveTo(P(0, 0)), LineTo(P(1, 0))]
    [prim] = build_primitives(cmds)
    assert prim.points == (P(0, 0), P(1, 0))


def test_curve_at_line_order_is_invariant_violation():
    builder = PrimitiveBuilder(start=P(0, 0))
    # bypass quad_to so the order ratchet never fires
    builder.segments.append(Quad(P(1, 1), P(2, 0)))
    with pytest.raises(OrderInvariantError):
        builder.build()
