import numpy as _np

from math import comb as _comb


def subdivideBezier(mesh, log=None):
    level = mesh.subdivisionBezierLevel
    if not level:
        return

    # faces keep their vertices when there are no splines
    if len(mesh.spline) == 0:
        mesh.subdivisionBezierLevel = 0
        return

    if log:
        log("Subdividing %d bezier segments %d times (%s)..." % (
            len(mesh.spline), level,
            "uniform" if mesh.subdivisionBezierUniform else "de Casteljau"
        ))

    if mesh.subdivisionBezierUniform:
        subdivideBezierUniform(mesh)
    else:
        subdivideBezierDeCasteljau(mesh)

    if log:
        log("Bezier output has %d vertices and %d lines" % (
            len(mesh.pos), len(mesh.line)
        ))


def subdivideBezierUniform(mesh):
    from pymeshrefine.mesh.normals import smoothTangents

    steps = 1 << mesh.subdivisionBezierLevel

    t = _np.arange(steps + 1) / float(steps)
    weights = _np.stack([bernstein(t, k, 3) for k in range(4)], axis=1)

    ctrl = mesh.pos[mesh.spline]
    pos = _np.einsum("tk,skc->stc", weights, ctrl).reshape(-1, 3)

    starts = (
        _np.arange(len(mesh.spline))[:, None] * (steps + 1)
        + _np.arange(steps)[None, :]
    ).reshape(-1)

    _finish(mesh, pos, _np.stack([starts, starts + 1], axis=1))
    smoothTangents(mesh)


def subdivideBezierDeCasteljau(mesh):
    from pymeshrefine.mesh.normals import smoothTangents

    pos = mesh.pos
    splines = mesh.spline

    for _ in range(mesh.subdivisionBezierLevel):
        pos, splines = _splitAll(pos, splines)

    _finish(mesh, pos, splines[:, [0, 3]])
    smoothTangents(mesh)


def splitSegment(p0, p1, p2, p3):
    m01 = (p0 + p1) / 2
    m12 = (p1 + p2) / 2
    m23 = (p2 + p3) / 2
    m012 = (m01 + m12) / 2
    m123 = (m12 + m23) / 2
    m = (m012 + m123) / 2

    return (p0, m01, m012, m), (m, m123, m23, p3)


def bernstein(t, k, n):
    return _comb(n, k) * t**k * (1 - t)**(n - k)


def evaluate(p0, p1, p2, p3, t):
    return (
        p0 * bernstein(t, 0, 3) + p1 * bernstein(t, 1, 3)
        + p2 * bernstein(t, 2, 3) + p3 * bernstein(t, 3, 3)
    )


def _splitAll(pos, splines):
    posOut = []
    splinesOut = []

    for s in splines:
        first, second = splitSegment(*pos[s])

        if not (posOut and _np.array_equal(posOut[-1], first[0])):
            posOut.append(first[0])

        k = len(posOut) - 1
        posOut.extend(first[1:])
        posOut.extend(second[1:])

        splinesOut.append([k, k + 1, k + 2, k + 3])
        splinesOut.append([k + 3, k + 4, k + 5, k + 6])

    if not posOut:
        return _np.zeros((0, 3)), _np.zeros((0, 4), dtype=int)

    return _np.array(posOut), _np.array(splinesOut, dtype=int)


def _finish(mesh, pos, lines):
    mesh.pos = _np.array(pos, dtype=float).reshape(-1, 3)
    mesh.line = _np.array(lines, dtype=int).reshape(-1, 2)
    mesh.texcoord = _np.zeros((0, 2))
    mesh.spline = _np.zeros((0, 4), dtype=int)
    mesh.subdivisionBezierLevel = 0
