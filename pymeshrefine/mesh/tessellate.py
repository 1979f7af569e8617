import numpy as _np

from math import pi


def tessellateSurface(surface, log=None):
    from pymeshrefine.mesh.model import Mesh
    from pymeshrefine.mesh.normals import computeNormals

    if surface.isQuad:
        pos, norm, triangles, quads = quadPatch(
            surface.radius, surface.subdivisionLevel
        )
    else:
        pos, norm, triangles, quads = sphere(
            surface.radius, surface.subdivisionLevel
        )

    mesh = Mesh(
        pos=pos,
        norm=norm,
        triangle=triangles,
        quad=quads,
        frame=surface.frame,
        material=surface.material
    )
    computeNormals(mesh, surface.subdivisionSmooth)

    if log:
        log("Tessellated %s at level %d: %d vertices, %d faces" % (
            "quad" if surface.isQuad else "sphere",
            surface.subdivisionLevel, len(mesh.pos), mesh.nrFaces
        ))

    surface.displayMesh = mesh
    return mesh


def quadPatch(radius, level):
    c = 1 << level

    p00 = _np.array([-1.0, -1.0, 0.0]) * radius
    p01 = _np.array([-1.0, 1.0, 0.0]) * radius
    p10 = _np.array([1.0, -1.0, 0.0]) * radius
    p11 = _np.array([1.0, 1.0, 0.0]) * radius

    pos = []
    for i in range(c + 1):
        for j in range(c + 1):
            u = i / float(c)
            v = j / float(c)
            pos.append(
                p00 * u * v + p01 * u * (1 - v)
                + p10 * (1 - u) * v + p11 * (1 - u) * (1 - v)
            )

    norm = _np.tile([0.0, 0.0, 1.0], (len(pos), 1))

    idx = lambda i, j: i * (c + 1) + j

    quads = []
    for i in range(c):
        for j in range(c):
            quads.append([idx(i, j), idx(i + 1, j), idx(i + 1, j + 1), idx(i, j + 1)])

    return _np.array(pos), norm, [], quads


def sphere(radius, level):
    row = 1 << (level + 1)
    column = 2 * row

    pos = [[0.0, 0.0, radius]]
    for i in range(1, row):
        theta = pi * i / row
        for j in range(column):
            phi = 2 * pi * j / column
            pos.append([
                radius * _np.sin(theta) * _np.cos(phi),
                radius * _np.sin(theta) * _np.sin(phi),
                radius * _np.cos(theta)
            ])
    pos.append([0.0, 0.0, -radius])

    bottom = len(pos) - 1
    ring = lambda i, j: 1 + (i - 1) * column + j % column

    triangles = []
    for j in range(column):
        triangles.append([0, ring(1, j), ring(1, j + 1)])
    for j in range(column):
        triangles.append([ring(row - 1, j), bottom, ring(row - 1, j + 1)])

    quads = []
    for i in range(1, row - 1):
        for j in range(column):
            quads.append([
                ring(i, j), ring(i + 1, j), ring(i + 1, j + 1), ring(i, j + 1)
            ])

    return _np.array(pos), None, triangles, quads
