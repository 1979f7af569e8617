import numpy as _np


def computeNormals(mesh, smooth):
    if smooth:
        smoothNormals(mesh)
    else:
        facetNormals(mesh)


def facetNormals(mesh):
    hasUVs = len(mesh.texcoord) > 0

    triNormals = triangleNormals(mesh.pos, mesh.triangle)
    quadNormals = quadDiagonalNormals(mesh.pos, mesh.quad)

    triCorners = mesh.triangle.reshape(-1)
    quadCorners = mesh.quad.reshape(-1)
    corners = _np.concatenate([triCorners, quadCorners])

    nt = len(triCorners)
    nq = len(quadCorners)

    # points and curves get their own copies after the face corners
    loose = _np.unique(_np.concatenate([
        mesh.point.reshape(-1),
        mesh.line.reshape(-1),
        mesh.spline.reshape(-1)
    ])).astype(int)

    mapping = _np.zeros(len(mesh.pos), dtype=int)
    mapping[loose] = len(corners) + _np.arange(len(loose))

    kept = _np.concatenate([corners, loose]).astype(int)

    mesh.pos = mesh.pos[kept].reshape(-1, 3)
    mesh.norm = _np.vstack([
        _np.repeat(triNormals, 3, axis=0),
        _np.repeat(quadNormals, 4, axis=0),
        _np.zeros((len(loose), 3))
    ])
    if hasUVs:
        mesh.texcoord = mesh.texcoord[kept].reshape(-1, 2)
    else:
        mesh.texcoord = _np.zeros((0, 2))

    mesh.triangle = _np.arange(nt, dtype=int).reshape(-1, 3)
    mesh.quad = _np.arange(nt, nt + nq, dtype=int).reshape(-1, 4)
    mesh.point = mapping[mesh.point.astype(int)].reshape(-1)
    mesh.line = mapping[mesh.line.astype(int)].reshape(-1, 2)
    mesh.spline = mapping[mesh.spline.astype(int)].reshape(-1, 4)


def smoothNormals(mesh):
    pos = mesh.pos
    norm = _np.zeros((len(pos), 3))

    triNormals = triangleNormals(pos, mesh.triangle)
    quadNormals = triangleNormals(pos, mesh.quad[:, :3])

    for k in range(3):
        _np.add.at(norm, mesh.triangle[:, k], triNormals)
    for k in range(4):
        _np.add.at(norm, mesh.quad[:, k], quadNormals)

    mesh.norm = normalized(norm)


def smoothTangents(polyline):
    pos = polyline.pos
    tangents = _np.zeros((len(pos), 3))

    lines = polyline.line
    lt = normalized(pos[lines[:, 1]] - pos[lines[:, 0]])

    for k in range(2):
        _np.add.at(tangents, lines[:, k], lt)

    polyline.norm = normalized(tangents)


def triangleNormals(pos, faces):
    if len(faces) == 0:
        return _np.zeros((0, 3))

    p0 = pos[faces[:, 0]]
    p1 = pos[faces[:, 1]]
    p2 = pos[faces[:, 2]]

    return normalized(_np.cross(p1 - p0, p2 - p0))


def quadDiagonalNormals(pos, quads):
    if len(quads) == 0:
        return _np.zeros((0, 3))

    first = triangleNormals(pos, quads[:, [0, 1, 2]])
    second = triangleNormals(pos, quads[:, [0, 2, 3]])

    return normalized(first + second)


def normalized(vectors):
    vectors = _np.asarray(vectors, dtype=float)
    lengths = _np.linalg.norm(vectors, axis=-1, keepdims=True)

    # zero vectors stay zero
    safe = _np.where(lengths > 0, lengths, 1.0)
    return vectors / safe
