import numpy as _np


def subdivideCatmullClark(mesh, log=None):
    from pymeshrefine.mesh.normals import computeNormals

    level = mesh.subdivisionCatmullClarkLevel
    if not level:
        return

    pos = mesh.pos.copy()
    triangles = mesh.triangle.copy()
    quads = mesh.quad.copy()

    for i in range(level):
        pos, quads = subdivideOnce(pos, triangles, quads)
        triangles = _np.zeros((0, 3), dtype=int)

        if log:
            log("Level %d: %d vertices and %d quads" % (
                i + 1, len(pos), len(quads)
            ))

    mesh.pos = pos
    mesh.norm = _np.zeros((0, 3))
    mesh.texcoord = _np.zeros((0, 2))
    mesh.triangle = triangles
    mesh.quad = quads
    mesh.subdivisionCatmullClarkLevel = 0

    computeNormals(mesh, mesh.subdivisionCatmullClarkSmooth)


def subdivideOnce(pos, triangles, quads):
    from pymeshrefine.mesh.edges import EdgeMap

    em = EdgeMap(triangles, quads)

    posOut, edgeBase, triBase, quadBase = linearVertices(
        pos, em, triangles, quads
    )
    quadsOut = subdivideTopology(em, triangles, quads, edgeBase, triBase, quadBase)

    avg, count = _averageQuadCenters(posOut, quadsOut)

    return _corrected(posOut, avg, count), quadsOut


def linearVertices(pos, edgeMap, triangles, quads):
    edges = edgeMap.edges()

    edgeBase = len(pos)
    triBase = edgeBase + len(edges)
    quadBase = triBase + len(triangles)

    posOut = _np.vstack([
        pos,
        _np.sum(pos[edges], axis=1) / 2.0 if len(edges) else _np.zeros((0, 3)),
        _faceCenters(pos, triangles),
        _faceCenters(pos, quads),
    ])

    return posOut, edgeBase, triBase, quadBase


def subdivideTopology(edgeMap, triangles, quads, edgeBase, triBase, quadBase):
    from pymeshrefine.mesh.edges import _cyclicPairs

    subdQuads = []

    for i, f in enumerate(triangles):
        kf = triBase + i
        corners = [int(x) for x in f]
        ke = [edgeBase + edgeMap.edgeIndex(v, w) for v, w in _cyclicPairs(corners)]

        for j in range(3):
            subdQuads.append([f[j], ke[j], kf, ke[j - 1]])

    for i, f in enumerate(quads):
        kf = quadBase + i
        corners = [int(x) for x in f]
        ke = [edgeBase + edgeMap.edgeIndex(v, w) for v, w in _cyclicPairs(corners)]

        for j in range(4):
            subdQuads.append([f[j], ke[j], kf, ke[j - 1]])

    if not subdQuads:
        return _np.zeros((0, 4), dtype=int)

    return _np.array(subdQuads, dtype=int)


def subdivisionCounts(nrVertices, nrEdges, nrTriangles, nrQuads):
    return (
        nrVertices + nrEdges + nrTriangles + nrQuads,
        3 * nrTriangles + 4 * nrQuads
    )


def _faceCenters(vertices, faces):
    if len(faces) == 0:
        return _np.zeros((0, vertices.shape[1]))

    return _np.sum(vertices[faces], axis=1) / faces.shape[1]


def _averageQuadCenters(pos, quads):
    centers = _faceCenters(pos, quads)

    total = _np.zeros_like(pos)
    count = _np.zeros(len(pos), dtype=int)

    for k in range(4):
        _np.add.at(total, quads[:, k], centers)
        _np.add.at(count, quads[:, k], 1)

    return total / _np.maximum(count, 1)[:, None], count


def _corrected(pos, avg, count):
    output = pos.copy()

    # vertices in no face keep their position
    touched = count > 0
    weight = 4.0 / count[touched]
    output[touched] += (avg[touched] - pos[touched]) * weight[:, None]

    return output
