import numpy as _np


class EdgeMap(object):
    def __init__(self, triangles, quads):
        self._edgeIndex = {} # type: dict[tuple[int, int], int]
        self._edgeVertices = [] # type: list[tuple[int, int]]

        for faces in [triangles, quads]:
            for f in faces:
                for v, w in _cyclicPairs([int(x) for x in f]):
                    self._addEdge(v, w)

    def _addEdge(self, v, w):
        key = _key(v, w)
        if key not in self._edgeIndex:
            self._edgeIndex[key] = len(self._edgeVertices)
            self._edgeVertices.append((v, w))

    @property
    def nrEdges(self): # type: () -> int
        return len(self._edgeVertices)

    def edges(self): # type: () -> _np.ndarray
        if not self._edgeVertices:
            return _np.zeros((0, 2), dtype=int)
        return _np.array(self._edgeVertices, dtype=int)

    def edgeIndex(self, v, w): # type: (int, int) -> int
        k = self._edgeIndex.get(_key(v, w))
        if k is None:
            raise ValueError('no such edge (%d, %d)' % (v, w))
        return k

    def edgeIndices(self, pairs): # type: (_np.ndarray) -> _np.ndarray
        return _np.array(
            [self.edgeIndex(v, w) for v, w in pairs], dtype=int
        ).reshape(-1)


def buildEdgeMap(triangles, quads):
    return EdgeMap(triangles, quads)


def wireframe(mesh):
    from pymeshrefine.mesh.model import Mesh

    return Mesh(
        pos=mesh.pos.copy(),
        norm=mesh.norm.copy(),
        texcoord=mesh.texcoord.copy(),
        line=EdgeMap(mesh.triangle, mesh.quad).edges(),
        point=mesh.point.copy(),
        frame=mesh.frame,
        material=mesh.material
    )


def _key(v, w):
    return (v, w) if v <= w else (w, v)


def _cyclicPairs(items):
    return zip(items, items[1:] + items[:1])
