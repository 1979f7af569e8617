import numpy as _np

from collections import namedtuple as _namedtuple


Frame = _namedtuple("Frame", [ "o", "x", "y", "z" ])

IDENTITY_FRAME = Frame(
    o=_np.array([0.0, 0.0, 0.0]),
    x=_np.array([1.0, 0.0, 0.0]),
    y=_np.array([0.0, 1.0, 0.0]),
    z=_np.array([0.0, 0.0, 1.0])
)


class Mesh(object):
    def __init__(
        self,
        pos=None,
        norm=None,
        texcoord=None,
        triangle=None,
        quad=None,
        line=None,
        spline=None,
        point=None,
        frame=IDENTITY_FRAME,
        material=None,
        subdivisionCatmullClarkLevel=0,
        subdivisionCatmullClarkSmooth=False,
        subdivisionBezierLevel=0,
        subdivisionBezierUniform=True
    ):
        self.pos = floatArray(pos, 3)
        self.norm = floatArray(norm, 3)
        self.texcoord = floatArray(texcoord, 2)
        self.triangle = indexArray(triangle, 3)
        self.quad = indexArray(quad, 4)
        self.line = indexArray(line, 2)
        self.spline = indexArray(spline, 4)
        self.point = indexArray(point, 1).reshape(-1)

        self.frame = frame
        self.material = material

        self.subdivisionCatmullClarkLevel = subdivisionCatmullClarkLevel
        self.subdivisionCatmullClarkSmooth = subdivisionCatmullClarkSmooth
        self.subdivisionBezierLevel = subdivisionBezierLevel
        self.subdivisionBezierUniform = subdivisionBezierUniform

    @property
    def nrVertices(self):
        return len(self.pos)

    @property
    def nrFaces(self):
        return len(self.triangle) + len(self.quad)

    def copy(self):
        return Mesh(
            pos=self.pos.copy(),
            norm=self.norm.copy(),
            texcoord=self.texcoord.copy(),
            triangle=self.triangle.copy(),
            quad=self.quad.copy(),
            line=self.line.copy(),
            spline=self.spline.copy(),
            point=self.point.copy(),
            frame=self.frame,
            material=self.material,
            subdivisionCatmullClarkLevel=self.subdivisionCatmullClarkLevel,
            subdivisionCatmullClarkSmooth=self.subdivisionCatmullClarkSmooth,
            subdivisionBezierLevel=self.subdivisionBezierLevel,
            subdivisionBezierUniform=self.subdivisionBezierUniform
        )

    def check(self):
        nv = len(self.pos)

        for name in [ "triangle", "quad", "line", "spline", "point" ]:
            idcs = getattr(self, name)
            if idcs.size > 0 and (idcs.min() < 0 or idcs.max() >= nv):
                raise ValueError('an undefined vertex appears in a %s' % name)

        if len(self.norm) not in [0, nv]:
            raise ValueError('normals and positions differ in length')
        if len(self.texcoord) not in [0, nv]:
            raise ValueError('texture coordinates and positions differ in length')

    def __repr__(self):
        return "Mesh(%d vertices, %d triangles, %d quads, %d lines, %d splines)" % (
            len(self.pos), len(self.triangle), len(self.quad),
            len(self.line), len(self.spline)
        )


class Surface(object):
    def __init__(
        self,
        isQuad=False,
        radius=1.0,
        frame=IDENTITY_FRAME,
        material=None,
        subdivisionLevel=0,
        subdivisionSmooth=False
    ):
        self.isQuad = isQuad
        self.radius = radius
        self.frame = frame
        self.material = material
        self.subdivisionLevel = subdivisionLevel
        self.subdivisionSmooth = subdivisionSmooth

        self.displayMesh = None


def floatArray(data, width):
    if data is None or len(data) == 0:
        return _np.zeros((0, width))
    return _np.array(data, dtype=float).reshape(-1, width)


def indexArray(data, width):
    if data is None or len(data) == 0:
        return _np.zeros((0, width), dtype=int)
    return _np.array(data, dtype=int).reshape(-1, width)
