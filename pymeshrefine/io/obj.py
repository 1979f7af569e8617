import numpy as np


def load(fp):
    from pymeshrefine.mesh.model import Mesh

    vertices = []
    normals = []
    texverts = []
    triangles = []
    quads = []
    lines = []
    splines = []
    points = []
    cornerNormals = {}
    cornerTexverts = {}
    settings = {}

    for rawline in fp.readlines():
        line = rawline.strip()

        if len(line) == 0:
            continue

        fields = line.split()
        cmd = fields[0]
        pars = fields[1:]

        if cmd == '#subd':
            _parseSubd(pars, settings)
        elif cmd == '#spline':
            splines.append([_index(p, len(vertices)) for p in pars])
        elif line[0] == '#':
            continue
        elif cmd == 'v':
            vertices.append([float(pars[0]), float(pars[1]), float(pars[2])])
        elif cmd == 'vt':
            texverts.append([float(pars[0]), float(pars[1])])
        elif cmd == 'vn':
            normals.append([float(pars[0]), float(pars[1]), float(pars[2])])
        elif cmd == 'f':
            fv = []

            for i in range(len(pars)):
                idcs = pars[i].split('/')
                v = _index(idcs[0], len(vertices))
                fv.append(v)

                if len(idcs) > 1 and idcs[1]:
                    cornerTexverts[v] = _index(idcs[1], len(texverts))
                if len(idcs) > 2 and idcs[2]:
                    cornerNormals[v] = _index(idcs[2], len(normals))

            if len(fv) == 3:
                triangles.append(fv)
            elif len(fv) == 4:
                quads.append(fv)
            else:
                raise ValueError('a face has %d vertices' % len(fv))
        elif cmd == 'l':
            vs = [_index(p.split('/')[0], len(vertices)) for p in pars]
            lines.extend(zip(vs, vs[1:]))
        elif cmd == 'p':
            points.extend(_index(p, len(vertices)) for p in pars)

    mesh = Mesh(
        pos=vertices,
        norm=_perVertex(cornerNormals, normals, len(vertices), 3),
        texcoord=_perVertex(cornerTexverts, texverts, len(vertices), 2),
        triangle=triangles,
        quad=quads,
        line=lines,
        spline=splines,
        point=points,
        **settings
    )
    mesh.check()

    return mesh


def save(fp, mesh, writeNormals=True):
    lines = []

    if mesh.subdivisionCatmullClarkLevel:
        lines.append("#subd catmullclark %d%s\n" % (
            mesh.subdivisionCatmullClarkLevel,
            " smooth" if mesh.subdivisionCatmullClarkSmooth else ""
        ))
    if mesh.subdivisionBezierLevel:
        lines.append("#subd bezier %d %s\n" % (
            mesh.subdivisionBezierLevel,
            "uniform" if mesh.subdivisionBezierUniform else "decasteljau"
        ))

    for v in mesh.pos:
        lines.append("v %.8f %.8f %.8f\n" % tuple(v))

    hasUVs = len(mesh.texcoord) > 0
    hasNormals = writeNormals and len(mesh.norm) > 0

    for v in mesh.texcoord:
        lines.append("vt %.8f %.8f\n" % tuple(v))

    if hasNormals:
        for v in mesh.norm:
            lines.append("vn %.8f %.8f %.8f\n" % tuple(v))

    for faces in [mesh.triangle, mesh.quad]:
        for f in faces:
            lines.append("f")
            for v in f:
                lines.append(" %s/%s/%s" % (
                    v + 1,
                    v + 1 if hasUVs else "",
                    v + 1 if hasNormals else "",
                ))
            lines.append("\n")

    for a, b in mesh.line:
        lines.append("l %d %d\n" % (a + 1, b + 1))

    for s in mesh.spline:
        lines.append("#spline %d %d %d %d\n" % tuple(s + 1))

    if len(mesh.point):
        lines.append("p %s\n" % " ".join(str(v + 1) for v in mesh.point))

    fp.write("".join(lines))


def _parseSubd(pars, settings):
    if len(pars) < 2:
        raise ValueError('malformed subdivision record')

    kind = pars[0]
    level = int(pars[1])
    options = pars[2:]

    if kind == 'catmullclark':
        settings['subdivisionCatmullClarkLevel'] = level
        settings['subdivisionCatmullClarkSmooth'] = 'smooth' in options
    elif kind == 'bezier':
        settings['subdivisionBezierLevel'] = level
        settings['subdivisionBezierUniform'] = 'decasteljau' not in options
    else:
        raise ValueError('unknown subdivision scheme %s' % kind)


def _index(field, count):
    k = int(field)
    return k + (count if k < 0 else -1)


def _perVertex(cornerData, data, nrVertices, width):
    if not cornerData:
        return None

    out = np.zeros((nrVertices, width))
    for v, k in cornerData.items():
        out[v] = data[k]

    return out
