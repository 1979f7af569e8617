def parseArguments():
    import argparse

    parser = argparse.ArgumentParser(
        description='Subdivide a mesh and compute its normals or tangents.'
    )
    parser.add_argument(
        'inpath',
        type=str,
        help='input mesh in OBJ format'
    )
    parser.add_argument(
        'outpath',
        type=str,
        help='path for the OBJ-formatted output data'
    )
    parser.add_argument(
        '-c', '--catmull-clark',
        type=int,
        metavar='LEVEL',
        help='number of Catmull-Clark subdivision steps for the faces'
    )
    parser.add_argument(
        '-s', '--smooth',
        action='store_true',
        default=False,
        help='compute smooth instead of faceted normals after subdivision'
    )
    parser.add_argument(
        '-b', '--bezier',
        type=int,
        metavar='LEVEL',
        help='number of subdivision steps for the bezier segments'
    )
    parser.add_argument(
        '-d', '--decasteljau',
        action='store_true',
        default=False,
        help='split bezier segments by de Casteljau instead of sampling'
    )
    parser.add_argument(
        '-w', '--wireframe',
        action='store_true',
        default=False,
        help='write the edges of the subdivided faces as lines'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=False,
        help='print some information about the meshes while working'
    )
    parser.add_argument(
        '--show',
        action='store_true',
        default=False,
        help='display the output via PolyScope'
    )

    return parser.parse_args()


def run():
    import sys

    args = parseArguments()

    if args.verbose:
        log = lambda s: sys.stdout.write(s + '\n')
    else:
        log = None

    mesh = loadMesh(args.inpath, log=log)

    if args.catmull_clark is not None:
        mesh.subdivisionCatmullClarkLevel = args.catmull_clark
    if args.smooth:
        mesh.subdivisionCatmullClarkSmooth = True
    if args.bezier is not None:
        mesh.subdivisionBezierLevel = args.bezier
    if args.decasteljau:
        mesh.subdivisionBezierUniform = False

    refine([mesh], [], log=log)

    if args.wireframe:
        from pymeshrefine.mesh.edges import wireframe
        mesh = wireframe(mesh)

    saveMesh(args.outpath, mesh, log=log)

    if args.show:
        display(mesh)


def refine(meshes, surfaces, heightField=None, log=None):
    from pymeshrefine.mesh.bezier import subdivideBezier
    from pymeshrefine.mesh.displace import displacementMapping
    from pymeshrefine.mesh.subd import subdivideCatmullClark
    from pymeshrefine.mesh.tessellate import tessellateSurface

    for mesh in meshes:
        if log:
            log("Refining %s..." % mesh)
        if mesh.subdivisionCatmullClarkLevel:
            subdivideCatmullClark(mesh, log=log)
        if mesh.subdivisionBezierLevel:
            subdivideBezier(mesh, log=log)

    for surface in surfaces:
        tessellateSurface(surface, log=log)
        if heightField is not None:
            displacementMapping(surface, heightField, log=log)


def loadMesh(path, log=None):
    from pymeshrefine.io import obj

    if log:
        log("Loading mesh from %s..." % path)

    with open(path) as fp:
        mesh = obj.load(fp)

    if log:
        log("Loaded %s" % mesh)

    return mesh


def saveMesh(path, mesh, log=None):
    import os.path
    from pymeshrefine.io import obj

    outname, outext = os.path.splitext(path)
    if outext != ".obj":
        outname += outext

    objpath = outname + '.obj'

    if log:
        log("Writing %s to %s..." % (mesh, objpath))

    with open(objpath, "w") as fp:
        obj.save(fp, mesh)


def display(*meshes):
    import polyscope as ps # type: ignore

    ps.init()

    for i in range(len(meshes)):
        mesh = meshes[i]
        name = "mesh_%02d" % i

        if mesh.nrFaces > 0:
            ps.register_surface_mesh(
                name,
                mesh.pos,
                [list(f) for f in mesh.triangle] + [list(f) for f in mesh.quad]
            )
        elif len(mesh.line) > 0:
            ps.register_curve_network(name, mesh.pos, mesh.line)
        else:
            ps.register_point_cloud(name, mesh.pos)

    ps.show()


if __name__ == '__main__':
    import sys
    from os.path import abspath, dirname

    sys.path.append(dirname(dirname(abspath(__file__))))

    run()
