def parseArguments():
    import argparse

    parser = argparse.ArgumentParser(
        description='Tessellate a sphere or quad and optionally displace it.'
    )
    parser.add_argument(
        'outpath',
        type=str,
        help='path for the OBJ-formatted output data'
    )
    parser.add_argument(
        '-q', '--quad',
        action='store_true',
        default=False,
        help='make a quad instead of a sphere'
    )
    parser.add_argument(
        '-r', '--radius',
        type=float,
        default=1.0,
        help='sphere radius or quad half-size (default 1)'
    )
    parser.add_argument(
        '-l', '--level',
        type=int,
        default=0,
        help='subdivision level of the tessellation (default 0)'
    )
    parser.add_argument(
        '-s', '--smooth',
        action='store_true',
        default=False,
        help='compute smooth instead of faceted normals'
    )
    parser.add_argument(
        '-i', '--heightfield',
        type=str,
        help='an image whose values displace the surface along its normals'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        default=False,
        help='print some information while working'
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
    from pymeshrefine.mesh.model import Surface
    from pymeshrefine.refineMesh import display, refine, saveMesh

    args = parseArguments()

    if args.verbose:
        log = lambda s: sys.stdout.write(s + '\n')
    else:
        log = None

    surface = Surface(
        isQuad=args.quad,
        radius=args.radius,
        subdivisionLevel=args.level,
        subdivisionSmooth=args.smooth
    )

    heightField = None
    if args.heightfield:
        from pymeshrefine.mesh.displace import loadHeightField

        if log:
            log("Loading height field from %s..." % args.heightfield)
        heightField = loadHeightField(args.heightfield)

    refine([], [surface], heightField=heightField, log=log)

    saveMesh(args.outpath, surface.displayMesh, log=log)

    if args.show:
        display(surface.displayMesh)


if __name__ == '__main__':
    import sys
    from os.path import abspath, dirname

    sys.path.append(dirname(dirname(abspath(__file__))))

    run()
