import numpy as _np


DISPLACEMENT_SCALE = 0.3


def displacementMapping(surface, heightField, log=None):
    from pymeshrefine.mesh.normals import computeNormals

    mesh = surface.displayMesh
    if mesh is None or len(mesh.pos) == 0:
        return

    if len(mesh.norm) != len(mesh.pos):
        computeNormals(mesh, surface.subdivisionSmooth)

    field = _np.asarray(heightField, dtype=float)
    height, width = field.shape[:2]

    pos = mesh.pos.copy()

    xs = _pixelCoordinates(pos[:, 0], width)
    ys = _pixelCoordinates(pos[:, 1], height)

    samples = field[ys, xs]
    if samples.ndim == 1:
        samples = samples[:, None]
    elif samples.shape[1] > 3:
        samples = samples[:, :3]
    elif samples.shape[1] == 2:
        samples = samples[:, :1]

    pos += DISPLACEMENT_SCALE * samples * mesh.norm

    if log:
        log("Displaced %d vertices by up to %.4f" % (
            len(pos), _np.abs(pos - mesh.pos).max()
        ))

    mesh.pos = pos
    computeNormals(mesh, surface.subdivisionSmooth)


def loadHeightField(path, grayscale=False):
    from PIL import Image

    with Image.open(path) as image:
        image = image.convert("L" if grayscale else "RGB")
        data = _np.asarray(image, dtype=float) / 255.0

    # row 0 is the bottom of the image
    return data[::-1].copy()


def _pixelCoordinates(values, size):
    lo = values.min()
    hi = values.max()
    if lo == hi:
        hi = lo + 1

    coords = (values - lo) / (hi - lo) * size
    # fields narrower than three pixels sample from their first row or column
    upper = max(size - 2, 0)
    coords = _np.clip(coords, min(1, upper), upper)

    return coords.astype(int)
