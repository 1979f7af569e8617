import numpy as np

from pymeshrefine.mesh.model import Frame, Surface
from pymeshrefine.mesh.tessellate import quadPatch, sphere, tessellateSurface


class TestSphere:
    def test_level_zero(self):
        surface = Surface(radius=2.0, subdivisionSmooth=True)
        mesh = tessellateSurface(surface)

        # row = 2, column = 4: two poles and a single ring
        assert len(mesh.pos) == 2 + 4
        assert len(mesh.triangle) == 2 * 4
        assert len(mesh.quad) == 0
        assert np.allclose(np.linalg.norm(mesh.pos, axis=1), 2.0)

    def test_level_one_bands(self):
        pos, _, triangles, quads = sphere(1.0, 1)

        row, column = 4, 8
        assert len(pos) == 2 + (row - 1) * column
        assert len(triangles) == 2 * column
        assert len(quads) == (row - 2) * column
        assert pos[0].tolist() == [0, 0, 1]
        assert pos[-1].tolist() == [0, 0, -1]

    def test_seam_wraps_around(self):
        _, _, triangles, quads = sphere(1.0, 1)

        assert triangles[7] == [0, 8, 1]
        assert triangles[15] == [24, 25, 17]
        assert quads[7] == [8, 16, 9, 1]

    def test_indices_in_range(self):
        pos, _, triangles, quads = sphere(1.0, 2)

        assert np.max(triangles) == len(pos) - 1
        assert np.max(quads) < len(pos)

    def test_smooth_normals_point_outward(self):
        surface = Surface(subdivisionLevel=2, subdivisionSmooth=True)
        mesh = tessellateSurface(surface)

        assert np.allclose(np.linalg.norm(mesh.norm, axis=1), 1.0)
        assert np.all(np.sum(mesh.pos * mesh.norm, axis=1) > 0.9)

    def test_faceted_output(self):
        surface = Surface(subdivisionLevel=1)
        mesh = tessellateSurface(surface)

        assert len(mesh.pos) == 3 * 16 + 4 * 16
        assert np.all(np.sum(mesh.pos * mesh.norm, axis=1) > 0)


class TestQuad:
    def test_grid(self):
        pos, norm, triangles, quads = quadPatch(2.0, 2)

        assert len(pos) == 25
        assert len(quads) == 16
        assert triangles == []
        assert np.allclose(norm, [0, 0, 1])
        assert np.allclose(np.abs(pos[:, :2]).max(axis=0), [2, 2])
        assert np.allclose(pos[:, 2], 0)

    def test_corners(self):
        pos, _, _, _ = quadPatch(1.0, 0)

        assert np.allclose(pos, [[1, 1, 0], [1, -1, 0], [-1, 1, 0], [-1, -1, 0]])

    def test_normals_face_up(self):
        surface = Surface(isQuad=True, subdivisionLevel=3, subdivisionSmooth=True)
        mesh = tessellateSurface(surface)

        assert len(mesh.pos) == 81
        assert np.allclose(mesh.norm, [0, 0, 1])

    def test_faceted_quad(self):
        surface = Surface(isQuad=True, subdivisionLevel=1)
        mesh = tessellateSurface(surface)

        assert len(mesh.pos) == 16
        assert np.allclose(mesh.norm, [0, 0, 1])


class TestSurface:
    def test_display_mesh_is_replaced(self):
        surface = Surface(isQuad=True)
        first = tessellateSurface(surface)
        second = tessellateSurface(surface)

        assert surface.displayMesh is second
        assert first is not second

    def test_frame_and_material_carried(self):
        frame = Frame(
            o=np.array([1.0, 2.0, 3.0]),
            x=np.array([1.0, 0.0, 0.0]),
            y=np.array([0.0, 1.0, 0.0]),
            z=np.array([0.0, 0.0, 1.0])
        )
        surface = Surface(frame=frame, material="stone")
        mesh = tessellateSurface(surface)

        assert mesh.frame is frame
        assert mesh.material == "stone"

    def test_logging(self):
        messages = []
        tessellateSurface(Surface(), log=messages.append)

        assert messages == ["Tessellated sphere at level 0: 24 vertices, 8 faces"]
