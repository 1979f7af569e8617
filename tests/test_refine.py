import sys

import numpy as np

from pymeshrefine import makeSurface, refineMesh
from pymeshrefine.io import obj
from pymeshrefine.mesh.model import Mesh, Surface


class TestRefine:
    def test_meshes_and_surfaces(self, cube, spline):
        cube.subdivisionCatmullClarkLevel = 1
        spline.subdivisionBezierLevel = 2
        surface = Surface(subdivisionLevel=1, subdivisionSmooth=True)

        refineMesh.refine([cube, spline], [surface])

        assert len(cube.quad) == 24
        assert len(spline.line) == 4
        assert surface.displayMesh is not None
        assert len(surface.displayMesh.pos) == 26

    def test_catmull_clark_runs_before_bezier(self, spline):
        spline.subdivisionCatmullClarkLevel = 1
        spline.subdivisionBezierLevel = 1

        refineMesh.refine([spline], [])

        # the curve survives subdivision and is then sampled
        assert spline.subdivisionCatmullClarkLevel == 0
        assert spline.subdivisionBezierLevel == 0
        assert len(spline.spline) == 0
        assert spline.line.tolist() == [[0, 1], [1, 2]]
        assert spline.pos[0].tolist() == [0, 0, 0]
        assert spline.pos[2].tolist() == [3, 1, 0]

    def test_catmull_clark_keeps_splines(self):
        mesh = Mesh(
            pos=[[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]],
            quad=[[0, 1, 2, 3]],
            spline=[[0, 1, 2, 3]],
            subdivisionCatmullClarkLevel=1,
            subdivisionCatmullClarkSmooth=True
        )
        refineMesh.refine([mesh], [])

        assert len(mesh.spline) == 1
        assert len(mesh.quad) == 4
        mesh.check()

    def test_height_field_is_applied(self):
        surface = Surface(isQuad=True, subdivisionSmooth=True)

        refineMesh.refine([], [surface], heightField=np.ones((4, 4)))

        assert np.allclose(surface.displayMesh.pos[:, 2], 0.3)

    def test_untouched_without_levels(self, cube):
        refineMesh.refine([cube], [])

        assert len(cube.pos) == 8
        assert len(cube.norm) == 0


class TestScripts:
    def test_refine_mesh_cli(self, tmp_path, monkeypatch, cube, capsys):
        inpath = tmp_path / "cube.obj"
        with open(inpath, "w") as fp:
            obj.save(fp, cube)

        outpath = tmp_path / "out.obj"
        monkeypatch.setattr(sys, "argv", [
            "refineMesh", "-c", "2", "-s", "-v", str(inpath), str(outpath)
        ])
        refineMesh.run()

        with open(outpath) as fp:
            mesh = obj.load(fp)

        assert len(mesh.quad) == 96
        assert len(mesh.pos) == 98
        assert "Level 2: 98 vertices and 96 quads" in capsys.readouterr().out

    def test_refine_mesh_wireframe(self, tmp_path, monkeypatch, cube):
        inpath = tmp_path / "cube.obj"
        with open(inpath, "w") as fp:
            obj.save(fp, cube)

        monkeypatch.setattr(sys, "argv", [
            "refineMesh", "-w", str(inpath), str(tmp_path / "wire")
        ])
        refineMesh.run()

        with open(tmp_path / "wire.obj") as fp:
            mesh = obj.load(fp)

        assert len(mesh.line) == 12
        assert mesh.nrFaces == 0

    def test_make_surface_cli(self, tmp_path, monkeypatch):
        outpath = tmp_path / "sphere.obj"
        monkeypatch.setattr(sys, "argv", [
            "makeSurface", "-l", "1", "-s", "-r", "2", str(outpath)
        ])
        makeSurface.run()

        with open(outpath) as fp:
            mesh = obj.load(fp)

        assert len(mesh.pos) == 26
        assert np.allclose(np.linalg.norm(mesh.pos, axis=1), 2.0)
