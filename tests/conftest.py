import sys
from os.path import abspath, dirname

import pytest

sys.path.append(dirname(dirname(abspath(__file__))))

from pymeshrefine.mesh.model import Mesh


CUBE_POSITIONS = [
    [0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0],
    [0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1],
]

CUBE_QUADS = [
    [0, 3, 2, 1],
    [4, 5, 6, 7],
    [0, 1, 5, 4],
    [1, 2, 6, 5],
    [2, 3, 7, 6],
    [3, 0, 4, 7],
]

SPLINE_POSITIONS = [[0, 0, 0], [1, 0, 0], [2, 1, 0], [3, 1, 0]]


@pytest.fixture
def cube():
    return Mesh(pos=CUBE_POSITIONS, quad=CUBE_QUADS)


@pytest.fixture
def square():
    return Mesh(
        pos=[[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]],
        texcoord=[[0, 0], [1, 0], [1, 1], [0, 1]],
        quad=[[0, 1, 2, 3]]
    )


@pytest.fixture
def spline():
    return Mesh(pos=SPLINE_POSITIONS, spline=[[0, 1, 2, 3]])


@pytest.fixture
def chain():
    pos = SPLINE_POSITIONS + [[4, 1, 0], [5, 0, 0], [6, 0, 0]]
    return Mesh(pos=pos, spline=[[0, 1, 2, 3], [3, 4, 5, 6]])
