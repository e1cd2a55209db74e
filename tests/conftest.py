"""Configuration and shared files/objects for the testing framework.

Copyright © 2026 Pixelgen Technologies AB.
"""

import gzip

import pytest

from kmatools.res import RES_HEADER
from kmatools.spa import SPA_HEADER

SPA_LINES = [
    "tmplA\t1\t100\t5\t1000\t57.23\t90.00\t3.5\t57.23\t90.00\t3.5\t0.01\t0.02",
    "tmplB\t2\t2500\t12\t1580\t12.5\t100.00\t18.04\t13.1\t99.87\t19.2\t2400.5\t1.0e-26",
]

RES_LINES = [
    "tmplA\t8127\t48\t1580\t99.87\t100.00\t99.87\t100.00\t5.14\t7917.89\t1.0e-26",
    "tmplB \t  117\t 3\t1206\t 7.21\t 9.45\t76.32\t99.00\t0.10\t106.13\t0.01",
]

MAT_TEXT = (
    "#seq1\n"
    "A\t10\t0\t0\t0\t0\t0\n"
    "c\t0\t7\t1\t0\t0\t2\n"
    "\n"
    "#seq2\n"
    "#seq3\n"
    "G\t0\t0\t4\t0\t0\t0\n"
    "#seq4\n"
)


@pytest.fixture(name="spa_text")
def spa_text_fixture() -> str:
    """Return the content of a small .spa file with a blank line."""
    return SPA_HEADER + "\n" + SPA_LINES[0] + "\n\n" + SPA_LINES[1] + "\n"


@pytest.fixture(name="res_text")
def res_text_fixture() -> str:
    """Return the content of a small .res file."""
    return RES_HEADER + "\n" + "\n".join(RES_LINES) + "\n"


@pytest.fixture(name="mat_text")
def mat_text_fixture() -> str:
    """Return the content of a small .mat file with an empty section."""
    return MAT_TEXT


@pytest.fixture(name="kma_files")
def kma_files_fixture(tmp_path, spa_text, res_text, mat_text) -> dict:
    """Write the sample files to disk, the .mat file gzip compressed."""
    spa = tmp_path / "sample.spa"
    spa.write_text(spa_text)
    res = tmp_path / "sample.res"
    res.write_text(res_text)
    mat = tmp_path / "sample.mat.gz"
    with gzip.open(mat, "wt") as fh:
        fh.write(mat_text)
    return {"spa": spa, "res": res, "mat": mat}
