import logging

import pytest

from shaded_cli_renderer.color import Color
from shaded_cli_renderer.errors import MeshLoadError
from shaded_cli_renderer.math_utils import Vec3
from shaded_cli_renderer.mesh_loader import load_mesh, parse_mesh

TRIANGLE = b"v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"


class TestParseMesh:
    def test_single_triangle(self):
        mesh = parse_mesh(TRIANGLE)
        assert len(mesh) == 1
        tri = mesh[0].triangle
        assert (tri.v1, tri.v2, tri.v3) == (Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0))
        assert mesh[0].color == Color(1.0, 1.0, 1.0, 1.0)

    def test_unknown_tag_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="shaded_cli_renderer.mesh_loader"):
            mesh = parse_mesh(b"x foo\nv 1 2 3\n")
        assert len(mesh) == 0
        assert "unknown tag 'x'" in caplog.text

    def test_multi_character_keywords_are_unknown(self, caplog):
        data = b"v 0 0 0\nvn 0 0 1\nv 1 0 0\nvt 0 1\nv 0 1 0\nusemtl red\nf 1 2 3\n"
        with caplog.at_level(logging.WARNING):
            mesh = parse_mesh(data)
        assert len(mesh) == 1
        assert "'vn'" in caplog.text
        assert "'usemtl'" in caplog.text

    @pytest.mark.parametrize("newline", [b"\n", b"\r", b"\r\n"])
    def test_line_terminators(self, newline):
        data = newline.join([b"v 0 0 0", b"v 1 0 0", b"v 0 1 0", b"f 1 2 3"]) + newline
        assert len(parse_mesh(data)) == 1

    def test_crlf_is_one_terminator(self):
        # a blank line between \r\n pairs would shift line numbers
        with pytest.raises(MeshLoadError) as info:
            parse_mesh(b"v 0 0 0\r\nv 1 0 0\r\nf 1 2 9\r\n")
        assert info.value.line == 3

    def test_comments_whitespace_and_blank_lines(self):
        data = "# header\n\nv   0\t0  0 \nv 1 0 0\n\nv 0 1 0\n#f 1 2 3\nf  1   2 3\n"
        mesh = parse_mesh(data)
        assert len(mesh) == 1

    def test_text_input(self):
        assert len(parse_mesh(TRIANGLE.decode("ascii"))) == 1

    def test_file_order_preserved(self):
        data = b"v 0 0 0\nv 1 0 0\nv 0 1 0\nv 0 0 1\nf 1 2 3\nf 1 2 4\nf 2 3 4\n"
        mesh = parse_mesh(data)
        assert [s.triangle.v3 for s in mesh] == [Vec3(0, 1, 0), Vec3(0, 0, 1), Vec3(0, 0, 1)]
        assert mesh[2].triangle.v1 == Vec3(1, 0, 0)

    def test_polygon_fan(self):
        data = b"v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n"
        mesh = parse_mesh(data)
        assert len(mesh) == 2
        assert mesh[1].triangle.v1 == Vec3(0, 0, 0)
        assert mesh[1].triangle.v2 == Vec3(1, 1, 0)
        assert mesh[1].triangle.v3 == Vec3(0, 1, 0)

    def test_slash_groups_use_vertex_index(self):
        data = b"v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1/1/1 2//1 3/2\n"
        assert parse_mesh(data)[0].triangle.v2 == Vec3(1, 0, 0)

    def test_out_of_range_index(self):
        with pytest.raises(MeshLoadError) as info:
            parse_mesh(b"v 0 0 0\nv 1 0 0\nf 1 2 3\n")
        assert info.value.line == 3

    def test_forward_reference(self):
        with pytest.raises(MeshLoadError):
            parse_mesh(b"f 1 2 3\nv 0 0 0\nv 1 0 0\nv 0 1 0\n")

    def test_zero_index(self):
        with pytest.raises(MeshLoadError):
            parse_mesh(b"v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n")

    @pytest.mark.parametrize("line", [b"v 1 2\n", b"v 1 two 3\n", b"v\n"])
    def test_bad_vertex(self, line):
        with pytest.raises(MeshLoadError) as info:
            parse_mesh(b"# x\n" + line)
        assert info.value.line == 2

    @pytest.mark.parametrize("line", [b"f 1 2\n", b"f 1 b 3\n"])
    def test_bad_face(self, line):
        with pytest.raises(MeshLoadError):
            parse_mesh(b"v 0 0 0\nv 1 0 0\nv 0 1 0\n" + line)

    def test_non_ascii(self):
        with pytest.raises(MeshLoadError):
            parse_mesh("v 0 0 0 é\n".encode("utf-8"))


class TestLoadMesh:
    def test_from_file(self, tmp_path):
        path = tmp_path / "tri.mesh"
        path.write_bytes(TRIANGLE)
        assert len(load_mesh(path)) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(MeshLoadError):
            load_mesh(tmp_path / "absent.mesh")

    def test_error_keeps_line(self, tmp_path):
        path = tmp_path / "bad.mesh"
        path.write_bytes(b"v 0 0 0\nf 1 1 5\n")
        with pytest.raises(MeshLoadError) as info:
            load_mesh(path)
        assert info.value.line == 2
        assert "bad.mesh" in str(info.value)
        assert str(info.value).count("line 2:") == 1
