"""
Tests for the Python source generator.

Generated modules must be valid Python and must rebuild containers
equal to the ones they were generated from.
"""

import math

import pytest
from static_types.backends.codegen import DeclStyle, generate_module, save_module_file
from static_types.errors import DeclarationError
from static_types.hetero import HeteroList
from static_types.mapping import StaticMap
from static_types.sequences import ConstList, StrList


def sample_declarations():
    return {
        "COEFS": ConstList.of(float, 0.5, 0.25),
        "IDS": ConstList.of(int, 1),
        "GROUPS": StrList.of("chicken", "beef"),
        "GROUPDEFS": StaticMap.of(
            str, StrList,
            ("chicken", StrList.of("foo", "bar")),
            ("beef", StrList.of("baz", "bat")),
        ),
        "EMPTY": StaticMap(key_type=str, value_type=int),
    }


def _execute(source):
    namespace = {}
    exec(compile(source, "<generated>", "exec"), namespace)
    return namespace


class TestGeneratedSource:
    """Test the rendered module text."""

    def test_header_imports(self):
        source = generate_module({})
        assert "from static_types.sequences import ConstList, StrList" in source
        assert "from static_types.mapping import StaticMap" in source

    def test_constructor_style(self):
        source = generate_module({"COEFS": ConstList.of(float, 0.5, 0.25)})
        assert "COEFS = ConstList(value_type=float, values=(0.5, 0.25))" in source

    def test_compact_style(self):
        source = generate_module({"GROUPS": StrList.of("a", "b")}, style=DeclStyle.COMPACT)
        assert "GROUPS = StrList.of('a', 'b')" in source


class TestRebuild:
    """Executing the generated module should rebuild equal containers."""

    @pytest.mark.parametrize("style", [DeclStyle.CONSTRUCTOR, DeclStyle.COMPACT])
    def test_rebuilds_equal_containers(self, style):
        declarations = sample_declarations()
        namespace = _execute(generate_module(declarations, style=style))
        for name, container in declarations.items():
            assert namespace[name] == container

    @pytest.mark.parametrize("style", [DeclStyle.CONSTRUCTOR, DeclStyle.COMPACT])
    def test_non_finite_floats_rebuild(self, style):
        """Infinities and NaN must render as expressions, not bare names."""
        declarations = {
            "EDGES": ConstList.of(float, float("inf"), float("-inf"), 1.5),
            "LIMITS": StaticMap.of(float, str, (float("inf"), "top")),
            "MISSING": ConstList.of(float, float("nan")),
        }
        namespace = _execute(generate_module(declarations, style=style))
        assert namespace["EDGES"] == declarations["EDGES"]
        assert namespace["LIMITS"].get(float("inf")) == "top"
        assert math.isnan(namespace["MISSING"].at(0))

    def test_single_element_tuple(self):
        namespace = _execute(generate_module({"ONE": ConstList.of(int, 1)}))
        assert namespace["ONE"].size() == 1


class TestErrors:
    """Test rejected inputs."""

    def test_invalid_name(self):
        with pytest.raises(DeclarationError):
            generate_module({"not a name": ConstList.of(int, 1)})

    def test_keyword_name(self):
        with pytest.raises(DeclarationError):
            generate_module({"class": ConstList.of(int, 1)})

    def test_hetero_list_rejected(self):
        with pytest.raises(TypeError):
            generate_module({"SLIST": HeteroList()})


def test_save_module_file(tmp_path):
    out = tmp_path / "declarations.py"
    save_module_file(sample_declarations(), str(out))
    content = out.read_text()
    assert "GROUPDEFS = StaticMap(" in content
    assert "('beef', StrList(values=('baz', 'bat')))" in content
