import json
import sys
import uuid

import pytest

from xeus_cling_setup.data import (
    CxxStandard,
    DeferredValue,
    LiteralValue,
    SessionContext,
    SessionRequest,
)
from xeus_cling_setup.session import ArtifactComposer, kernel_id, render_all

RESOLVED = {
    "$<TARGET_PROPERTY:foo,INTERFACE_INCLUDE_DIRECTORIES>": "/foo/include;/bar/include",
    "$<TARGET_PROPERTY:foo,INTERFACE_COMPILE_FLAGS>": "-O2;-Wall",
    "$<TARGET_PROPERTY:foo,INTERFACE_COMPILE_DEFINITIONS>": "FOO;BAR=2",
    "$<TARGET_FILE:foo>": "/build/libfoo.so",
    "$<EMPTY>": "",
}


def resolve(expression: str) -> str:
    return RESOLVED[expression]


@pytest.fixture
def composer(context: SessionContext) -> ArtifactComposer:
    return ArtifactComposer(context, "/prefix/bin/xcpp")


def test_kernel_id_is_name_based():
    assert kernel_id("C++17 (demo)") == str(uuid.uuid5(uuid.UUID(int=0), "C++17 (demo)"))
    assert kernel_id("C++17 (demo)") == kernel_id("C++17 (demo)")
    assert kernel_id("C++17 (demo)") != kernel_id("C++14 (demo)")


def test_header(composer: ArtifactComposer):
    request = SessionRequest(
        include_directories=(
            LiteralValue(value="/A"),
            DeferredValue(expression="$<TARGET_PROPERTY:foo,INTERFACE_INCLUDE_DIRECTORIES>"),
        ),
        library_directories=(LiteralValue(value="/libs"),),
        link_libraries=(DeferredValue(expression="$<TARGET_FILE:foo>"),),
        setup_headers=("foo.hpp", "vector"),
    )
    header = composer.compose_header(request)
    assert header.path == composer.header_path
    assert header.path.name == "xeus_cling.hh"
    assert header.render(resolve) == (
        '#pragma cling add_include_path("/A")\n'
        '#pragma cling add_include_path("/foo/include")\n'
        '#pragma cling add_include_path("/bar/include")\n'
        '#pragma cling add_library_path("/libs")\n'
        '#pragma cling load("/build/libfoo.so")\n'
        "#include<foo.hpp>\n"
        "#include<vector>\n"
    )


def test_empty_deferred_values_emit_nothing(composer: ArtifactComposer):
    request = SessionRequest(
        include_directories=(DeferredValue(expression="$<EMPTY>"), LiteralValue(value="")),
    )
    assert composer.compose_header(request).render(resolve) == ""


def test_manifest(composer: ArtifactComposer, context: SessionContext):
    request = SessionRequest(
        cxx_standard=CxxStandard.CXX14,
        compile_flags=(
            LiteralValue(value="-g"),
            DeferredValue(expression="$<TARGET_PROPERTY:foo,INTERFACE_COMPILE_FLAGS>"),
        ),
        compile_definitions=(
            DeferredValue(expression="$<TARGET_PROPERTY:foo,INTERFACE_COMPILE_DEFINITIONS>"),
            DeferredValue(expression="$<EMPTY>"),
        ),
    )
    manifest = json.loads(composer.compose_manifest(request).render(resolve))
    assert manifest == {
        "display_name": "C++14 (demo)",
        "argv": [
            "/prefix/bin/xcpp",
            "-f",
            "{connection_file}",
            "-std=c++14",
            "-g",
            "-O2",
            "-Wall",
            "-DFOO",
            "-DBAR=2",
            "-include",
            str(context.binary_dir / "xeus_cling.hh"),
        ],
        "language": "C++14",
    }


def test_compose(composer: ArtifactComposer):
    artifacts = composer.compose(SessionRequest(kernel_name="Custom"))
    assert artifacts.display_name == "Custom"
    assert artifacts.kernel_id == kernel_id("Custom")
    assert artifacts.manifest.path == composer.manifest_path
    assert json.loads(artifacts.manifest.render(resolve))["display_name"] == "Custom"


def test_render_all_resolves_before_writing(composer: ArtifactComposer):
    artifacts = composer.compose(
        SessionRequest(link_libraries=(DeferredValue(expression="$<TARGET_FILE:unknown>"),))
    )
    with pytest.raises(KeyError):
        render_all([artifacts.header, artifacts.manifest], resolve)
    assert not composer.header_path.exists()
    assert not composer.manifest_path.exists()


if __name__ == "__main__":
    pytest.main(sys.argv)
