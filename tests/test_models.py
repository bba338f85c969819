from pathlib import Path, PurePosixPath

from llvmweave.config import DEFAULT_LAYOUT
from llvmweave.models import CORE, ArchiveRecord, Component


def test_core_is_llvm():
    """Verify core is llvm behavior."""
    assert CORE is Component.LLVM
    assert CORE.value == "llvm"


def test_lookup_unknown_component():
    """Verify lookup unknown component behavior."""
    assert Component.lookup("cfe") is Component.CFE
    assert Component.lookup("flang") is None


def test_layout_covers_every_component():
    """Every component has exactly one destination."""
    assert set(DEFAULT_LAYOUT) == set(Component)
    assert DEFAULT_LAYOUT[Component.LLVM] == PurePosixPath("llvm")
    assert DEFAULT_LAYOUT[Component.CLANG_TOOLS_EXTRA] == PurePosixPath(
        "llvm/tools/clang/tools/extra"
    )


def test_auxiliaries_nest_below_core():
    """Verify auxiliaries nest below core behavior."""
    core = DEFAULT_LAYOUT[CORE]
    for component, rel in DEFAULT_LAYOUT.items():
        if component is not CORE:
            assert core in rel.parents


def test_record_from_path():
    """Verify record from path behavior."""
    rec = ArchiveRecord.from_path(Path("/dl/compiler-rt-6.0.1.src.tar.xz"))
    assert rec is not None
    assert rec.name == "compiler-rt"
    assert rec.version == "6.0.1"
    assert rec.component is Component.COMPILER_RT
    assert rec.prefix == "compiler-rt-6.0.1.src"
    assert not rec.is_core
    assert rec.path == Path("/dl/compiler-rt-6.0.1.src.tar.xz")


def test_record_from_path_rejects_other_names():
    """Verify record from path rejects other names behavior."""
    assert ArchiveRecord.from_path(Path("notes.txt")) is None


def test_record_with_unknown_component():
    """Unknown names are kept as records; only their component is missing."""
    rec = ArchiveRecord.from_path(Path("flang-6.0.0.src.tar.xz"))
    assert rec is not None
    assert rec.component is None
