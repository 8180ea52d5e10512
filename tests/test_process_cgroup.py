import pytest

from procsys.common import InvalidFieldNumberError, ParseError, ReadError
from procsys.process_cgroup import collect

CGROUP_PATH = (
    "/user.slice/user-1000.slice/[email]/app.slice/"
    "app-org.gnome.Terminal.slice/"
    "vte-spawn-fd5b6c83-c316-470a-9732-4db75febce50.scope"
)


@pytest.fixture
def proc_root(tmp_path):
    proc = tmp_path / "proc"
    (proc / "26231").mkdir(parents=True)
    (proc / "26231" / "cgroup").write_text(f"1::{CGROUP_PATH}\n")
    (proc / "26232").mkdir()
    return proc


def test_proc_cgroup(proc_root):
    cgroups = collect(proc_root / "26231")
    assert len(cgroups) == 1
    assert cgroups[0].hierarchy_id == 1
    assert len(cgroups[0].controllers) == 0
    assert cgroups[0].path == CGROUP_PATH


def test_missing_cgroup_file(proc_root):
    with pytest.raises(ReadError):
        collect(proc_root / "26232")


def test_controllers_are_split(tmp_path):
    (tmp_path / "cgroup").write_text("4:cpu,cpuacct:/system.slice\n0::/\n")
    cgroups = collect(tmp_path)
    assert [c.hierarchy_id for c in cgroups] == [4, 0]
    assert cgroups[0].controllers == ["cpu", "cpuacct"]
    assert cgroups[0].path == "/system.slice"
    assert cgroups[1].controllers == []


def test_wrong_field_count(tmp_path):
    (tmp_path / "cgroup").write_text("1:cpu\n")
    with pytest.raises(InvalidFieldNumberError) as info:
        collect(tmp_path)
    assert info.value.count == 2


def test_bad_hierarchy_id(tmp_path):
    (tmp_path / "cgroup").write_text("x:cpu:/\n")
    with pytest.raises(ParseError) as info:
        collect(tmp_path)
    assert info.value.text == "x"