import pytest

from procsys import cpuinfo
from procsys.common import ByteConvertError, MetricError, ParseError, ReadError

_FLAGS = "fpu vme de pse tsc msr pae mce cx8 apic sep mtrr pge mca cmov"
_BUGS = "cpu_meltdown spectre_v1 spectre_v2 spec_store_bypass l1tf mds swapgs"


def _processor(index, mhz, core_id, apic_id):
    return (
        f"processor\t: {index}\n"
        "vendor_id\t: GenuineIntel\n"
        "cpu family\t: 6\n"
        "model\t\t: 142\n"
        "model name\t: Intel(R) Core(TM) i7-8650U CPU @ 1.90GHz\n"
        "stepping\t: 10\n"
        "microcode\t: 0xb4\n"
        f"cpu MHz\t\t: {mhz}\n"
        "cache size\t: 8192 KB\n"
        "physical id\t: 0\n"
        "siblings\t: 8\n"
        f"core id\t\t: {core_id}\n"
        "cpu cores\t: 4\n"
        f"apicid\t\t: {apic_id}\n"
        f"initial apicid\t: {apic_id}\n"
        "fpu\t\t: yes\n"
        "fpu_exception\t: yes\n"
        "cpuid level\t: 22\n"
        "wp\t\t: yes\n"
        f"flags\t\t: {_FLAGS}\n"
        f"bugs\t\t: {_BUGS}\n"
        "bogomips\t: 4224.00\n"
        "clflush size\t: 64\n"
        "cache_alignment\t: 64\n"
        "address sizes\t: 39 bits physical, 48 bits virtual\n"
        "power management:\n"
        "\n"
    )


CPUINFO = _processor(0, "799.998", 0, 0) + _processor(1, "800.037", 1, 2)

EXPECTED_BUGS = [
    "cpu_meltdown",
    "spectre_v1",
    "spectre_v2",
    "spec_store_bypass",
    "l1tf",
    "mds",
    "swapgs",
]


@pytest.fixture
def cpuinfo_file(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text(CPUINFO)
    return path


def _check_common(cpu):
    assert cpu.vendor_id == "GenuineIntel"
    assert cpu.cpu_family == 6
    assert cpu.model == 142
    assert cpu.model_name == "Intel(R) Core(TM) i7-8650U CPU @ 1.90GHz"
    assert cpu.stepping == 10
    assert cpu.microcode == "0xb4"
    assert cpu.cache_size_bytes == 8388608
    assert cpu.physical_id == 0
    assert cpu.siblings == 8
    assert cpu.cpu_cores == 4
    assert cpu.fpu == "yes"
    assert cpu.fpu_exception == "yes"
    assert cpu.cpu_id_level == 22
    assert cpu.wp == "yes"
    assert cpu.vmx_flags == []
    assert cpu.bugs == EXPECTED_BUGS
    assert cpu.clflush_size == 64
    assert cpu.cache_alignment == 64
    assert cpu.address_sizes == "39 bits physical, 48 bits virtual"
    assert cpu.bogomips == 4224.00
    assert cpu.power_management == ""


def test_cpuinfo(cpuinfo_file):
    cpus = cpuinfo.collect(cpuinfo_file)
    assert len(cpus) == 2

    for cpu in cpus:
        _check_common(cpu)
        if cpu.processor == 0:
            assert cpu.cpu_mhz == 799.998
            assert cpu.core_id == 0
            assert cpu.apic_id == 0
            assert cpu.initial_apic_id == 0
        elif cpu.processor == 1:
            assert cpu.cpu_mhz == 800.037
            assert cpu.core_id == 1
            assert cpu.apic_id == 2
            assert cpu.initial_apic_id == 2
        else:
            pytest.fail(f"invalid processor: {cpu.processor}")


def test_flags_are_split_in_order(cpuinfo_file):
    cpus = cpuinfo.collect(cpuinfo_file)
    assert cpus[0].flags == _FLAGS.split(" ")
    assert cpus[0].flags[0] == "fpu"
    assert cpus[1].flags[-1] == "cmov"


def test_invalid_family_raises(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text("processor\t: 0\ncpu family\t: six\n")
    with pytest.raises(ParseError) as info:
        cpuinfo.collect(path)
    assert info.value.item == "cpu family"


def test_invalid_mhz_raises(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text("processor\t: 0\ncpu MHz\t\t: fast\n")
    with pytest.raises(ParseError):
        cpuinfo.collect(path)


def test_unknown_cache_unit_raises(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text("processor\t: 0\ncache size\t: 8 XB\n")
    with pytest.raises(ByteConvertError):
        cpuinfo.collect(path)


def test_cache_size_without_unit_is_bytes(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text("processor\t: 3\ncache size\t: 512\n")
    cpus = cpuinfo.collect(path)
    assert [(cpu.processor, cpu.cache_size_bytes) for cpu in cpus] == [(3, 512)]


def test_unknown_fields_are_ignored(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text("something\t: else\nprocessor\t: 0\nhypervisor\t: none\n")
    cpus = cpuinfo.collect(path)
    assert len(cpus) == 1
    assert cpus[0].processor == 0


def test_field_before_processor_raises(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text("vendor_id\t: GenuineIntel\n")
    with pytest.raises(MetricError):
        cpuinfo.collect(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ReadError):
        cpuinfo.collect(tmp_path / "absent")