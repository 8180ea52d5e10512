# procsys

`procsys` reads system and per-process statistics from the Linux `/proc`
filesystem and returns them as plain Python dataclasses. It has no
dependencies outside the standard library.

## Installation

```
pip install procsys
```

## What it collects

| Module                   | Reads                          | Returns                      |
|--------------------------|--------------------------------|------------------------------|
| `procsys.buddyinfo`      | `/proc/buddyinfo`              | list of `BuddyInfo`          |
| `procsys.cmdline`        | `/proc/cmdline`                | list of strings              |
| `procsys.cpuinfo`        | `/proc/cpuinfo`                | list of `CpuInfo`            |
| `procsys.crypto`         | `/proc/crypto`                 | list of `Crypto`             |
| `procsys.kernel_random`  | `/proc/sys/kernel/random`      | `KernelRandom`               |
| `procsys.loadavg`        | `/proc/loadavg`                | `LoadAvg`                    |
| `procsys.meminfo`        | `/proc/meminfo` (in bytes)     | `Meminfo`                    |
| `procsys.net_dev`        | `/proc/net/dev`                | list of `NetDev`             |
| `procsys.net_protocols`  | `/proc/net/protocols`          | list of `NetProtocol`        |
| `procsys.net_unix`       | `/proc/net/unix`               | list of `NetUnix`            |
| `procsys.net_wireless`   | `/proc/net/wireless`           | list of `Wireless`           |
| `procsys.process_cgroup` | `<proc_dir>/cgroup`            | list of `ProcessCgroup`      |
| `procsys.process_io`     | `<proc_dir>/io`                | `ProcessIO`                  |

Every module exposes a `collect()` function. For the system-wide modules
the path argument defaults to the file or directory shown above and may
point at a copy of `/proc` taken from another machine. The two process
modules take the process directory, such as `/proc/1`, as a required
argument.

## Library use

```python
from procsys import crypto, loadavg, meminfo, process_io

load = loadavg.collect()
print(load.load1, load.load5, load.load15)

mem = meminfo.collect()
print(mem.mem_total, mem.mem_free)

io = process_io.collect("/proc/self")
print(io.rchar, io.wchar)

for entry in crypto.collect():
    print(entry.to_dict())
```

Fields that the kernel does not report are `None` in `Meminfo`,
`KernelRandom` and the numeric fields of `Crypto`; `Crypto.to_dict()`
leaves such fields out.

## Errors

Errors are raised as subclasses of `procsys.common.MetricError`, for
example `ReadError` when a file cannot be read, `InvalidFieldNumberError`
when a line does not have the expected shape, `ParseError` when a value
that must be a number is not one, and `ByteConvertError` when a size
carries an unknown unit. `procsys.common` also holds the small helpers
the collectors share: `read_lines`, `read_value`, `list_dir`,
`convert_to_bytes`, `parse_u64` and `parse_i64`.

## What it does not do

- There is no command-line program; the package is used as a library.
- There is no process listing: it does not enumerate the running
  processes or read a process's command name, command line, environment,
  executable, working directory or resource limits. For a single process
  only its control groups and IO counters are read, from a directory you
  name.

## Running the tests

```
pip install -e .[test]
pytest
```