"""Read system statistics and process cgroup and IO counters from the Linux /proc filesystem."""

__version__ = "0.1.0"

__all__ = [
    "buddyinfo",
    "cmdline",
    "common",
    "cpuinfo",
    "crypto",
    "kernel_random",
    "loadavg",
    "meminfo",
    "net_dev",
    "net_protocols",
    "net_unix",
    "net_wireless",
    "process_cgroup",
    "process_io",
]