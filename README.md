# procparse

Small, dependency-free parsers for the Linux `/proc` filesystem. Each reader
takes a file path, so it works just as well on a live system as on a saved
copy of `/proc` files. Results are plain dataclasses (or lists of them).

## Installation

```
pip install procparse
```

## Usage

```python
from procparse.cpuinfo import read_cpuinfo
from procparse.meminfo import read_meminfo
from procparse.loadavg import read_loadavg

cpu = read_cpuinfo("/proc/cpuinfo")
print(cpu.num_cpu(), cpu.num_core(), cpu.num_physical_cpu())

mem = read_meminfo("/proc/meminfo")
print(mem.mem_total, mem.mem_free)

load = read_loadavg("/proc/loadavg")
print(load.last1min, load.last5min, load.last15min)
```

Socket tables are read with an address decoder chosen by the address family.
`decode_ipv4` and `decode_ipv6` turn the kernel's hex form (for example
`0100007F:1F90`) into `address:port` text (`127.0.0.1:8080`):

```python
from procparse.net_ip import decode_ipv4, decode_ipv6
from procparse.net_tcp import read_net_tcp_sockets

for sock in read_net_tcp_sockets("/proc/net/tcp", decode_ipv4):
    print(sock.local_address, sock.remote_address, sock.status)

tcp6 = read_net_tcp_sockets("/proc/net/tcp6", decode_ipv6)
```

Per-process information:

```python
from procparse.process import read_process
from procparse.process_pid import read_max_pid, list_pids

for pid in list_pids("/proc", read_max_pid("/proc/sys/kernel/pid_max")):
    proc = read_process(pid, "/proc")
    print(pid, proc.status.name, proc.cmdline)
```

`read_process` combines the `status`, `statm`, `stat`, `io` and `cmdline`
files of one process into a `Process`.

Durations are available as `datetime.timedelta`: `Uptime.total_duration()`
and `Uptime.idle_duration()`, and `DiskStat.read_time()`, `write_time()`,
`io_time()` and `queue_time()`. `DiskStat.read_bytes()` and `write_bytes()`
convert sector counts to bytes.

## Available readers

| Module | Reader | Returns | Input |
| --- | --- | --- | --- |
| `cpuinfo` | `read_cpuinfo` | `CPUInfo` | `/proc/cpuinfo` |
| `disk` | `read_disk` | `Disk` | any path (statvfs of its file system) |
| `diskstat` | `read_disk_stats` | `list[DiskStat]` | `/proc/diskstats` |
| `interrupts` | `read_interrupts` | `list[Interrupt]` | `/proc/interrupts` |
| `loadavg` | `read_loadavg` | `LoadAvg` | `/proc/loadavg` |
| `meminfo` | `read_meminfo` | `MemInfo` | `/proc/meminfo` |
| `mounts` | `read_mounts` | `list[Mount]` | `/proc/mounts` |
| `net_tcp` | `read_net_tcp_sockets` | `list[NetTCPSocket]` | `/proc/net/tcp`, `/proc/net/tcp6` |
| `net_udp` | `read_net_udp_sockets` | `list[NetUDPSocket]` | `/proc/net/udp`, `/proc/net/udp6` |
| `net_unix` | `read_net_unix_domain_sockets` | `list[NetUnixDomainSocket]` | `/proc/net/unix` |
| `netstat` | `read_netstat` | `NetStat` | `/proc/net/netstat` |
| `network_stat` | `read_network_stats` | `list[NetworkStat]` | `/proc/net/dev` |
| `snmp` | `read_snmp` | `Snmp` | `/proc/net/snmp` |
| `sockstat` | `read_sockstat` | `SockStat` | `/proc/net/sockstat` |
| `stat` | `read_stat` | `Stat` | `/proc/stat` |
| `uptime` | `read_uptime` | `Uptime` | `/proc/uptime` |
| `vmstat` | `read_vmstat` | `VMStat` | `/proc/vmstat` |
| `process` | `read_process` | `Process` | `/proc/<pid>/` |
| `process_cmdline` | `read_process_cmdline` | `str` | `/proc/<pid>/cmdline` |
| `process_io` | `read_process_io` | `ProcessIO` | `/proc/<pid>/io` |
| `process_sched_stat` | `read_process_sched_stat` | `ProcessSchedStat` | `/proc/<pid>/schedstat` |
| `process_stat` | `read_process_stat` | `ProcessStat` | `/proc/<pid>/stat` |
| `process_statm` | `read_process_statm` | `ProcessStatm` | `/proc/<pid>/statm` |
| `process_status` | `read_process_status` | `ProcessStatus` | `/proc/<pid>/status` |
| `process_pid` | `read_max_pid`, `list_pids` | `int`, `list[int]` | `/proc/sys/kernel/pid_max`, `/proc` |

## Errors

Readers raise `OSError` when a file cannot be read and `ValueError` when its
structure cannot be parsed. The counter-style readers (`meminfo`, `netstat`,
`snmp`, `sockstat`, `stat`, `vmstat`, `network_stat`, `diskstat`) read a
single malformed number as 0 rather than failing; unknown keys are ignored.

## What it does not do

procparse only parses files. It has no command-line tool, does not sample
values over time or compute rates, and does not store or export the results.

## Running the tests

```
pip install -e ".[test]"
pytest
```