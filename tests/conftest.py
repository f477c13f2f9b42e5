import pytest

from sysinfo_core.constants import CPU_INFO_FILE, DISK_INFO_FILE, TOP_FILE

lscpu_output = """Architecture:                    x86_64
CPU op-mode(s):                  32-bit, 64-bit
Byte Order:                      Little Endian
CPU(s):                          8
On-line CPU(s) list:             0-7
Thread(s) per core:              2
Core(s) per socket:              4
Socket(s):                       1
NUMA node(s):                    1
Vendor ID:                       GenuineIntel
CPU family:                      6
Model:                           142
Model name:                      Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz
Stepping:                        12
CPU MHz:                         1992.002
BogoMIPS:                        3984.00
Hypervisor vendor:               KVM
Virtualization type:             full
L1d cache:                       128 KiB
L1i cache:                       128 KiB
L2 cache:                        1 MiB
L3 cache:                        8 MiB
NUMA node0 CPU(s):               0-7
Flags:                           fpu vme de pse tsc msr pae mce
"""

top_output = """top - 10:15:32 up 3 days,  2:11,  1 user,  load average: 0.52, 0.58, 0.59
Tasks: 212 total,   1 running, 211 sleeping,   0 stopped,   0 zombie
%Cpu(s):  5.3 us,  1.2 sy,  0.0 ni, 93.1 id,  0.3 wa,  0.0 hi,  0.1 si,  0.0 st
MiB Mem :  15876.4 total,   8123.5 free,   4210.7 used,   3542.2 buff/cache
MiB Swap:   2048.0 total,   2048.0 free,      0.0 used.  11234.1 avail Mem

    PID USER      PR  NI    VIRT    RES    SHR S  %CPU  %MEM     TIME+ COMMAND
   1423 root      20   0 1456324  98236  45012 S  12.5   1.2   3:12.45 python3 app.py
   2210 postgres  20   0  321456  45120  40012 S   3.1   0.3   0:45.10 postgres: writer
    881 root      20   0   98236  12044   8120 S   0.7   0.1   1:02.33 /usr/lib/systemd/systemd-journald
   3301 alice     20   0 4523112 812332 120044 R  45.2   5.0  12:01.77 /usr/lib/firefox/firefox -contentproc
      1 root      20   0  168232  13012   8344 S   0.0   0.1   0:05.12 /sbin/init splash
   3302 alice     20   0 2811232 402112  98012 S  22.8   2.5   4:10.02 /usr/lib/firefox/firefox
     12 root      rt   0       0      0      0 S   0.3   0.0   0:00.41 migration/0
     57 root       0 -20       0      0      0 I   0.2   0.0   0:00.00 kworker/0:1H-kblockd
   4410 bob       20   0  612332  52120  31044 S   8.9   0.3   0:12.55 node server.js
   4411 bob       20   0  612332  52120  31044 S   6.4   0.3   0:09.12 node worker.js
   5120 root      20   0   22312   4012   3120 R   1.9   0.0   0:00.08 top -b -n 1
   1001 mysql     20   0 1812232 402332  32012 S   2.4   2.5   7:44.90 /usr/sbin/mysqld
    700 root      20   0   12312   3012   2120 S   0.1   0.0   0:00.33 /usr/sbin/cron -f
    650 messagebus 20  0    9812   5120   4020 S   0.5   0.0   0:03.12 /usr/bin/dbus-daemon --system
"""

df_output = """Filesystem      Size  Used Avail Use% Mounted on
udev            7.8G     0  7.8G   0% /dev
tmpfs           1.6G  2.1M  1.6G   1% /run
/dev/sda1       100G   40G   60G  40% /
tmpfs           7.8G  120M  7.7G   2% /dev/shm
/dev/sdb1       916G  512G  358G  59% /mnt/data
"""


@pytest.fixture
def lscpu_lines():
    return lscpu_output.splitlines(keepends=True)


@pytest.fixture
def top_lines():
    return top_output.splitlines(keepends=True)


@pytest.fixture
def df_lines():
    return df_output.splitlines(keepends=True)


@pytest.fixture
def report_dir(tmp_path):
    """A data directory holding all three captured reports."""
    (tmp_path / CPU_INFO_FILE).write_text(lscpu_output)
    (tmp_path / TOP_FILE).write_text(top_output)
    (tmp_path / DISK_INFO_FILE).write_text(df_output)
    return tmp_path
