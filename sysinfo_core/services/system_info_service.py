"""
Parsers for captured lscpu, top and df reports, and the snapshot built from them
"""

import json
import math
import re
from contextlib import contextmanager
from pathlib import Path
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    TextIO,
    Tuple,
    Union,
)

from sysinfo_core.constants import CPU_SOURCE, DISK_SOURCE, PROCESS_LIMIT, TOP_SOURCE
from sysinfo_core.core.logging import get_logger
from sysinfo_core.models.output_write_error import OutputWriteError
from sysinfo_core.models.source_read_error import SourceReadError
from sysinfo_core.models.top_processes import TopProcesses
from sysinfo_core.schemas.system_info import CPUInfo, DiskInfo, ProcessInfo, SystemInfo

log = get_logger(__name__)

PathLike = Union[str, Path]


def _is_plain_number(value: str) -> bool:
    # int() and float() also accept "_" digit separators and non-ASCII digits
    return value.isascii() and "_" not in value


def _to_int(value: str) -> int:
    if not _is_plain_number(value):
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


def _to_float(value: str) -> float:
    if not _is_plain_number(value):
        return 0.0
    try:
        result = float(value)
    except ValueError:
        return 0.0
    # nan and inf have no JSON representation
    return result if math.isfinite(result) else 0.0


# lscpu key table
#
# Keys are compared exactly against the first whitespace separated token of a
# line, so the literal text below is the contract with the report generator.
# Colons and spaces are inconsistent between keys and are kept as captured:
#
# - "Byte", "Thread(s)" and "Core(s)" only match the first word of multi word
#   labels, so their value carries the rest of the label ("Order: Little
#   Endian", "per core: 2"). The two counts therefore come out as 0 for stock
#   lscpu output.
# - "NUMANode0CPUs ", "VendorID " and "VirtualizationType " end in a space and
#   can never equal a split token. NUMANodes, VendorID and VirtualizationType
#   stay at their defaults.
#
# These need a decision from the maintainer before being changed.
CPU_INFO_KEYS: Dict[str, Tuple[str, Callable[[str], Union[str, int, float]]]] = {
    "Architecture:": ("architecture", str),
    "CPUOpModes": ("cpu_op_modes", str),
    "Byte": ("byte_order", str),
    "CPU(s):": ("cpus", _to_int),
    "Thread(s)": ("threads_per_core", _to_int),
    "Core(s)": ("cores_per_socket", _to_int),
    "Socket(s):": ("sockets", _to_int),
    "NUMANode0CPUs ": ("numa_nodes", _to_int),
    "VendorID ": ("vendor_id", str),
    "CPUFamily": ("cpu_family", _to_int),
    "Model:": ("model", _to_int),
    "ModelName": ("model_name", str),
    "CPUMHz": ("cpu_mhz", _to_float),
    "BogoMIPS:": ("bogo_mips", _to_float),
    "HypervisorVendor": ("hypervisor_vendor", str),
    "VirtualizationType ": ("virtualization_type", str),
    "L1DCache": ("l1d_cache", str),
    "L1ICache": ("l1i_cache", str),
    "L2Cache": ("l2_cache", str),
    "L3Cache": ("l3_cache", str),
    "NUMANode0CPUs": ("numa_node0_cpus", str),
    "Flags:": ("flags", str),
}

# one row of `top -b` output, e.g.
#  1423 root      20   0 1456324  98236  45012 S  12.5   1.2   3:12.45 python3 app.py
TOP_LINE_RE = re.compile(
    r"^\s*(?P<pid>\d+)\s+(?P<user>\S+)\s+(?P<pr>\d+)\s+(?P<ni>\d+)\s+"
    r"(?P<virt>\d+)\s+(?P<res>\d+)\s+(?P<shr>\d+)\s+(?P<state>\S+)\s+"
    r"(?P<cpu>[\d.]+)\s+(?P<mem>[\d.]+)\s+(?P<time>\S+)\s+(?P<command>.*)$",
    re.ASCII,
)

# one row of `df -h` output, e.g.
# /dev/sda1       100G   40G   60G  40% /
DISK_LINE_RE = re.compile(
    r"^(?P<filesystem>\S+)\s+(?P<size>\S+)\s+(?P<used>\S+)\s+(?P<avail>\S+)\s+"
    r"(?P<use_percent>\S+)\s+(?P<mounted_on>\S+)\s*$"
)


def parse_cpu_info(lines: Iterable[str]) -> CPUInfo:
    """
    Builds a CPUInfo from lscpu style "key value" lines.

    Lines with fewer than two tokens and keys missing from CPU_INFO_KEYS are
    ignored. Numeric values that do not convert are stored as zero.
    """
    values = {}
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            continue

        key = fields[0]
        if key not in CPU_INFO_KEYS:
            continue

        field_name, convert = CPU_INFO_KEYS[key]
        values[field_name] = convert(" ".join(fields[1:]))

    log.debug(f"Parsed {len(values)} CPU info fields")
    return CPUInfo(**values)


def parse_process_line(line: str) -> Optional[ProcessInfo]:
    """
    Returns the process on a single top row, or None if the row does not fit
    """
    match = TOP_LINE_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None

    return ProcessInfo(
        pid=_to_int(match["pid"]),
        user=match["user"],
        pr=_to_int(match["pr"]),
        ni=_to_int(match["ni"]),
        virt=_to_int(match["virt"]),
        res=_to_int(match["res"]),
        shr=_to_int(match["shr"]),
        state=match["state"],
        cpu=_to_float(match["cpu"]),
        mem=_to_float(match["mem"]),
        time=match["time"],
        command=match["command"],
    )


def parse_top_output(
    lines: Iterable[str], limit: int = PROCESS_LIMIT
) -> List[ProcessInfo]:
    """
    Returns up to `limit` processes from top output, highest %CPU first.

    Header, summary and blank lines do not match the row pattern and are
    skipped.
    """
    top_processes = TopProcesses(limit=limit)
    for line in lines:
        process = parse_process_line(line)
        if process is not None:
            top_processes.insert(process)

    log.debug(f"Kept {len(top_processes)} processes from top output")
    return top_processes.to_list()


def parse_disk_info(lines: Iterable[str]) -> List[DiskInfo]:
    """
    Returns one DiskInfo per df row, in input order. Sizes stay as text.
    """
    disks = []
    for line in lines:
        match = DISK_LINE_RE.match(line.rstrip("\r\n"))
        if match is None:
            continue
        disks.append(DiskInfo(**match.groupdict()))

    log.debug(f"Parsed {len(disks)} disk info rows")
    return disks


@contextmanager
def _open_report(source: str, file_path: PathLike) -> Iterator[TextIO]:
    """
    Opens a captured report for line by line reading. Any OSError while the
    report is open is raised as a SourceReadError naming the source.
    """
    try:
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            yield f
    except OSError as exc:
        raise SourceReadError(
            source=source, path=str(file_path), error_msg=str(exc)
        ) from exc


def read_and_parse_cpu_info(file_path: PathLike) -> CPUInfo:
    with _open_report(CPU_SOURCE, file_path) as f:
        return parse_cpu_info(f)


def read_and_parse_top_output(
    file_path: PathLike, limit: int = PROCESS_LIMIT
) -> List[ProcessInfo]:
    with _open_report(TOP_SOURCE, file_path) as f:
        return parse_top_output(f, limit=limit)


def read_and_parse_disk_info(file_path: PathLike) -> List[DiskInfo]:
    with _open_report(DISK_SOURCE, file_path) as f:
        return parse_disk_info(f)


def get_system_info(
    cpu_info_path: PathLike,
    top_path: PathLike,
    disk_info_path: PathLike,
    process_limit: int = PROCESS_LIMIT,
) -> SystemInfo:
    """
    Parses the three captured reports, in order, into one snapshot.

    A SourceReadError from any report is passed on to the caller and no
    snapshot is returned.
    """
    cpu_info = read_and_parse_cpu_info(cpu_info_path)
    process_info = read_and_parse_top_output(top_path, limit=process_limit)
    disk_info = read_and_parse_disk_info(disk_info_path)

    return SystemInfo(
        cpu_info=cpu_info, process_info=process_info, disk_info=disk_info
    )


def render_system_info(system_info: SystemInfo) -> str:
    """
    Serializes a snapshot with its wire names and 2 space indentation
    """
    return json.dumps(
        system_info.model_dump(by_alias=True),
        ensure_ascii=False,
        allow_nan=False,
        indent=2,
    )


def write_to_json_file(filename: PathLike, content: str) -> None:
    """
    Writes content to filename verbatim, replacing anything already there
    """
    try:
        with open(filename, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise OutputWriteError(path=str(filename), error_msg=str(exc)) from exc
    log.info(f"Wrote {len(content)} characters to {filename}")
