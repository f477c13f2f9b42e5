from typing import List

from pydantic import BaseModel, Field


class CPUInfo(BaseModel):
    architecture: str = Field("", examples=["x86_64"], alias="Architecture")
    cpu_op_modes: str = Field("", examples=["32-bit, 64-bit"], alias="CPUOpModes")
    byte_order: str = Field("", examples=["Order: Little Endian"], alias="ByteOrder")
    cpus: int = Field(0, examples=[8], alias="CPUs")
    threads_per_core: int = Field(0, examples=[2], alias="ThreadsPerCore")
    cores_per_socket: int = Field(0, examples=[4], alias="CoresPerSocket")
    sockets: int = Field(0, examples=[1], alias="Sockets")
    numa_nodes: int = Field(0, examples=[1], alias="NUMANodes")
    vendor_id: str = Field("", examples=["GenuineIntel"], alias="VendorID")
    cpu_family: int = Field(0, examples=[6], alias="CPUFamily")
    model: int = Field(0, examples=[142], alias="Model")
    model_name: str = Field(
        "", examples=["Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz"], alias="ModelName"
    )
    cpu_mhz: float = Field(0.0, examples=[1992.002], alias="CPUMHz")
    bogo_mips: float = Field(0.0, examples=[3984.00], alias="BogoMIPS")
    hypervisor_vendor: str = Field("", examples=["KVM"], alias="HypervisorVendor")
    virtualization_type: str = Field(
        "", examples=["full"], alias="VirtualizationType"
    )
    l1d_cache: str = Field("", examples=["128 KiB"], alias="L1DCache")
    l1i_cache: str = Field("", examples=["128 KiB"], alias="L1ICache")
    l2_cache: str = Field("", examples=["1 MiB"], alias="L2Cache")
    l3_cache: str = Field("", examples=["8 MiB"], alias="L3Cache")
    numa_node0_cpus: str = Field("", examples=["0-7"], alias="NUMANode0CPUs")
    flags: str = Field("", examples=["fpu vme de pse tsc msr pae"], alias="Flags")

    class Config:
        populate_by_name = True
        protected_namespaces = ()


class ProcessInfo(BaseModel):
    pid: int = Field(examples=[1423], alias="PID")
    user: str = Field(examples=["root"], alias="User")
    pr: int = Field(examples=[20], alias="PR")
    ni: int = Field(examples=[0], alias="NI")
    virt: int = Field(examples=[1456324], alias="VIRT")
    res: int = Field(examples=[98236], alias="RES")
    shr: int = Field(examples=[45012], alias="SHR")
    state: str = Field(examples=["S", "R"], alias="S")
    cpu: float = Field(examples=[12.5], alias="%CPU")
    mem: float = Field(examples=[1.2], alias="%MEM")
    time: str = Field(examples=["3:12.45"], alias="TIME+")
    command: str = Field(examples=["/usr/bin/python3 app.py"], alias="COMMAND")

    class Config:
        populate_by_name = True


class DiskInfo(BaseModel):
    filesystem: str = Field(examples=["/dev/sda1"], alias="Filesystem")
    size: str = Field(examples=["100G"], alias="Size")
    used: str = Field(examples=["40G"], alias="Used")
    avail: str = Field(examples=["60G"], alias="Avail")
    use_percent: str = Field(examples=["40%"], alias="UsePercent")
    mounted_on: str = Field(examples=["/"], alias="MountedOn")

    class Config:
        populate_by_name = True


class SystemInfo(BaseModel):
    cpu_info: CPUInfo = Field(default_factory=CPUInfo, alias="CPUInfo")
    process_info: List[ProcessInfo] = Field(default_factory=list, alias="ProcessInfo")
    disk_info: List[DiskInfo] = Field(default_factory=list, alias="DiskInfo")

    class Config:
        populate_by_name = True
