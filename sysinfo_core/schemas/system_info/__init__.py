from .system_info import CPUInfo, DiskInfo, ProcessInfo, SystemInfo

__all__ = ["CPUInfo", "DiskInfo", "ProcessInfo", "SystemInfo"]
