"""
sysinfo-core package

This package serves a snapshot of host system metrics (CPU topology, top
processes and disk usage) parsed from captured command output.
"""
