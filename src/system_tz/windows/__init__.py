"""Windows support: the generated CLDR zone table and the kernel32 probe."""

from system_tz.windows.probe import WindowsProbe

__all__ = ["WindowsProbe"]
