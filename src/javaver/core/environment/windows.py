"""Windows registry implementation of the machine-wide environment store."""

import ctypes
import logging
import os
import winreg
from ctypes import wintypes

from javaver.core.environment.abc import SystemEnvironment

logger = logging.getLogger(__name__)

ENVIRONMENT_KEY = r"SYSTEM\CurrentControlSet\Control\Session Manager\Environment"
PATH_VALUE_NAME = "Path"

HWND_BROADCAST = 0xFFFF
WM_SETTINGCHANGE = 0x001A
SMTO_ABORTIFHUNG = 0x0002
BROADCAST_TIMEOUT_MS = 5000


class WindowsSystemEnvironment(SystemEnvironment):
    """Reads and writes PATH under HKEY_LOCAL_MACHINE.

    Writing requires an elevated process; a non-elevated write raises
    PermissionError from winreg.
    """

    @property
    def path_separator(self) -> str:
        return ";"

    def read_path(self) -> str:
        with winreg.OpenKey(
            winreg.HKEY_LOCAL_MACHINE, ENVIRONMENT_KEY, 0, winreg.KEY_READ
        ) as key:
            try:
                value, _ = winreg.QueryValueEx(key, PATH_VALUE_NAME)
            except FileNotFoundError:
                return ""
        return str(value)

    def write_path(self, value: str) -> None:
        # REG_EXPAND_SZ keeps %SystemRoot%-style references expandable
        with winreg.OpenKey(
            winreg.HKEY_LOCAL_MACHINE, ENVIRONMENT_KEY, 0, winreg.KEY_SET_VALUE
        ) as key:
            winreg.SetValueEx(key, PATH_VALUE_NAME, 0, winreg.REG_EXPAND_SZ, value)

    def broadcast_change(self) -> bool:
        send_message_timeout = ctypes.windll.user32.SendMessageTimeoutW
        send_message_timeout.argtypes = [
            wintypes.HWND,
            wintypes.UINT,
            wintypes.WPARAM,
            wintypes.LPARAM,
            wintypes.UINT,
            wintypes.UINT,
            ctypes.POINTER(wintypes.DWORD),
        ]
        send_message_timeout.restype = wintypes.LPARAM

        area = ctypes.create_unicode_buffer("Environment")
        result = wintypes.DWORD(0)
        delivered = send_message_timeout(
            HWND_BROADCAST,
            WM_SETTINGCHANGE,
            0,
            ctypes.addressof(area),
            SMTO_ABORTIFHUNG,
            BROADCAST_TIMEOUT_MS,
            ctypes.byref(result),
        )
        logger.debug("WM_SETTINGCHANGE broadcast returned %s", delivered)
        return bool(delivered)

    def set_process_variable(self, name: str, value: str) -> None:
        os.environ[name] = value
