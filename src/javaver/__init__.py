"""Register installed Java SDKs and switch the system-wide active one."""
