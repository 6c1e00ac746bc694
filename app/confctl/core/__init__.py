"""Core configuration logic for confctl.

This package contains the config handles, single-key operations,
copy/compare logic, settings, paths, and theming.
"""
