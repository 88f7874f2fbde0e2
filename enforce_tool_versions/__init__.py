"""
Enforce Tool Versions

Checks that locally installed tools meet the version requirements declared
in a config file.
"""

__package_name__ = "enforce-tool-versions"
__version__ = "0.1.0"
