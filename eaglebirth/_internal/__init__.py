"""Internal modules for the EagleBirth SDK.

WARNING: These modules are not part of the public API and may change without
notice.

Modules:
    dispatch - Request execution and error classification
    http - Shared HTTP client configuration
"""
