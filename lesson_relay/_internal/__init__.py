"""Internal modules for lesson-relay.

These are not intended for direct use in application code.

Modules:
    dispatch - Direct and page-context dispatch strategies
    payloads - Wire-format editing for captured bodies
    http - Shared HTTP client configuration
    redaction - Header redaction for debug traces
"""
