"""Cache-key scenarios for GraphQL request options.

This package contains end-to-end tests that use request options the way a
cache layer does: as dict keys, looked up by equivalent options built
elsewhere, possibly from several threads at once.
"""
