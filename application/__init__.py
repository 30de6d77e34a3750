"""
Application Layer for the routine service.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Catalog, routine and workout log operations
- exceptions: Errors raised by use cases and repositories
"""
