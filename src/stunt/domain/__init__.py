"""Domain model for STUNT.

Pure value objects and rules: argument matchers, behavior policies, call-count
expectations, the invocation record and the error taxonomy. Nothing here
knows how a substitute object is built.

Dependency rule: this package does not import from other `stunt.*` packages.
"""
