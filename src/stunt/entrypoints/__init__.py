"""Entrypoints (inbound adapters) for STUNT.

Expose developer tooling around the engine, currently the command-line
interface. Parse and validate inputs, call into `stunt.contracts` and
`stunt.engine`, and present results.
"""
