"""Configuration package for the Protozoa core.

Constants are grouped by the subsystem that consumes them. Tunables that
callers are expected to override are exposed as dataclasses next to the code
that reads them (for example ``protozoa.evolution.mutation.MutationConfig``).
"""
