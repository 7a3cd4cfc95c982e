"""Routing: literal and pattern route tables with deterministic precedence.

Exact literal routes always win. Pattern routes are tried in
registration order and must match the whole path.
"""
