"""Fixture package without any schema declarations."""

GREETING = "hello"
