"""Decorators: @optional."""

from klaw_option.decorators.optional import optional

__all__ = ['optional']
