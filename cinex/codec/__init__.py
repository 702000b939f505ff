"""
cinex.codec - EXPORT format codec.

Decoder (text to record graph) and encoder (record graph to text) for the
engine's fixed-schema cinema format, plus the shared tokenizer, field
binder, value formatter and action variant table.
"""

from __future__ import annotations
