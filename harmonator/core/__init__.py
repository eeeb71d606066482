"""Core pieces of harmonator.

Modules:
- modmath: 64-bit modular multiply / exponentiate
- sequence: one period of base**i mod m
- partials: oscillator parameters derived from a sequence
- oscilloscope, lissajous, plasma: the three renderers; render dispatches
- state: shared canvas config and sequence snapshots
- controller: background render loop
- stream: live "Term n: value" stream
"""
