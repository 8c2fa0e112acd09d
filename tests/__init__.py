"""Test suite for huekit.

Test Structure:
- unit/: Unit tests for individual components
  - color/: models, conversion, manipulation, analysis, harmony
  - curves/: easing curves
  - palette/: scale, semantic colors, generator, presets, cache, export
  - config/: config models and loaders
  - utils/: utility function tests
  - cli/: color parsing and command-line entry point
- conftest.py: Shared fixtures
"""
