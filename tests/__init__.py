"""
tests

Test suite for the novatel-decoder project.

Subpackages:
    - novatel_decoder: Tests for the field decoders, status decoders, bit tables,
      configuration and CLI
    - common: Tests for the shared status record models
"""
