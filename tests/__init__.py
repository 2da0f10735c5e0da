"""Test suite for doubleseq.

Test Structure:
- unit/sequence/: node helpers and DoubleLinkedSeq operations
- unit/script/: operation script models and replay
- unit/config/: config loading (JSON and YAML)
- unit/utils/: logging and formatting helpers
- unit/cli/: command-line entry points
"""
