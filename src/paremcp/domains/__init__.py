"""Domain-Driven Design bounded contexts for pare-mcp.

- Output Shaping Context: Full vs Compact response selection, size
  estimation and schema validation
- CLI Errors Context: classification of failed CLI runs
- Shared Kernel: base model for every structured result
"""
