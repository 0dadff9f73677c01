"""Kitchen roster package: monthly Morning/Afternoon shift generation for kitchen staff.

Modules:
- config: load and validate labor limits (YAML or JSON)
- domain: roles, shift types, employees and shift assignments
- services: coverage policy, role/fairness ordering, history index, constraint checks, day roster view
- engine: greedy month generator and orchestrator
- validator: post-generation roster validation and summaries
"""

__all__ = [
    "config",
    "domain",
    "services",
    "engine",
    "validator",
]
